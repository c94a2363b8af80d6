from bootcode import cli


def test_repairs_sample(sample_file, capsys):
    assert cli.main([str(sample_file)]) == 0
    assert capsys.readouterr().out.strip() == "Our accumulator hit 8"


def test_acc_only_program(tmp_path, capsys):
    path = tmp_path / "accs.txt"
    path.write_text("acc +1\n" * 6)
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Our accumulator hit 6"


def test_unreadable_input_runs_nothing(tmp_path, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "find_repair", lambda *a, **kw: calls.append(a))
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().out.strip() == "Something's wrong with the input file!"
    assert calls == []


def test_no_repair_found(tmp_path, capsys):
    path = tmp_path / "stuck.txt"
    path.write_text("nop +0\njmp -1\njmp -2\n")
    assert cli.main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("❌ No single jmp/nop swap")


def test_verbose_and_trace(sample_file, capsys):
    assert cli.main([str(sample_file), "--verbose", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "BOOT CODE DEBUGGER" in out
    assert "Loop path: [1, 2, 6, 7, 3, 4]" in out
    assert "Fixed position 7: 'jmp -4' → 'nop -4'" in out
    assert out.strip().endswith("Our accumulator hit 8")


def test_input_from_environment(sample_file, capsys, monkeypatch):
    monkeypatch.setenv("BOOTCODE_INPUT", str(sample_file))
    assert cli.main([]) == 0
    assert "Our accumulator hit 8" in capsys.readouterr().out


def test_bad_config(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("colour: red\n")
    assert cli.main(["--config", str(path)]) == 2
    assert "Bad configuration" in capsys.readouterr().out


def test_malformed_yaml_config(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("input: [unclosed\n")
    assert cli.main(["--config", str(path)]) == 2
    assert "not valid YAML" in capsys.readouterr().out


def test_mixed_type_unknown_keys(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("1: a\ncolour: b\n")
    assert cli.main(["--config", str(path)]) == 2
    assert "Unknown config keys" in capsys.readouterr().out
