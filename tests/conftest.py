import pytest

from bootcode.instructions import parse_program

SAMPLE = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


@pytest.fixture
def sample_program():
    return parse_program(SAMPLE)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "instructions.txt"
    path.write_text(SAMPLE)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so monkeypatch restores absence even if a .env sets them
    for name in ("BOOTCODE_INPUT", "BOOTCODE_VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
