import pytest

from bootcode.errors import LoopPathError
from bootcode.interpreter import execute
from bootcode.loop_path import extract_loop


def test_sample_loop_path(sample_program):
    result = execute(sample_program)
    path = extract_loop(result.transitions, result.looped_at)
    assert path == [1, 2, 6, 7, 3, 4]
    assert result.transitions[path[-1]] == path[0]
    assert len(path) == len(set(path))


def test_self_loop():
    assert extract_loop({0: 0}, 0) == [0]


def test_loop_not_starting_at_zero():
    transitions = {0: 1, 1: 2, 2: 3, 3: 1}
    assert extract_loop(transitions, 1) == [1, 2, 3]


def test_missing_start_raises():
    with pytest.raises(LoopPathError):
        extract_loop({0: 1}, 5)


def test_broken_chain_raises():
    with pytest.raises(LoopPathError):
        extract_loop({0: 1, 1: 2}, 0)


def test_cycle_not_through_start_raises():
    # 0 leads into the 1 <-> 2 cycle and never comes back
    with pytest.raises(LoopPathError):
        extract_loop({0: 1, 1: 2, 2: 1}, 0)
