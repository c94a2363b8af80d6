from typing import Dict, List

from bootcode.errors import LoopPathError


def extract_loop(transitions: Dict[int, int], loop_start: int) -> List[int]:
    """Follow the transition map from loop_start until it comes back to loop_start.

    Returns the positions on the loop in visiting order, loop_start first, each
    exactly once. Raises LoopPathError when the map does not close a loop
    through loop_start.
    """
    if loop_start not in transitions:
        raise LoopPathError(f"Position {loop_start} was never visited; no loop starts there")

    path: List[int] = []
    position = loop_start
    while True:
        path.append(position)
        if len(path) > len(transitions):
            raise LoopPathError(f"Transitions from {loop_start} never return to it: {path}")
        next_position = transitions.get(position)
        if next_position is None:
            raise LoopPathError(f"Loop from {loop_start} breaks off at position {position}")
        if next_position == loop_start:
            return path
        position = next_position
