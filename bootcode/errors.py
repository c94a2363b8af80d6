"""Exceptions raised by the boot code tools.

Only InputUnreadableError and NoRepairFoundError reach the user; the CLI turns
them into a single error line. An unparseable operand is not an error at all
(see instructions.parse_operand), and a repair candidate that still loops is
simply skipped by the search.
"""

from typing import List, Optional


class BootCodeError(Exception):
    """Base class for every error raised by this package."""


class InputUnreadableError(BootCodeError):
    """The program source could not be read, so nothing was executed."""

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot read program from {path!r}{detail}")


class NoRepairFoundError(BootCodeError):
    """Every jmp/nop on the detected loop was swapped and the program still loops."""

    def __init__(self, loop_start: int, tried: List[int]):
        self.loop_start = loop_start
        self.tried = list(tried)
        super().__init__(
            f"No single jmp/nop swap fixes the loop at position {loop_start} "
            f"(tried {len(self.tried)} candidates: {self.tried})"
        )


class LoopPathError(BootCodeError, LookupError):
    """The transition map does not describe a closed loop through the start position."""
