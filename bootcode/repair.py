"""Find the single jmp/nop swap that lets a looping program terminate.

The search runs the program once, extracts the loop, and retries the program with
each jmp/nop on the loop swapped until a run terminates.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from bootcode.errors import NoRepairFoundError
from bootcode.instructions import Instruction
from bootcode.interpreter import BootCodeInterpreter
from bootcode.loop_path import extract_loop


@dataclass
class RepairResult:
    accumulator: int
    swapped_at: Optional[int] = None  # None when the program already terminated
    loop_start: Optional[int] = None
    loop_path: List[int] = field(default_factory=list)
    tried: List[int] = field(default_factory=list)

    @property
    def needed_repair(self) -> bool:
        return self.swapped_at is not None


def find_repair(program: Sequence[Instruction], verbose: bool = False) -> RepairResult:
    """Run the program, and if it loops, search the loop for the faulty jmp/nop.

    Raises NoRepairFoundError if no candidate on the loop makes it terminate.
    """
    interpreter = BootCodeInterpreter(program)
    first = interpreter.run()
    if first.terminated:
        if verbose:
            print(f"✅ Program terminates without repair (ACC={first.accumulator})")
        return RepairResult(first.accumulator)

    loop_path = extract_loop(first.transitions, first.looped_at)
    if verbose:
        print(f"🔁 Loop detected at position {first.looped_at} (ACC={first.accumulator})")
        print(f"   Loop path: {loop_path}")

    tried: List[int] = []
    for position in loop_path:
        # acc has no alternate form, so it can't be the broken instruction
        if not interpreter.program[position].swappable:
            continue
        tried.append(position)
        result = interpreter.run(swap_at=position)
        if verbose:
            outcome = "terminated" if result.terminated else f"loops at {result.looped_at}"
            print(f"   Swap at {position}: {outcome} (ACC={result.accumulator})")
        if result.terminated:
            return RepairResult(result.accumulator, position, first.looped_at, loop_path, tried)

    raise NoRepairFoundError(first.looped_at, tried)


def repair(program: Sequence[Instruction]) -> int:
    """Accumulator value after the program terminates, repairing it first if needed."""
    return find_repair(program).accumulator
