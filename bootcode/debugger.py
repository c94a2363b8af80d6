#!/usr/bin/env python3
"""
Boot Code Step-by-Step Debugger

Shows the step-by-step execution of a boot code program, displaying the
listing around the current position, the accumulator and the visited
positions at each step, and how the run ended.
"""

from typing import Optional

from bootcode.instructions import format_instruction, load_program
from bootcode.interpreter import BootCodeInterpreter, RunResult


class BootCodeDebugger(BootCodeInterpreter):
    """Boot code interpreter with step-by-step output."""

    def __init__(self, program, show_listing_range=7):
        super().__init__(program)
        self.show_listing_range = show_listing_range
        self.step_count = 0

    def debug_run(self, swap_at: Optional[int] = None) -> RunResult:
        """Execute the program, printing the state after every step."""
        print(f"🐛 BOOT CODE DEBUGGER")
        print(f"Program: {len(self.program)} instructions")
        if swap_at is not None:
            print(f"Swapping jmp/nop at position {swap_at}")
        print("=" * 60)

        transitions = {}
        accumulator = 0
        position = 0
        self.step_count = 0

        self._show_state(position, accumulator, transitions, "INITIAL")

        while position not in transitions and position < len(self.program):
            instr = self.program[position]
            next_position, accumulator = self.step(position, accumulator, swap_at)
            self.step_count += 1

            swapped = " (swapped)" if position == swap_at and instr.swappable else ""
            print(f"\nStep {self.step_count}: Execute '{format_instruction(instr)}'{swapped} at position {position}")
            print(f"  → position {next_position}, ACC = {accumulator}")

            transitions[position] = next_position
            position = next_position
            self._show_state(position, accumulator, transitions, f"AFTER STEP {self.step_count}")

        if position in transitions:
            print(f"\n⚠️ Loop detected: position {position} would run a second time")
            result = RunResult(accumulator, position, transitions)
        else:
            print(f"\n🎯 Terminated normally at position {position}")
            result = RunResult(accumulator, None, transitions)
        print(f"Accumulator: {accumulator}")
        return result

    def _show_state(self, position, accumulator, transitions, label):
        """Show the listing around the current position."""
        print(f"\n{label}:")

        start = max(0, position - self.show_listing_range // 2)
        end = min(len(self.program), start + self.show_listing_range)
        if end - start < self.show_listing_range:
            start = max(0, end - self.show_listing_range)

        for i in range(start, end):
            pointer = "→" if i == position else " "
            seen = "*" if i in transitions else " "
            print(f"  {pointer}{seen}{i:4d}: {format_instruction(self.program[i])}")
        if position >= len(self.program):
            print(f"  →  {position:4d}: [END]")
        print(f"ACC: {accumulator}   Visited: {len(transitions)}")


if __name__ == "__main__":
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else "instructions.txt"
    swap = int(sys.argv[2]) if len(sys.argv) > 2 else None
    BootCodeDebugger(load_program(path)).debug_run(swap)
