#!/usr/bin/env python3
"""
Boot Code Interpreter

Runs a boot code program from position 0 with the accumulator at 0 and stops
in one of two ways:
    terminated   the position moved past the last instruction
    looped       an instruction was about to run for the second time

Every run records where each visited position went next (the transition
map). A position is recorded only on its first visit, so hitting a recorded
position again is exactly how an infinite loop is detected. No step limit is
needed: a program of N instructions stops within N + 1 steps.

One position can be marked as swapped for a single run, which makes its jmp
behave as a nop or its nop behave as a jmp. The program itself is never
modified.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from bootcode.instructions import Instruction, Op, format_instruction


@dataclass
class RunResult:
    accumulator: int
    looped_at: Optional[int] = None
    transitions: Dict[int, int] = field(default_factory=dict)

    @property
    def terminated(self) -> bool:
        return self.looped_at is None


def jump_target(position: int, offset: int) -> int:
    """Relative jump. A target before the first instruction is clamped to 0.

    Puzzle inputs are not known to reach this, so it is unusual but defined:
    it is a floor, not a wraparound.
    """
    return max(0, position + offset)


class BootCodeInterpreter:
    def __init__(self, program: Sequence[Instruction]):
        self.program = tuple(program)

    def step(self, position: int, accumulator: int, swap_at: Optional[int] = None):
        """Execute the instruction at position; returns (next_position, accumulator)."""
        instr = self.program[position]
        op = instr.op
        if position == swap_at and instr.swappable:
            op = instr.swapped().op

        if op is Op.ACC:
            return position + 1, accumulator + instr.arg
        elif op is Op.JMP:
            return jump_target(position, instr.arg), accumulator
        elif op is Op.NOP:
            return position + 1, accumulator
        raise ValueError(f"Unknown op {op!r} at position {position}")

    def run(self, swap_at: Optional[int] = None, debug: bool = False) -> RunResult:
        """Run the program once, optionally with one jmp/nop swapped."""
        transitions: Dict[int, int] = {}
        accumulator = 0
        position = 0

        while True:
            if position in transitions:
                if debug:
                    print(f"Loop detected: position {position} already visited, ACC={accumulator}")
                return RunResult(accumulator, position, transitions)
            if position >= len(self.program):
                if debug:
                    print(f"Terminated at position {position}, ACC={accumulator}")
                return RunResult(accumulator, None, transitions)

            next_position, accumulator = self.step(position, accumulator, swap_at)
            if debug:
                instr = self.program[position]
                marker = " (swapped)" if position == swap_at and instr.swappable else ""
                print(f"Step {len(transitions):3d}: POS={position:3d} OP='{format_instruction(instr)}'{marker} NEXT={next_position:3d} ACC={accumulator}")
            transitions[position] = next_position
            position = next_position


def execute(program: Sequence[Instruction], swap_at: Optional[int] = None) -> RunResult:
    """Run a program once with a fresh interpreter (no state is shared between calls)."""
    return BootCodeInterpreter(program).run(swap_at)
