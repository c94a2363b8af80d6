"""
Boot Code Instruction Set

The handheld boot code has only 3 instructions, one per line:
    acc +N   Add the signed operand to the accumulator, then go to the next line
    jmp +N   Jump relative to the current line by the signed operand
    nop +N   Do nothing and go to the next line (the operand is kept because a
             nop may be swapped into a jmp with the same operand)

Operands always carry an explicit sign. Lines that do not look like
`<op> <sign><number>` are ignored.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from bootcode.errors import InputUnreadableError


class Op(Enum):
    ACC = "acc"
    JMP = "jmp"
    NOP = "nop"


@dataclass(frozen=True)
class Instruction:
    op: Op
    arg: int = 0

    @property
    def swappable(self) -> bool:
        """Only jmp and nop have an alternate form."""
        return self.op is not Op.ACC

    def swapped(self) -> "Instruction":
        """Return the jmp<->nop counterpart of this instruction, same operand."""
        if self.op is Op.JMP:
            return Instruction(Op.NOP, self.arg)
        if self.op is Op.NOP:
            return Instruction(Op.JMP, self.arg)
        raise ValueError(f"Cannot swap '{format_instruction(self)}': acc has no alternate form")


Program = Tuple[Instruction, ...]

# One instruction per line: an op word and a signed token
INSTRUCTION_LINE = re.compile(r"^\s*([a-z]+)\s+([+-]\S*)\s*$")
OPERAND = re.compile(r"^[+-]?[0-9]+\Z")

_OPS_BY_NAME = {"acc": Op.ACC, "jmp": Op.JMP}


def parse_operand(text: str) -> int:
    """Parse a signed operand such as '+4' or '-99'.

    Lenient on purpose: anything that is not a valid integer becomes 0 instead
    of failing the whole program.
    """
    if not isinstance(text, str) or not OPERAND.match(text):
        return 0
    return int(text)


def parse_instruction(line: str) -> Optional[Instruction]:
    """Parse one line; returns None when the line is not an instruction.

    acc and jmp map to their own ops, any other op word is treated as nop.
    """
    match = INSTRUCTION_LINE.match(line)
    if not match:
        return None
    op = _OPS_BY_NAME.get(match.group(1), Op.NOP)
    return Instruction(op, parse_operand(match.group(2)))


def parse_program(text: str) -> Program:
    """Build a program from source text, skipping lines that are not instructions."""
    parsed = (parse_instruction(line) for line in text.splitlines())
    return tuple(instr for instr in parsed if instr is not None)


def load_program(path: str) -> Program:
    """Read and parse a program file.

    Raises InputUnreadableError if the file cannot be read.
    """
    try:
        with open(path, "r") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableError(path, e) from e
    return parse_program(text)


def format_instruction(instr: Instruction) -> str:
    return f"{instr.op.value} {instr.arg:+d}"
