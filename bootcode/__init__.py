"""Boot code interpreter with infinite-loop detection and single-instruction repair."""

from bootcode.errors import BootCodeError, InputUnreadableError, LoopPathError, NoRepairFoundError
from bootcode.instructions import Instruction, Op, Program, load_program, parse_program
from bootcode.interpreter import BootCodeInterpreter, RunResult, execute
from bootcode.loop_path import extract_loop
from bootcode.repair import RepairResult, find_repair, repair

__version__ = "0.1.0"
