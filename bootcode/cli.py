#!/usr/bin/env python3
"""
Run a boot code program and repair it if it loops.

    bootcode instructions.txt
    bootcode --verbose --trace puzzles/day8.txt
    bootcode --config run.yaml
"""

import argparse
import sys
from typing import List, Optional

from bootcode.config import resolve_config
from bootcode.debugger import BootCodeDebugger
from bootcode.errors import InputUnreadableError, NoRepairFoundError
from bootcode.instructions import format_instruction, load_program
from bootcode.repair import find_repair


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run boot code, detect its infinite loop and repair one jmp/nop")
    ap.add_argument("input", nargs="?", default=None, help="Program file (default: $BOOTCODE_INPUT or instructions.txt)")
    ap.add_argument("--config", default=None, help="Optional YAML file with input/verbose/trace settings")
    ap.add_argument("--verbose", action="store_true", default=None, help="Print the loop and every repair attempt")
    ap.add_argument("--trace", action="store_true", default=None, help="Step through the unmodified program first")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = resolve_config(args.config, input=args.input, verbose=args.verbose, trace=args.trace)
    except (OSError, ValueError) as e:
        print(f"❌ Bad configuration: {e}")
        return 2

    try:
        program = load_program(cfg.input)
    except InputUnreadableError as e:
        print("Something's wrong with the input file!")
        if cfg.verbose:
            print(f"  {e}")
        return 1

    if cfg.verbose:
        print(f"📄 Loaded {len(program)} instructions from {cfg.input}")
    if cfg.trace:
        BootCodeDebugger(program).debug_run()
        print()

    try:
        result = find_repair(program, verbose=cfg.verbose)
    except NoRepairFoundError as e:
        print(f"❌ {e}")
        return 1

    if cfg.verbose and result.needed_repair:
        original = program[result.swapped_at]
        print(f"🔧 Fixed position {result.swapped_at}: "
              f"'{format_instruction(original)}' → '{format_instruction(original.swapped())}'")
    print(f"Our accumulator hit {result.accumulator}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
