from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .errors import BFRuntimeError, ParseError
from .interpreter import Interpreter
from .state import DEFAULT_MEMORY_SIZE

logger = logging.getLogger(__name__)

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def _env_max_steps() -> Optional[int]:
    raw = os.environ.get("BFVM_MAX_STEPS")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring non-integer BFVM_MAX_STEPS=%r", raw)
        return None


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("bfvm")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_source(source: str, args: argparse.Namespace) -> int:
    try:
        interpreter = Interpreter(source, input=args.input, memory_size=args.memory_size)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return EX_DATAERR

    status = EX_OK
    try:
        interpreter.run(max_steps=args.max_steps)
    except BFRuntimeError as exc:
        print(exc, file=sys.stderr)
        status = EX_SOFTWARE

    if interpreter.has_output:
        print(interpreter.output)
    if args.dump:
        print(interpreter.dump(), file=sys.stderr)
    return status


def run_file(path: str, args: argparse.Namespace) -> int:
    try:
        source = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Couldn't find file: {path}", file=sys.stderr)
        return EX_NOINPUT
    return run_source(source, args)


def run_prompt(args: argparse.Namespace) -> int:
    # Each line is a complete program; errors are reported and the prompt goes on.
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return EX_OK
        run_source(line, args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a tape-language program from a file, or start a prompt.",
    )
    parser.add_argument("script", nargs="*", help="program file (omit for a prompt)")
    parser.add_argument("--input", default="", help="characters fed to ',' in order")
    parser.add_argument(
        "--memory-size", type=int, default=DEFAULT_MEMORY_SIZE,
        help=f"initial tape length (default {DEFAULT_MEMORY_SIZE})",
    )
    parser.add_argument(
        "--max-steps", type=int, default=None,
        help="stop with an error after this many steps (default: $BFVM_MAX_STEPS or none)",
    )
    parser.add_argument("--dump", action="store_true", help="print the machine state after running")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging with a step trace")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.max_steps is None:
        args.max_steps = _env_max_steps()

    if len(args.script) > 1:
        print("Usage: bfvm [script]", file=sys.stderr)
        return EX_USAGE
    if args.script:
        return run_file(args.script[0], args)
    return run_prompt(args)


if __name__ == "__main__":
    raise SystemExit(main())
