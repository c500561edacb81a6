"""
Parser and jump-table builder.

Turns source text into a tuple of resolved instructions. Loop brackets are
matched in one pass with a stack of pending LoopStart positions; each side of
a pair stores the index of the instruction that follows its partner, so a
taken jump lands on the next instruction to execute.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import make_unmatched_close_error, make_unmatched_open_error
from .instruction import SIMPLE, Instruction, LoopEnd, LoopStart

logger = logging.getLogger(__name__)

COMMANDS = frozenset("><+-.,[]")


def parse(source: str) -> Tuple[Instruction, ...]:
    """
    Parse source text into a resolved instruction sequence.

    Any character outside COMMANDS is a comment and is skipped.

    Raises:
        UnmatchedCloseBracket: a "]" with no open "[" before it.
        UnmatchedOpenBracket: a "[" still open at the end of the source.
    """
    result: List[Instruction] = []
    # (emission index, raw source offset) of each open bracket
    pending: List[Tuple[int, int]] = []

    for offset, ch in enumerate(source):
        if ch == '[':
            pending.append((len(result), offset))
            result.append(LoopStart(-1))
        elif ch == ']':
            if not pending:
                raise make_unmatched_close_error(source=source, index=offset)
            start, _ = pending.pop()
            current = len(result)
            result[start] = LoopStart(current + 1)
            result.append(LoopEnd(start + 1))
        elif ch in SIMPLE:
            result.append(SIMPLE[ch])

    if pending:
        _, offset = pending[-1]
        raise make_unmatched_open_error(source=source, index=offset)

    logger.debug("parsed %d instructions from %d characters", len(result), len(source))
    return tuple(result)
