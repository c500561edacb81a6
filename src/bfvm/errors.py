from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, index: int) -> Tuple[int, int]:
    # 1-based line and column of a raw source offset.
    line = source.count('\n', 0, index) + 1
    column = index - (source.rfind('\n', 0, index) + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * (column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'open':
        return 'Every "[" needs a matching "]" later in the program.'
    if kind == 'close':
        return 'This "]" has no "[" before it. Remove it or add the missing "[".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


# ---------------- Parse errors ----------------
@dataclass
class ParseError(BFError):
    index: int
    line: int
    column: int
    context: str


@dataclass
class UnmatchedOpenBracket(ParseError):
    pass


@dataclass
class UnmatchedCloseBracket(ParseError):
    pass


def _make_parse_error(cls, *, message: str, source: str, index: int, kind: str) -> ParseError:
    line, column = _locate(source, index)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"ParseError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        index=index,
        line=line,
        column=column,
        context=ctx,
    )


def make_unmatched_open_error(*, source: str, index: int) -> UnmatchedOpenBracket:
    return _make_parse_error(
        UnmatchedOpenBracket, message="unmatched '['", source=source, index=index, kind='open'
    )


def make_unmatched_close_error(*, source: str, index: int) -> UnmatchedCloseBracket:
    return _make_parse_error(
        UnmatchedCloseBracket, message="unmatched ']'", source=source, index=index, kind='close'
    )


# ---------------- Runtime errors ----------------
@dataclass
class BFRuntimeError(BFError):
    instruction_index: int


@dataclass
class InvalidDataIndex(BFRuntimeError):
    data_index: int

    @classmethod
    def at(cls, *, instruction_index: int, data_index: int) -> "InvalidDataIndex":
        return cls(
            message=f"RuntimeError: data pointer {data_index} is out of range "
                    f"(instruction {instruction_index})",
            instruction_index=instruction_index,
            data_index=data_index,
        )


@dataclass
class InvalidInstructionIndex(BFRuntimeError):
    proposed_index: int

    @classmethod
    def at(cls, *, instruction_index: int, proposed_index: int) -> "InvalidInstructionIndex":
        return cls(
            message=f"RuntimeError: jump target {proposed_index} is out of range "
                    f"(instruction {instruction_index})",
            instruction_index=instruction_index,
            proposed_index=proposed_index,
        )


@dataclass
class StepLimitExceeded(BFRuntimeError):
    max_steps: int

    @classmethod
    def at(cls, *, instruction_index: int, max_steps: int) -> "StepLimitExceeded":
        return cls(
            message=f"RuntimeError: step limit of {max_steps} reached without halting "
                    f"(instruction {instruction_index})",
            instruction_index=instruction_index,
            max_steps=max_steps,
        )
