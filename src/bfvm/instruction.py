from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


# ---------------- Instructions ----------------
@dataclass(frozen=True)
class MoveRight:
    def __str__(self) -> str:
        return ">"


@dataclass(frozen=True)
class MoveLeft:
    def __str__(self) -> str:
        return "<"


@dataclass(frozen=True)
class Increment:
    def __str__(self) -> str:
        return "+"


@dataclass(frozen=True)
class Decrement:
    def __str__(self) -> str:
        return "-"


@dataclass(frozen=True)
class Output:
    def __str__(self) -> str:
        return "."


@dataclass(frozen=True)
class Input:
    def __str__(self) -> str:
        return ","


@dataclass(frozen=True)
class LoopStart:
    end_index: int  # instruction right after the matching LoopEnd

    def __str__(self) -> str:
        return "["


@dataclass(frozen=True)
class LoopEnd:
    start_index: int  # instruction right after the matching LoopStart

    def __str__(self) -> str:
        return "]"


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopStart, LoopEnd]

# Payload-free instructions share one instance each.
SIMPLE = {
    ">": MoveRight(),
    "<": MoveLeft(),
    "+": Increment(),
    "-": Decrement(),
    ".": Output(),
    ",": Input(),
}


def format_program(instructions: Iterable[Instruction]) -> str:
    """Render a resolved sequence back to commands, one space apart."""
    return " ".join(str(i) for i in instructions)
