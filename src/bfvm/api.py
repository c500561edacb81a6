from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .interpreter import Interpreter
from .state import DEFAULT_MEMORY_SIZE


@dataclass(frozen=True)
class RunOptions:
    memory_size: int = DEFAULT_MEMORY_SIZE
    max_steps: Optional[int] = None
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: str
    tape: List[int]
    data_index: int
    steps: int
    trace: Tuple[str, ...] = ()


def run_string(
    source: str,
    *,
    input: str = "",
    data: Optional[Sequence[int]] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    interpreter = Interpreter(source, data, input, opts.memory_size, trace=opts.trace)
    interpreter.run(max_steps=opts.max_steps)
    return RunResult(
        output=interpreter.output,
        tape=interpreter.tape,
        data_index=interpreter.data_index,
        steps=interpreter.steps,
        trace=tuple(interpreter.trace),
    )


def run_file(
    path: str | Path,
    *,
    input: str = "",
    data: Optional[Sequence[int]] = None,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), input=input, data=data, options=options)
