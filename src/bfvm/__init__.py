from .api import RunOptions, RunResult, run_file, run_string
from .errors import (
    BFError,
    BFRuntimeError,
    InvalidDataIndex,
    InvalidInstructionIndex,
    ParseError,
    StepLimitExceeded,
    UnmatchedCloseBracket,
    UnmatchedOpenBracket,
)
from .instruction import (
    Decrement,
    Increment,
    Input,
    Instruction,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
)
from .interpreter import Interpreter
from .parser import parse

__all__ = [
    'Interpreter',
    'parse',
    'Instruction',
    'MoveRight',
    'MoveLeft',
    'Increment',
    'Decrement',
    'Output',
    'Input',
    'LoopStart',
    'LoopEnd',
    'BFError',
    'ParseError',
    'UnmatchedOpenBracket',
    'UnmatchedCloseBracket',
    'BFRuntimeError',
    'InvalidDataIndex',
    'InvalidInstructionIndex',
    'StepLimitExceeded',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
