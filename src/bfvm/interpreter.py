"""
Stepping execution engine.

An Interpreter owns one MachineState and a resolved instruction sequence.
`step()` runs a single instruction; `run()` steps until the instruction
pointer runs off the end of the program. Callers that need to bound a
runaway program either drive `step()` themselves or pass `max_steps`.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .errors import InvalidDataIndex, InvalidInstructionIndex, StepLimitExceeded
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
    format_program,
)
from .parser import parse
from .state import CELL_MODULUS, DEFAULT_MEMORY_SIZE, MachineState

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Interpreter for the eight-command tape language.

    Args:
        program: source text, or an already resolved instruction sequence.
        data: initial tape cells. When omitted the tape is `memory_size` zeros.
        input: characters consumed one by one by the "," instruction.
        memory_size: length of the zero tape, ignored when `data` is given.
        trace: keep one line per executed instruction in `trace`. The same
            lines go to the DEBUG log whenever it is enabled, stored or not.

    Source text is parsed first, so a ParseError escapes the constructor
    before any state exists. A resolved sequence is used as is.
    """

    def __init__(
        self,
        program: Union[str, Sequence[Instruction]],
        data: Optional[Sequence[int]] = None,
        input: str = "",
        memory_size: int = DEFAULT_MEMORY_SIZE,
        *,
        trace: bool = False,
    ):
        if isinstance(program, str):
            program = parse(program)
        self._instructions: Tuple[Instruction, ...] = tuple(program)
        self._state = MachineState.create(data, input, memory_size, is_tracing=trace)

    # ===== Inspection =====

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return self._instructions

    @property
    def tape(self) -> List[int]:
        return self._state.tape.tolist()

    @property
    def data_index(self) -> int:
        return self._state.data_index

    @property
    def instruction_index(self) -> int:
        return self._state.instruction_index

    @property
    def input_index(self) -> int:
        return self._state.input_index

    @property
    def output(self) -> str:
        return "".join(self._state.output)

    @property
    def has_output(self) -> bool:
        return bool(self._state.output)

    @property
    def steps(self) -> int:
        return self._state.steps

    @property
    def trace(self) -> List[str]:
        return list(self._state.trace)

    @property
    def is_halted(self) -> bool:
        return self._state.instruction_index >= len(self._instructions)

    # ===== Execution =====

    def run(self, max_steps: Optional[int] = None) -> None:
        """
        Step until halted.

        With `max_steps`, raise StepLimitExceeded once that many instructions
        have run in this call without the program halting.
        """
        executed = 0
        while not self.is_halted:
            if max_steps is not None and executed >= max_steps:
                logger.debug("step limit %d hit at instruction %d", max_steps, self.instruction_index)
                raise StepLimitExceeded.at(
                    instruction_index=self.instruction_index, max_steps=max_steps
                )
            self.step()
            executed += 1
        logger.debug("halted after %d steps, %d output chars", self.steps, len(self._state.output))

    def step(self) -> None:
        """Execute one instruction. Does nothing once halted."""
        if self.is_halted:
            return
        state = self._state
        instruction = self._instructions[state.instruction_index]
        # Advance first; a taken jump overwrites this.
        state.instruction_index += 1
        try:
            self._execute(instruction)
        except (InvalidDataIndex, InvalidInstructionIndex) as exc:
            logger.debug("%s", exc)
            raise
        state.steps += 1
        if state.is_tracing or logger.isEnabledFor(logging.DEBUG):
            self._record(instruction)

    def _execute(self, instruction: Instruction) -> None:
        state = self._state
        if isinstance(instruction, MoveRight):
            state.data_index += 1
            state.ensure_cell()
        elif isinstance(instruction, MoveLeft):
            if state.data_index - 1 < 0:
                raise InvalidDataIndex.at(
                    instruction_index=state.instruction_index, data_index=state.data_index - 1
                )
            state.data_index -= 1
        elif isinstance(instruction, Increment):
            state.ensure_cell()
            current = int(state.tape[state.data_index])
            state.tape[state.data_index] = (current + 1) % CELL_MODULUS
        elif isinstance(instruction, Decrement):
            state.ensure_cell()
            current = int(state.tape[state.data_index])
            state.tape[state.data_index] = (current - 1) % CELL_MODULUS
        elif isinstance(instruction, Output):
            if state.data_index >= len(state.tape):
                raise InvalidDataIndex.at(
                    instruction_index=state.instruction_index, data_index=state.data_index
                )
            state.output.append(chr(int(state.tape[state.data_index])))
        elif isinstance(instruction, Input):
            self._read_input()
        elif isinstance(instruction, LoopStart):
            if state.current_is_zero:
                self._jump(instruction.end_index)
        elif isinstance(instruction, LoopEnd):
            if not state.current_is_zero:
                self._jump(instruction.start_index)

    def _read_input(self) -> None:
        state = self._state
        state.ensure_cell()
        value = 0
        if state.input_index < len(state.input):
            code = ord(state.input[state.input_index])
            # Characters that do not fit in a cell read as 0.
            if code < CELL_MODULUS:
                value = code
            state.input_index += 1
        state.tape[state.data_index] = value

    def _jump(self, target: int) -> None:
        # len(instructions) is the halt position, so it is a valid target.
        if not 0 <= target <= len(self._instructions):
            raise InvalidInstructionIndex.at(
                instruction_index=self._state.instruction_index, proposed_index=target
            )
        self._state.instruction_index = target

    def _record(self, instruction: Instruction) -> None:
        state = self._state
        cell = int(state.tape[state.data_index]) if state.data_index < len(state.tape) else 0
        message = (
            f"{state.steps:6d} {instruction} ip={state.instruction_index} "
            f"ptr={state.data_index} cell={cell}"
        )
        state.add_trace(message)
        logger.debug("%s", message)

    # ===== Debug dump =====

    def dump(self) -> str:
        """Tape, program and both pointers as a multi-line picture."""
        state = self._state
        cells = " ".join(f"{v:3d}" for v in state.tape.tolist())
        data_caret = " " * (state.data_index * 4 + 2) + "^"
        program = format_program(self._instructions)
        program_caret = " " * (state.instruction_index * 2) + "^"
        divider = "-" * max(len(cells), len(program), 1)
        return "\n".join([cells, data_caret, "", program, program_caret, "", divider, ""])

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return (
            f"Interpreter(instructions={len(self._instructions)}, "
            f"ip={self.instruction_index}, ptr={self.data_index}, steps={self.steps})"
        )
