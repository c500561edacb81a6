from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

CELL_MODULUS = 256
DEFAULT_MEMORY_SIZE = 256


@dataclass
class MachineState:
    tape: np.ndarray = field(default_factory=lambda: np.zeros(DEFAULT_MEMORY_SIZE, dtype=np.uint8))
    data_index: int = 0
    instruction_index: int = 0
    input: str = ""
    input_index: int = 0
    output: List[str] = field(default_factory=list)
    steps: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    @classmethod
    def create(
        cls,
        data: Optional[Sequence[int]] = None,
        input: str = "",
        memory_size: int = DEFAULT_MEMORY_SIZE,
        *,
        is_tracing: bool = False,
    ) -> "MachineState":
        if data is None:
            tape = np.zeros(max(0, int(memory_size)), dtype=np.uint8)
        else:
            # Reduce explicitly so out-of-range values wrap instead of raising.
            tape = np.array([int(v) % CELL_MODULUS for v in data], dtype=np.uint8)
        return cls(tape=tape, input=input, is_tracing=is_tracing)

    @property
    def current_is_zero(self) -> bool:
        # Cells past the end read as zero; the tape does not grow here.
        return self.data_index >= len(self.tape) or int(self.tape[self.data_index]) == 0

    def ensure_cell(self) -> None:
        """Grow the tape with zero cells until the data pointer is inside it."""
        missing = self.data_index + 1 - len(self.tape)
        if missing > 0:
            self.tape = np.concatenate([self.tape, np.zeros(missing, dtype=np.uint8)])

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
