"""Elementary row operations recorded by the RREF engine.

Each descriptor knows how to render itself for a step-by-step display and
how to re-apply itself to a matrix, so a trace can be replayed on a copy of
the original input.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Union

from rrefsteps.field import F

if TYPE_CHECKING:
    from rrefsteps.matrix import Matrix


@dataclass(frozen=True)
class Swap:
    row1: int
    row2: int

    def apply(self, matrix: "Matrix") -> "Matrix":
        return matrix.swap_rows(self.row1, self.row2)

    def __str__(self):
        return f"Swapped row {self.row1} with {self.row2}"


@dataclass(frozen=True)
class Scale(Generic[F]):
    row: int
    factor: F

    def apply(self, matrix: "Matrix") -> "Matrix":
        return matrix.scale_row(self.row, self.factor)

    def __str__(self):
        return f"Scaled row {self.row} by {self.factor}"


@dataclass(frozen=True)
class Replace(Generic[F]):
    """``dest_row <- dest_row + factor * src_row``."""

    dest_row: int
    src_row: int
    factor: F

    def apply(self, matrix: "Matrix") -> "Matrix":
        return matrix.replace_row(self.dest_row, self.src_row, self.factor)

    def __str__(self):
        return f"Replaced row {self.src_row} times {self.factor} into row {self.dest_row}"


StepInfo = Union[Swap, Scale, Replace]


@dataclass(frozen=True)
class Step(Generic[F]):
    """One row operation and the matrix snapshot right after it."""

    info: StepInfo
    result: "Matrix[F]"
