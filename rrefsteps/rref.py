"""Gauss-Jordan reduction as a resumable stream of row operations.

:class:`RrefSteps` walks the usual pivot loop over a private working copy:

* find the first row at or below ``pivot_row`` whose entry in
  ``pivot_col`` is nonzero, and swap it up if needed;
* scale the pivot row by the inverse of the pivot unless that inverse is
  already one;
* add a multiple of the pivot row to every other row to clear the pivot
  column. A replacement is emitted for every other row, including those
  whose multiplier is zero, so the trace always has one entry per row.

Pivots are chosen as the first nonzero entry, never by magnitude, since
entries are exact values with no ordering. The iterator keeps its position
in explicit fields rather than in a generator frame, so a consumer may pull
any number of steps, inspect ``pivot_row``/``pivot_col``, and simply stop.
"""

import enum
import logging
from typing import TYPE_CHECKING, Iterator, Optional

from rrefsteps.field import F
from rrefsteps.steps import Replace, Scale, Step, StepInfo, Swap

if TYPE_CHECKING:
    from rrefsteps.matrix import Matrix

logger = logging.getLogger(__name__)


class _Phase(enum.Enum):
    LOCATE = "locate"
    SCALE = "scale"
    ELIMINATE = "eliminate"


class RrefSteps(Iterator[Step[F]]):
    """Forward-only, single-pass iterator over RREF steps.

    Args:
        matrix: Matrix to reduce. It is copied on construction and never
            modified; every step works on the private copy.
    """

    def __init__(self, matrix: "Matrix[F]"):
        self._work = matrix.copy()
        self._pivot_row = 0
        self._pivot_col = 0
        self._phase = _Phase.LOCATE
        self._next_row = 0

    @property
    def pivot_row(self) -> int:
        return self._pivot_row

    @property
    def pivot_col(self) -> int:
        return self._pivot_col

    def __iter__(self) -> "RrefSteps[F]":
        return self

    def _find_pivot(self) -> Optional[int]:
        col = self._pivot_col
        for row in range(self._pivot_row, self._work.rows):
            if not self._work.get(row, col).equals_zero():
                return row
        return None

    def _emit(self, info: StepInfo) -> Step[F]:
        info.apply(self._work)
        logger.debug("rref step: %s", info)
        return Step(info=info, result=self._work.copy())

    def __next__(self) -> Step[F]:
        work = self._work
        while self._pivot_row < work.rows and self._pivot_col < work.cols:
            if self._phase is _Phase.LOCATE:
                found = self._find_pivot()
                if found is None:
                    self._pivot_col += 1
                    continue
                logger.debug(
                    "pivot for column %d found in row %d", self._pivot_col, found
                )
                self._phase = _Phase.SCALE
                if found != self._pivot_row:
                    return self._emit(Swap(self._pivot_row, found))

            elif self._phase is _Phase.SCALE:
                self._phase = _Phase.ELIMINATE
                self._next_row = 0
                pivot = work.get(self._pivot_row, self._pivot_col)
                scale = pivot.multiplicative_inverse()
                if not scale.equals_one():
                    return self._emit(Scale(self._pivot_row, scale))

            else:
                if self._next_row == self._pivot_row:
                    self._next_row += 1
                if self._next_row < work.rows:
                    row = self._next_row
                    self._next_row += 1
                    multiplier = work.get(row, self._pivot_col).additive_inverse()
                    return self._emit(Replace(row, self._pivot_row, multiplier))
                self._pivot_row += 1
                self._pivot_col += 1
                self._phase = _Phase.LOCATE
        raise StopIteration
