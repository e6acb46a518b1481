"""Dense matrices over any :class:`~rrefsteps.field.Field`.

Entries live in a private NumPy object array; reads and writes go through
:meth:`Matrix.get`, :meth:`Matrix.set` and the in-place row primitives,
all of which check bounds strictly.
"""

from dataclasses import InitVar, dataclass
from typing import Generic, Iterator, List, Sequence, Tuple

import numpy as np

from rrefsteps.errors import OutOfBoundsAccess
from rrefsteps.field import F
from rrefsteps.rref import RrefSteps


@dataclass(eq=False)
class Matrix(Generic[F]):
    """An ``rows x cols`` grid of field values.

    The entry grid is copied into a private NumPy object array on
    construction, so a matrix never shares storage with its caller or with
    another matrix. Entries themselves are immutable values and are shared
    freely. The array is not exposed; use :meth:`get`, :meth:`row` or
    :meth:`tolist` to read entries.
    """

    rows: int
    cols: int
    entries: InitVar[Sequence[Sequence[F]]]

    def __post_init__(self, entries: Sequence[Sequence[F]]):
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"Invalid shape {self.rows}x{self.cols}")
        if len(entries) != self.rows:
            raise ValueError(
                f"Expected {self.rows} rows, got {len(entries)}"
            )
        grid = np.empty((self.rows, self.cols), dtype=object)
        for i, row in enumerate(entries):
            if len(row) != self.cols:
                raise ValueError("All rows must have the same length")
            for j, value in enumerate(row):
                grid[i, j] = value
        self._data = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[F]]) -> "Matrix[F]":
        nrows = len(rows)
        ncols = len(rows[0]) if nrows else 0
        return cls(nrows, ncols, rows)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def nrows(self) -> int:
        return self.rows

    @property
    def ncols(self) -> int:
        return self.cols

    def copy(self) -> "Matrix[F]":
        return Matrix(self.rows, self.cols, self._data)

    def tolist(self) -> List[List[F]]:
        return self._data.tolist()

    def row(self, row: int) -> Tuple[F, ...]:
        self._check_row(row)
        return tuple(self._data[row])

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise OutOfBoundsAccess(
                f"Row {row} outside a {self.rows}x{self.cols} matrix"
            )

    def _check_cell(self, row: int, col: int) -> None:
        self._check_row(row)
        if not 0 <= col < self.cols:
            raise OutOfBoundsAccess(
                f"Column {col} outside a {self.rows}x{self.cols} matrix"
            )

    def get(self, row: int, col: int) -> F:
        self._check_cell(row, col)
        return self._data[row, col]

    def set(self, row: int, col: int, value: F) -> F:
        self._check_cell(row, col)
        self._data[row, col] = value
        return value

    # In-place row primitives. Each returns self for chaining.

    def swap_rows(self, row1: int, row2: int) -> "Matrix[F]":
        self._check_row(row1)
        self._check_row(row2)
        self._data[[row1, row2]] = self._data[[row2, row1]]
        return self

    def scale_row(self, row: int, factor: F) -> "Matrix[F]":
        """In-place: ``row <- factor * row``."""
        self._check_row(row)
        data = self._data
        for c in range(self.cols):
            data[row, c] = data[row, c].multiply(factor)
        return self

    def replace_row(self, dest_row: int, src_row: int, factor: F) -> "Matrix[F]":
        """In-place: ``dest_row <- dest_row + factor * src_row``."""
        self._check_row(dest_row)
        self._check_row(src_row)
        data = self._data
        for c in range(self.cols):
            data[dest_row, c] = data[dest_row, c].add(data[src_row, c].multiply(factor))
        return self

    def generate_rref_steps(self) -> RrefSteps[F]:
        """Lazily yield the Gauss-Jordan steps that reduce this matrix.

        The traversal works on its own copy; ``self`` is left untouched.
        """
        return RrefSteps(self)

    def compute_rref(self) -> "Matrix[F]":
        result = None
        for step in self.generate_rref_steps():
            result = step.result
        return result if result is not None else self.copy()

    def is_rref(self) -> bool:
        """Check the reduced row echelon conditions entry by entry."""
        last_pivot_col = -1
        zero_row_seen = False
        for r in range(self.rows):
            pivot_col = next(
                (c for c in range(self.cols) if not self._data[r, c].equals_zero()),
                None,
            )
            if pivot_col is None:
                zero_row_seen = True
                continue
            if zero_row_seen or pivot_col <= last_pivot_col:
                return False
            if not self._data[r, pivot_col].equals_one():
                return False
            for rr in range(self.rows):
                if rr != r and not self._data[rr, pivot_col].equals_zero():
                    return False
            last_pivot_col = pivot_col
        return True

    def __iter__(self) -> Iterator[Tuple[F, ...]]:
        return (tuple(row) for row in self._data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            a == b for a, b in zip(self._data.flat, other._data.flat)
        )

    def __str__(self):
        return "".join(
            " ".join(str(x) for x in row) + "\n" for row in self._data
        )

    def to_sympy(self):
        import sympy as sp
        if self.rows == 0 or self.cols == 0:
            return sp.zeros(self.rows, self.cols)
        return sp.Matrix([[x.to_sympy() for x in row] for row in self._data])

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
