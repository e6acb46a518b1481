import random
from typing import List, Sequence

import numpy as np
import sympy as sp

from rrefsteps.fraction import PolynomialFraction
from rrefsteps.matrix import Matrix
from rrefsteps.polynomial import Polynomial
from rrefsteps.rational import Rational
from rrefsteps.steps import Step


def rational_matrix(rows: Sequence[Sequence[int]]) -> Matrix:
    """Build a Rational matrix from integer rows."""
    return Matrix.from_rows([[Rational(x) for x in row] for row in rows])


def fraction_matrix(rows: Sequence[Sequence[Sequence[int]]]) -> Matrix:
    """Build a PolynomialFraction matrix from coefficient lists."""
    return Matrix.from_rows(
        [[PolynomialFraction(Polynomial(coefs)) for coefs in row] for row in rows]
    )


def verify_rref_structure(M: Matrix) -> bool:
    """
    Check:
    - For each non-zero row, the first non-zero column index strictly increases.
    - Once a zero row appears, all later rows are zero.
    - Every leading entry is one and is the only non-zero entry in its column.
    """
    nrows, ncols = M.shape
    last_pivot_col = -1
    zero_row_seen = False

    for r in range(nrows):
        # find first non-zero entry in this row
        pivot_col = -1
        for c in range(ncols):
            if not M.get(r, c).equals_zero():
                pivot_col = c
                break

        if pivot_col == -1:
            zero_row_seen = True
            continue

        # non-zero row; we must not have seen a zero row before
        if zero_row_seen or pivot_col <= last_pivot_col:
            return False
        if not M.get(r, pivot_col).equals_one():
            return False
        for rr in range(nrows):
            if rr != r and not M.get(rr, pivot_col).equals_zero():
                return False
        last_pivot_col = pivot_col

    return True


def replay(original: Matrix, steps: List[Step]) -> List[Matrix]:
    """Re-apply each recorded operation to a copy of ``original``."""
    work = original.copy()
    states = []
    for step in steps:
        step.info.apply(work)
        states.append(work.copy())
    return states


def is_zero_sympy_matrix(M: sp.Matrix) -> bool:
    """True if every entry of a SymPy matrix cancels to zero."""
    return all(sp.cancel(x) == 0 for x in M)


def make_random_matrix(
    nrows: int,
    ncols: int,
    low: int = -5,
    high: int = 5,
) -> Matrix:
    """Generate a random matrix of small integer-valued rationals."""
    data = np.random.randint(low, high + 1, size=(nrows, ncols))
    return Matrix(nrows, ncols, [[Rational(int(x)) for x in row] for row in data])


def make_random_fraction_matrix(
    nrows: int,
    ncols: int,
    max_degree: int = 1,
) -> Matrix:
    """Generate a random matrix of small integer polynomials over 1."""
    rows = [
        [
            PolynomialFraction(
                Polynomial(random.randint(-3, 3) for _ in range(max_degree + 1))
            )
            for _ in range(ncols)
        ]
        for _ in range(nrows)
    ]
    return Matrix(nrows, ncols, rows)
