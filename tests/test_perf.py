"""Performance sanity checks for the RREF step engine.

These tests verify that runtime does not regress catastrophically.
They use generous wall-clock bounds and are marked ``perf`` so they
are excluded from the default test run.

Run with: pytest -m perf
"""

import time

import numpy as np
import pytest

from rrefsteps.matrix import Matrix
from rrefsteps.rational import Rational
from tests.helpers import make_random_fraction_matrix, verify_rref_structure


@pytest.mark.perf
class TestPerformanceSanity:
    """Wall-clock sanity checks for representative sizes."""

    CASES = [
        pytest.param(6, 6, 2.0, id="6x6"),
        pytest.param(10, 10, 10.0, id="10x10"),
        pytest.param(8, 12, 10.0, id="8x12"),
    ]

    @pytest.mark.parametrize("nrows, ncols, max_seconds", CASES)
    def test_rational_runtime_bound(
        self,
        nrows: int,
        ncols: int,
        max_seconds: float,
    ) -> None:
        np.random.seed(42)
        data = np.random.randint(-9, 10, size=(nrows, ncols))
        M = Matrix.from_rows([[Rational(int(x)) for x in row] for row in data])

        t0 = time.perf_counter()
        R = M.compute_rref()
        elapsed = time.perf_counter() - t0

        # Verify correctness so timing doesn't mask a bug
        assert verify_rref_structure(R)

        assert elapsed < max_seconds, (
            f"{nrows}x{ncols} took {elapsed:.2f}s "
            f"(limit {max_seconds:.1f}s)"
        )

    def test_fraction_runtime_bound(self, seeded_rng) -> None:
        M = make_random_fraction_matrix(4, 4)

        t0 = time.perf_counter()
        R = M.compute_rref()
        elapsed = time.perf_counter() - t0

        assert verify_rref_structure(R)
        assert elapsed < 30.0, f"4x4 fractions took {elapsed:.2f}s"
