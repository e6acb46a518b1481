import random
from math import gcd as int_gcd

import pytest

from rrefsteps.field import gcd, gcd_all


def gcd_chain(*values):
    """Computes gcd over multiple integers using Python's math.gcd."""
    result = 0
    for val in values:
        result = int_gcd(result, val)
    return result


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(0, 0, 0, id="both-zero"),
        pytest.param(0, 7, 7, id="zero-left"),
        pytest.param(7, 0, 7, id="zero-right"),
        pytest.param(12, 18, 6, id="common"),
        pytest.param(18, 12, 6, id="order-swapped"),
        pytest.param(-12, 18, 6, id="negative-left"),
        pytest.param(12, -18, 6, id="negative-right"),
        pytest.param(17, 5, 1, id="coprime"),
    ],
)
def test_gcd_known_values(a, b, expected):
    assert gcd(a, b) == expected


def test_gcd_matches_math_gcd(seeded_rng):
    for _ in range(200):
        a = random.randint(-1000, 1000)
        b = random.randint(-1000, 1000)
        assert gcd(a, b) == int_gcd(a, b), f"gcd failed for {a},{b}"


def test_gcd_all_folds_from_zero():
    assert gcd_all([]) == 0
    assert gcd_all([0, 0, 0]) == 0
    assert gcd_all([0, 0, 6, 3, 6]) == 3
    assert gcd_all([4, -8, 12]) == gcd_chain(4, -8, 12)
