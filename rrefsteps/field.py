"""Integer gcd helpers and the field contract used by the RREF engine.

Every concrete value type stored in a :class:`~rrefsteps.matrix.Matrix`
must satisfy :class:`Field`. The engine only ever calls the seven methods
listed there; it never compares magnitudes or inspects concrete types.
"""

from typing import Iterable, Protocol, TypeVar


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``a`` and ``b`` via Euclid's algorithm.

    The result is always non-negative and ``gcd(0, 0) == 0``.
    """
    r0, r1 = abs(a), abs(b)
    while r1 != 0:
        r0, r1 = r1, r0 % r1
    return r0


def gcd_all(values: Iterable[int]) -> int:
    """Fold :func:`gcd` over ``values``, starting from 0."""
    result = 0
    for val in values:
        result = gcd(result, val)
    return result


F = TypeVar("F", bound="Field")


class Field(Protocol):
    """Capability set required from matrix entries."""

    def add(self: F, other: F) -> F:
        ...

    def multiply(self: F, other: F) -> F:
        ...

    def equals_zero(self) -> bool:
        ...

    def equals_one(self) -> bool:
        ...

    def additive_inverse(self: F) -> F:
        ...

    def multiplicative_inverse(self: F) -> F:
        """Raises :class:`~rrefsteps.errors.DivisionByZero` on zero."""
        ...

    def __str__(self) -> str:
        ...
