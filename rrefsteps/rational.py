"""Exact rational numbers.

A :class:`Rational` is always stored in lowest terms with a positive
denominator, so structural equality is value equality.
"""

from rrefsteps.errors import DivisionByZero
from rrefsteps.field import gcd


class Rational:
    """Exact fraction of two integers.

    Values are immutable and always stored in lowest terms with a positive
    denominator; zero is stored as ``0/1``.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError(
                f"Rational expects integers, got {numerator!r}/{denominator!r}"
            )
        if denominator == 0:
            raise DivisionByZero(f"Rational {numerator}/0 has a zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(numerator, denominator)
        self._numerator = numerator // g
        self._denominator = denominator // g

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def add(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._denominator
            + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        return self.add(other.additive_inverse())

    def multiply(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        """Return ``self / other``.

        Raises:
            DivisionByZero: If ``other`` is zero.
        """
        if other.equals_zero():
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return self.multiply(other.multiplicative_inverse())

    def additive_inverse(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def multiplicative_inverse(self) -> "Rational":
        if self._numerator == 0:
            raise DivisionByZero("Zero has no multiplicative inverse")
        return Rational(self._denominator, self._numerator)

    def equals_zero(self) -> bool:
        return self._numerator == 0

    def equals_one(self) -> bool:
        return self._numerator == self._denominator

    def to_float(self) -> float:
        return self._numerator / self._denominator

    def to_sympy(self):
        import sympy as sp
        return sp.Rational(self._numerator, self._denominator)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = additive_inverse
    __float__ = to_float

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self):
        return f"Rational({self._numerator}, {self._denominator})"
