"""Rational functions in one indeterminate over the integers."""

from typing import Optional, Tuple

from rrefsteps.errors import DivisionByZero
from rrefsteps.field import gcd
from rrefsteps.polynomial import DEFAULT_SYMBOL, Polynomial


def _reduce(numerator: Polynomial, denominator: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """Divide out the common monomial factor of a numerator/denominator pair.

    The common factor is ``scalar * x^power`` where ``scalar`` is the gcd of
    both coefficient gcds and ``power`` is the smaller of the two lowest
    nonzero powers. The scalar carries the sign of the denominator's leading
    coefficient, so reduced denominators always lead with a positive term.
    High-degree zero coefficients are trimmed from both sides and a zero
    numerator collapses to the canonical 0/1.
    """
    if numerator.equals_zero() and not denominator.equals_zero():
        return Polynomial.zero(), Polynomial.one()
    numerator, denominator = numerator.trimmed(), denominator.trimmed()

    num_scalar, num_power = numerator.common_factor()
    den_scalar, den_power = denominator.common_factor()

    scalar = gcd(num_scalar, den_scalar)
    power = min(num_power, den_power)
    if denominator.coefficients[denominator.degree] < 0:
        scalar = -scalar

    numerator = numerator.divide_by_power(power)
    denominator = denominator.divide_by_power(power)

    # 0/0 has no scalar factor to remove.
    if scalar not in (0, 1):
        numerator = numerator.divide_by_scalar(scalar)
        denominator = denominator.divide_by_scalar(scalar)
    return numerator, denominator


class PolynomialFraction:
    """Ratio of two integer polynomials, i.e. a rational function in ``x``.

    Construction simplifies by default (see :func:`_reduce`); pass
    ``simplify=False`` to keep the operands exactly as given. Simplification
    only removes monomial factors, so ``(x + 1)/(x + 1)`` is kept as is and
    :meth:`equals_one` still recognises it.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(
        self,
        numerator: Polynomial,
        denominator: Optional[Polynomial] = None,
        simplify: bool = True,
    ):
        if denominator is None:
            denominator = Polynomial.one()
        if simplify:
            numerator, denominator = _reduce(numerator, denominator)
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def from_int(cls, value: int) -> "PolynomialFraction":
        return cls(Polynomial((value,)))

    @classmethod
    def zero(cls) -> "PolynomialFraction":
        return cls(Polynomial.zero())

    @classmethod
    def one(cls) -> "PolynomialFraction":
        return cls(Polynomial.one())

    @classmethod
    def variable(cls) -> "PolynomialFraction":
        """The indeterminate ``x`` as a fraction over 1."""
        return cls(Polynomial.monomial(1, 1))

    @property
    def numerator(self) -> Polynomial:
        return self._numerator

    @property
    def denominator(self) -> Polynomial:
        return self._denominator

    def simplify(self) -> "PolynomialFraction":
        return PolynomialFraction(self._numerator, self._denominator)

    def add(self, other: "PolynomialFraction") -> "PolynomialFraction":
        return PolynomialFraction(
            self._numerator.multiply(other._denominator).add(
                other._numerator.multiply(self._denominator)
            ),
            self._denominator.multiply(other._denominator),
        )

    def multiply(self, other: "PolynomialFraction") -> "PolynomialFraction":
        return PolynomialFraction(
            self._numerator.multiply(other._numerator),
            self._denominator.multiply(other._denominator),
        )

    def subtract(self, other: "PolynomialFraction") -> "PolynomialFraction":
        return self.add(other.additive_inverse())

    def divide(self, other: "PolynomialFraction") -> "PolynomialFraction":
        return self.multiply(other.multiplicative_inverse())

    def additive_inverse(self) -> "PolynomialFraction":
        return PolynomialFraction(self._numerator.additive_inverse(), self._denominator)

    def multiplicative_inverse(self) -> "PolynomialFraction":
        if self._numerator.equals_zero():
            raise DivisionByZero("Zero has no multiplicative inverse")
        return PolynomialFraction(self._denominator, self._numerator)

    def equals_zero(self) -> bool:
        return self._numerator.equals_zero()

    def equals_one(self) -> bool:
        return self._numerator == self._denominator

    def to_sympy(self, symbol: str = DEFAULT_SYMBOL):
        return self._numerator.to_sympy(symbol) / self._denominator.to_sympy(symbol)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = additive_inverse

    def __eq__(self, other):
        if not isinstance(other, PolynomialFraction):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __str__(self):
        if self._denominator.equals_one():
            return str(self._numerator)
        return f"({self._numerator})/({self._denominator})"

    def __repr__(self):
        return f"PolynomialFraction({self._numerator!r}, {self._denominator!r})"
