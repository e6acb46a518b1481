"""Dense integer polynomials in a single indeterminate.

Coefficients are stored lowest degree first, so ``Polynomial((3, 0, 5))``
is ``5x^2 + 3``. Only addition and :meth:`Polynomial.trimmed` drop
high-degree zeros; every other operation keeps the coefficient tuple at
the length it produces, and equality is structural on that tuple.
"""

from typing import Iterable, Tuple

from rrefsteps.field import gcd_all

DEFAULT_SYMBOL = "x"


class Polynomial:
    __slots__ = ("_coefs",)

    def __init__(self, coefficients: Iterable[int] = (0,)):
        coefs = tuple(coefficients)
        if not coefs:
            raise ValueError("A polynomial needs at least one coefficient")
        for c in coefs:
            if not isinstance(c, int):
                raise TypeError(f"Polynomial coefficients must be integers, got {c!r}")
        self._coefs = coefs

    @classmethod
    def zero(cls) -> "Polynomial":
        return cls((0,))

    @classmethod
    def one(cls) -> "Polynomial":
        return cls((1,))

    @classmethod
    def monomial(cls, coefficient: int, power: int) -> "Polynomial":
        """Return ``coefficient * x^power``."""
        if power < 0:
            raise ValueError(f"Negative power {power}")
        return cls((0,) * power + (coefficient,))

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefs

    @property
    def degree(self) -> int:
        for i in range(len(self._coefs) - 1, -1, -1):
            if self._coefs[i] != 0:
                return i
        return 0

    def multiply(self, other: "Polynomial") -> "Polynomial":
        a, b = self._coefs, other._coefs
        out = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            if ai == 0:
                continue
            for j, bj in enumerate(b):
                out[i + j] += ai * bj
        return Polynomial(out)

    def add(self, other: "Polynomial") -> "Polynomial":
        a, b = self._coefs, other._coefs
        size = max(len(a), len(b))
        out = [
            (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
            for i in range(size)
        ]
        # Drop trailing zeros but keep the constant term.
        while len(out) > 1 and out[-1] == 0:
            out.pop()
        return Polynomial(out)

    def additive_inverse(self) -> "Polynomial":
        return Polynomial(-c for c in self._coefs)

    def equals_zero(self) -> bool:
        return all(c == 0 for c in self._coefs)

    def equals_one(self) -> bool:
        return self._coefs == (1,)

    def common_factor(self) -> Tuple[int, int]:
        """Return ``(scalar, power)`` of the largest monomial dividing self.

        ``scalar`` is the gcd of all coefficients and ``power`` the lowest
        degree with a nonzero coefficient. The zero polynomial gives
        ``(0, 0)``.
        """
        power = 0
        for i, c in enumerate(self._coefs):
            if c != 0:
                power = i
                break
        return gcd_all(self._coefs), power

    def trimmed(self) -> "Polynomial":
        """Drop high-degree zero coefficients, keeping at least the constant term."""
        return Polynomial(self._coefs[: self.degree + 1])

    def divide_by_scalar(self, divisor: int) -> "Polynomial":
        """Divide every coefficient by ``divisor``, which must divide all of them."""
        return Polynomial(c // divisor for c in self._coefs)

    def divide_by_power(self, power: int) -> "Polynomial":
        """Divide by ``x^power``.

        ``power`` must not exceed the power reported by :meth:`common_factor`.
        """
        return Polynomial(self._coefs[power:])

    def to_sympy(self, symbol: str = DEFAULT_SYMBOL):
        import sympy as sp
        x = sp.Symbol(symbol)
        return sp.Add(*[c * x**i for i, c in enumerate(self._coefs)])

    __add__ = add
    __mul__ = multiply
    __neg__ = additive_inverse

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefs == other._coefs

    def __hash__(self):
        return hash(self._coefs)

    def __str__(self):
        if len(self._coefs) == 1:
            return str(self._coefs[0])
        terms = [
            f"{c}x^{i}"
            for i, c in reversed(list(enumerate(self._coefs)))
            if c != 0
        ]
        return " + ".join(terms) if terms else "0"

    def __repr__(self):
        return f"Polynomial({list(self._coefs)!r})"
