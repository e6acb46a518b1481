from .errors import DivisionByZero, OutOfBoundsAccess
from .field import Field, gcd
from .fraction import PolynomialFraction
from .matrix import Matrix
from .polynomial import Polynomial
from .rational import Rational
from .rref import RrefSteps
from .steps import Replace, Scale, Step, Swap

__all__ = [
    "DivisionByZero",
    "Field",
    "Matrix",
    "OutOfBoundsAccess",
    "Polynomial",
    "PolynomialFraction",
    "Rational",
    "Replace",
    "RrefSteps",
    "Scale",
    "Step",
    "Swap",
    "gcd",
]
