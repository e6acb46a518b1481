"""Exceptions raised by the field types and matrices."""


class DivisionByZero(ZeroDivisionError):
    """Raised on a zero denominator, a zero divisor or inverting zero."""


class OutOfBoundsAccess(IndexError):
    """Raised when a matrix access falls outside its declared shape."""
