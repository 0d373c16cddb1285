"""This module defines the errors raised by gf256.

All errors derive from GF256Error and from the built-in exception a caller
would expect otherwise: ValueError for invalid arguments, ZeroDivisionError
for inverses and divisions by zero. Each error keeps the offending value as
an attribute and formats its own message.
"""


class GF256Error(Exception):
    """Common base class for gf256 errors."""


class InvalidDegree(GF256Error, ValueError):
    """Irreducible polynomial does not have degree 8."""

    def __init__(self, polynomial, too_high):
        super().__init__(polynomial, too_high)
        self.polynomial = polynomial
        self.too_high = too_high

    def __str__(self):
        return f'{self.polynomial} has too {"high" if self.too_high else "low"} degree.'


class NotAGenerator(GF256Error, ValueError):
    """Element does not generate all 255 nonzero field elements."""

    def __init__(self, generator):
        super().__init__(generator)
        self.generator = generator

    def __str__(self):
        return f'{self.generator} is not a generator.'


class LogOfZero(GF256Error, ValueError):
    """Zero has no discrete logarithm."""

    def __str__(self):
        return 'Taking log of zero.'


class InverseOfZero(GF256Error, ZeroDivisionError):
    """Zero has no multiplicative inverse."""

    def __str__(self):
        return 'Taking inverse of zero.'


class DivisionByZeroPolynomial(GF256Error, ZeroDivisionError):
    """Denominator polynomial is identically zero."""

    def __init__(self, nominator):
        super().__init__(nominator)
        self.nominator = nominator

    def __str__(self):
        return f'Division by zero polynomial: {self.nominator}.'
