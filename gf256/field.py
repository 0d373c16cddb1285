"""This module supports arithmetic in the finite field GF(2^8).

Function GF creates fields, each defined by an irreducible polynomial of
degree 8 over GF(2) and a generator of the multiplicative group of the field.
Field elements are of type Num, integers in range(256) whose bits are the
coefficients of the polynomial representing the element.

Multiplication and division are done by table lookups. The exponent and
logarithm tables are built once when the field is created, and are available
as read-only NumPy arrays. Elementwise operations on NumPy arrays of field
elements are provided as well.
"""

import functools
import logging
import numpy as np
from gf256 import gf2x
from gf256.errors import InvalidDegree, NotAGenerator, LogOfZero, InverseOfZero

DEGREE = 8
ORDER = 1 << DEGREE          # number of field elements
GROUP_ORDER = ORDER - 1      # number of nonzero field elements


class Num(int):
    """Field element represented as an integer in range(256).

    Bit i of the integer is the coefficient of x^i.
    """

    __slots__ = ()

    def __new__(cls, value=0):
        value = super().__new__(cls, value)
        if not 0 <= value < ORDER:
            raise ValueError(f'{int(value)} not in range({ORDER})')

        return value

    def __repr__(self):
        return f'Num({int(self):#04x})'

    def __str__(self):
        return format(int(self), 'b')


class Irreducible(int):
    """Polynomial over GF(2) represented as a nonnegative integer, used as modulus."""

    __slots__ = ()

    def __new__(cls, value):
        value = super().__new__(cls, value)
        if value < 0:
            raise ValueError('polynomial must be nonnegative')

        return value

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return gf2x.degree(self)

    def __repr__(self):
        return f'Irreducible({int(self):#x})'

    def __str__(self):
        return gf2x.to_terms(int(self))


def _tables(polynomial, generator):
    """Return exponent and logarithm tables for given modulus and generator."""
    exp_table = np.zeros(GROUP_ORDER, dtype=np.uint8)
    log_table = np.zeros(ORDER, dtype=np.int16)
    visited = np.zeros(ORDER, dtype=bool)
    product = 1
    for i in range(GROUP_ORDER):
        if i and product == 1:
            raise NotAGenerator(generator)  # order of generator is i < 255

        exp_table[i] = product
        log_table[product] = i
        visited[product] = True
        product = gf2x.mulmod(product, generator, polynomial)
    # NB: log_table[1] == 0 legitimately, so completeness is checked with visited
    if not visited[1:].all():
        raise NotAGenerator(generator)  # polynomial is reducible

    exp_table.flags.writeable = False
    log_table.flags.writeable = False
    return exp_table, log_table


def _asarray(a):
    """Convert a to an integer array with all entries in range(256)."""
    a = np.asarray(a)
    if a.size == 0:
        return a.astype(np.intp)

    if a.dtype.kind not in 'iu':
        raise TypeError('integer array expected')

    if a.min() < 0 or a.max() >= ORDER:
        raise ValueError(f'array entries not in range({ORDER})')

    return a.astype(np.intp)


class Field:
    """Finite field GF(2^8) given by an irreducible polynomial and a generator.

    Invariant: exp_table[i] == generator**i and log_table[exp_table[i]] == i, for 0<=i<255.
    """

    __slots__ = '_polynomial', '_generator', '_exp_table', '_log_table'

    def __init__(self, polynomial, generator):
        polynomial = Irreducible(polynomial)
        generator = Num(generator)
        d = polynomial.degree()
        if d != DEGREE:
            raise InvalidDegree(polynomial, too_high=d > DEGREE)

        if generator <= 1:
            raise NotAGenerator(generator)

        logging.debug(f'Build tables for GF(2^8) modulo {polynomial} with generator {generator}')
        try:
            self._exp_table, self._log_table = _tables(polynomial, generator)
        except NotAGenerator:
            logging.debug(f'No GF(2^8) for modulus {polynomial!r} and generator {generator!r}')
            raise

        self._polynomial = polynomial
        self._generator = generator

    @property
    def polynomial(self):
        """Irreducible polynomial defining the field."""
        return self._polynomial

    @property
    def generator(self):
        """Generator of the multiplicative group of the field."""
        return self._generator

    @property
    def exp_table(self):
        """Read-only array of the 255 powers of the generator."""
        return self._exp_table

    @property
    def log_table(self):
        """Read-only array of logarithms, with log_table[0] == 0 as placeholder."""
        return self._log_table

    @staticmethod
    def zero():
        """Additive zero."""
        return Num(0)

    @staticmethod
    def one():
        """Multiplicative unit."""
        return Num(1)

    def exp(self, x):
        """Generator raised to the power x, for any integer x."""
        return Num(self._exp_table[x % GROUP_ORDER])

    def log(self, x):
        """Discrete logarithm of nonzero x with respect to the generator."""
        x = Num(x)
        if x == 0:
            raise LogOfZero

        return int(self._log_table[x])

    def inv(self, x):
        """Multiplicative inverse of nonzero x."""
        x = Num(x)
        if x == 0:
            raise InverseOfZero

        return self.exp(-self.log(x))

    @staticmethod
    def add(x, y):
        """Sum of x and y, which is also their difference."""
        return Num(Num(x) ^ Num(y))

    sub = add

    def mul(self, x, y):
        """Product of x and y."""
        x, y = Num(x), Num(y)
        if x == 0 or y == 0:
            return Num(0)

        return self.exp(self.log(x) + self.log(y))

    def div(self, x, y):
        """Quotient of x and nonzero y."""
        return self.mul(x, self.inv(y))

    def pow(self, x, n):
        """Element x raised to the power n, for any integer n (n>=0 if x is zero)."""
        x = Num(x)
        if x == 0:
            if n < 0:
                raise InverseOfZero

            return Num(n == 0)

        return self.exp(self.log(x) * n)

    @staticmethod
    def add_array(a, b):
        """Elementwise sum of (broadcastable) arrays a and b."""
        return (_asarray(a) ^ _asarray(b)).astype(np.uint8)

    def mul_array(self, a, b):
        """Elementwise product of (broadcastable) arrays a and b."""
        a, b = _asarray(a), _asarray(b)
        c = self._exp_table[(self._log_table[a] + self._log_table[b]) % GROUP_ORDER]
        return np.where((a == 0) | (b == 0), 0, c).astype(np.uint8)

    def __repr__(self):
        return f'Field({int(self._polynomial):#x}, {int(self._generator):#04x})'

    def __eq__(self, other):
        """Equality test."""
        if not isinstance(other, Field):
            return NotImplemented

        return (self._polynomial, self._generator) == (other._polynomial, other._generator)

    def __hash__(self):
        """Make fields hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, int(self._polynomial), int(self._generator)))


# Calls to GF with identical polynomial and generator return the same field.
@functools.cache
def GF(polynomial=0x11d, generator=0x02):
    """Create finite field GF(2^8) for given irreducible polynomial and generator.

    Default is the field modulo x^8+x^4+x^3+x^2+1 generated by x,
    as commonly used for Reed-Solomon codes.
    """
    return Field(polynomial, generator)
