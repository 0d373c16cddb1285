"""This module supports arithmetic with polynomials over GF(2^8).

Polynomials over GF(2^8) are represented as tuples of field elements.
The polynomial a_0 + a_1 x + ... + a_n x^n corresponds to the tuple
(a_0, a_1, ..., a_n) of integers in range(256). The leading coefficient
a_n may be zero, and both () and (0, ..., 0) represent the zero polynomial.
Use normalize() to strip zero leading coefficients.

All functions take the field for the coefficient arithmetic as their first
argument, accept any iterable of integers in range(256) as polynomial, and
return new Polynomial objects, never modifying their arguments.
"""

import numpy as np
from gf256.field import Num
from gf256.errors import DivisionByZeroPolynomial

X = 'x'  # symbol for indeterminate in polynomials
ALPHA = 'α'  # symbol for generator of the field


class Polynomial(tuple):
    """Polynomial over GF(2^8) as an immutable tuple of coefficients, lowest degree first."""

    __slots__ = ()

    def __new__(cls, coefficients=()):
        return super().__new__(cls, map(Num, coefficients))

    def __repr__(self):
        return f'Polynomial([{", ".join(f"{int(a):#04x}" for a in self)}])'

    def __str__(self):
        """Sum of terms with binary coefficients, e.g., 'x^2 + 10 x + 11'."""
        return _to_terms(self, str)


def _to_terms(a, coefficient, x=X):
    s = []
    for i in range(len(a) - 1, -1, -1):
        if a[i]:
            c = coefficient(a[i])
            if i == 0:
                m = '1'       # x^0 = 1
            elif i == 1:
                m = x         # x^1 = x
            else:
                m = f'{x}^{i}'
            if c == '1':
                s.append(m)
            elif i == 0:
                s.append(c)
            else:
                s.append(f'{c} {m}')
    return ' + '.join(s) or '0'


def to_string(field, a):
    """Convert polynomial a to a string with coefficients as powers of the generator.

    For example, 'x^5 + α x^4 + α^129 x^3 + x + α^175'.
    """
    def coefficient(c):
        k = field.log(c)
        if k == 0:
            return '1'

        if k == 1:
            return ALPHA

        return f'{ALPHA}^{k}'

    return _to_terms(Polynomial(a), coefficient)


def is_identical_zero(field, a):
    """Test if all coefficients of polynomial a are zero."""
    zero = field.zero()
    return all(a_i == zero for a_i in a)


def normalize(field, a):
    """Strip zero leading coefficients from polynomial a, keeping at least one coefficient."""
    a = Polynomial(a)
    i = len(a) - 1
    while i > 0 and a[i] == field.zero():
        i -= 1
    if i < 0:
        return Polynomial([field.zero()])

    return Polynomial(a[:i+1])


def evaluate(field, a, x):
    """Evaluate polynomial a at given x."""
    y = field.zero()
    x_i = field.one()
    for a_i in a:
        # x_i = x^i holds
        y = field.add(y, field.mul(a_i, x_i))
        x_i = field.mul(x_i, x)
    return y


def evaluate_array(field, a, x):
    """Evaluate polynomial a at all points of array x, using Horner's rule."""
    x = np.asarray(x)
    y = np.zeros(x.shape, dtype=np.uint8)
    for a_i in reversed(Polynomial(a)):
        y = field.add_array(field.mul_array(y, x), int(a_i))
    return y


def add(field, a, b):
    """Add polynomials a and b, padding the shorter one with zeros."""
    a, b = Polynomial(a), Polynomial(b)
    if len(a) < len(b):
        a, b = b, a
    # len(a) >= len(b)
    c = list(a)
    for i, b_i in enumerate(b):
        c[i] = field.add(c[i], b_i)
    return Polynomial(c)


def mul(field, a, b):
    """Multiply polynomials a and b.

    The product of nonempty a and b has len(a)+len(b)-1 coefficients,
    and if a or b is empty the product is empty as well.
    """
    a, b = Polynomial(a), Polynomial(b)
    if not a or not b:
        return Polynomial()

    c = [field.zero()] * (len(a) + len(b) - 1)
    for i, a_i in enumerate(a):
        if a_i:
            for j, b_j in enumerate(b):
                c[i + j] = field.add(c[i + j], field.mul(a_i, b_j))
    return Polynomial(c)


def divmod_(field, a, b):
    """Divide polynomial a by polynomial b with remainder, for nonzero b.

    Return quotient q and remainder r such that a = q b + r, with r normalized.
    If a has fewer coefficients than normalized b, q is zero and r is a itself.
    """
    a, b = Polynomial(a), Polynomial(b)
    if is_identical_zero(field, b):
        raise DivisionByZeroPolynomial(a)

    b = normalize(field, b)  # nonzero leading coefficient
    m = len(a)
    n = len(b)
    if m < n:
        return Polynomial([field.zero()]), a

    b1 = field.inv(b[-1])
    q, r = [field.zero()] * (m - n + 1), list(a)
    for i in range(m - n, -1, -1):
        q[i] = q_i = field.mul(r[i + n - 1], b1)
        for j, b_j in enumerate(b):
            r[i + j] = field.sub(r[i + j], field.mul(q_i, b_j))
    return Polynomial(q), normalize(field, r)
