"""This module supports arithmetic with polynomials over GF(2).

Polynomials over GF(2) are represented as nonnegative integers.
The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0.

Elements of GF(2^8) as well as the irreducible polynomials defining
GF(2^8) use this representation, hence the field is built on top of
carryless multiplication and reduction modulo a polynomial.
A simple irreducibility test is provided as well.
"""

X = 'x'  # symbol for indeterminate in polynomials

_SUPERSCRIPTS = str.maketrans('0123456789', '⁰¹²³⁴⁵⁶⁷⁸⁹')


def mul(a, b):
    """Multiply polynomials a and b (carryless multiplication)."""
    if a < b:
        a, b = b, a
    # a >= b
    c = 0
    while b:
        if b & 1:
            c ^= a
        a <<= 1
        b >>= 1
    return c


def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')

    n = b.bit_length()
    while (m := a.bit_length()) >= n:
        a ^= b << m - n  # cancel leading term of a
    return a


def mulmod(a, b, modulus):
    """Multiply polynomials a and b modulo given polynomial."""
    return mod(mul(a, b), modulus)


def degree(a):
    """Degree of polynomial a (-1 if a is zero)."""
    return a.bit_length() - 1


def gcd(a, b):
    """Greatest common divisor of polynomials a and b."""
    while b:
        a, b = b, mod(a, b)
    return a


def is_irreducible(a):
    """Test polynomial a for irreducibility."""
    if a <= 1:
        return False

    b = 2
    for _ in range(degree(a) // 2):
        # b = x^(2^i) mod a holds
        b = mulmod(b, b, a)
        if gcd(b ^ 2, a) != 1:
            return False

    return True


def to_terms(a, x=X):
    """Convert polynomial a to a string with sum of powers of x.

    Exponents up to 8 are written as superscripts, e.g., 'x⁸+x⁴+x³+x²+1'
    for a=0x11d, larger exponents as in 'x^9'.
    """
    if a == 0:
        return '0'

    s = ''
    for i in range(a.bit_length() - 1, -1, -1):
        if (a >> i) & 1:
            if i == 0:
                s += '+1'     # x^0 = 1
            elif i == 1:
                s += f'+{x}'  # x^1 = x
            elif i <= 8:
                s += f'+{x}{str(i).translate(_SUPERSCRIPTS)}'
            else:
                s += f'+{x}^{i}'
    return s[1:]
