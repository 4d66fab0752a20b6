"""This module supports arithmetic with binary polynomials of degree below 64.

Polynomials over GF(2) are represented as nonnegative integers.
The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0.

Carry-less multiplication is provided in three interchangeable forms:
least-significant-bit first (mul), most-significant-bit first (mul_msb), and
vectorized over numpy arrays of dtype uint64 (mul_array). All three keep the
64 least significant bits of the product, just like a hardware carry-less
multiply of two 64-bit words does.

The remaining functions support computations modulo x^k, working on the k
least significant bits, and on the k leading bits of polynomials.
A simple irreducibility test is provided as well as a basic
routine to find the next largest irreducible polynomial.
"""

import numpy as np

MASK = (1 << 64) - 1
_ZERO = np.uint64(0)
_ONE = np.uint64(1)


def degree(a):
    """Degree of polynomial a (-1 if a is zero)."""
    return _degree(a)


def _degree(a):
    return a.bit_length() - 1


def reverse(a, k):
    """Reverse the k least significant bits of polynomial a, zeroing all higher bits."""
    return _reverse(a, k)


def _reverse(a, k):
    b = 0
    for _ in range(k):
        b = (b << 1) | (a & 1)
        a >>= 1
    return b


def mod_red(a, k):
    """Reduce polynomial a modulo x^k."""
    return a & ((1 << k) - 1)


def residues(k):
    """Return all odd residues modulo x^k as an array, residue g at index g >> 1."""
    return np.arange(1, 1 << k, 2, dtype=np.uint64)


def residue_index(a, k):
    """Return array of indices g >> 1 for the residues g of the odd polynomials in a modulo x^k."""
    a = np.asarray(a, dtype=np.uint64)
    return ((a & np.uint64((1 << k) - 1)) >> _ONE).astype(np.intp)


def mul(a, b):
    """Multiply polynomials a and b, truncated to 64 bits."""
    return _mul(a, b) & MASK


def _mul(a, b):
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


def mul_msb(a, b):
    """Multiply polynomials a and b, truncated to 64 bits, scanning b from its leading bit."""
    a &= MASK
    c = 0
    for i in range(b.bit_length() - 1, -1, -1):
        c = (c << 1) & MASK
        if (b >> i) & 1:
            c ^= a
    return c


def mul_array(a, b):
    """Multiply polynomials a and b elementwise, truncated to 64 bits.

    Both a and b are ints or arrays of dtype uint64, broadcast against each other.
    The loop runs over the bits of b, so preferably b is the operand of lowest degree.
    """
    a = np.asarray(a, dtype=np.uint64)
    b = np.asarray(b, dtype=np.uint64)
    c = np.zeros(np.broadcast_shapes(a.shape, b.shape), dtype=np.uint64)
    n = int(b.max()).bit_length() if b.size else 0
    for i in range(n):
        i = np.uint64(i)
        c ^= np.where((b >> i) & _ONE, a << i, _ZERO)  # NB: a << i wraps modulo 2^64
    return c


def multiplier(f, g, k):
    """Return odd h such that g h has the same k leading bits as f.

    Polynomial f of degree d serves as target, and g is a divisor candidate of degree
    at most d-k. Polynomial h is found by eliminating the bits of f from the leading
    bit downwards, much like solving a triangular system over GF(2).
    """
    d = _degree(f)
    r = d - _degree(g)
    if r < k:
        raise ValueError('degree of g too large to align with k leading bits')

    res = f ^ g
    h = 1
    for i in range(k, 0, -1):
        if (res >> (i + d - k)) & 1:
            res ^= g << (i + r - k)
            h |= 1 << (i + r - k)
    return h


def multiplier_array(f, g, k):
    """Vectorized version of multiplier() for an array g of polynomials of equal degree."""
    g = np.asarray(g, dtype=np.uint64)
    if not g.size:
        return g.copy()

    d = _degree(f)
    r = d - _degree(int(g[0]))
    if r < k:
        raise ValueError('degree of g too large to align with k leading bits')

    res = np.uint64(f) ^ g
    h = np.ones_like(g)
    for i in range(k, 0, -1):
        s = np.uint64(i + r - k)
        bit = (res >> np.uint64(i + d - k)) & _ONE
        res ^= np.where(bit, g << s, _ZERO)
        h |= bit << s
    return h


def inverse(f, k):
    """Inverse of polynomial f modulo x^k, for odd f."""
    if not f & 1:
        raise ZeroDivisionError('inverse does not exist')

    res = f  # res = f g holds
    g = 1
    for i in range(1, k):
        if (res >> i) & 1:
            res ^= f << i
            g |= 1 << i
    return g


def to_terms(a, x='x'):
    """Convert polynomial a to a string with sum of powers of x."""
    if a == 0:
        return '0'

    terms = []
    for i in range(a.bit_length() - 1, -1, -1):
        if (a >> i) & 1:
            if i == 0:
                terms.append('1')     # x^0 = 1
            elif i == 1:
                terms.append(x)       # x^1 = x
            else:
                terms.append(f'{x}^{i}')
    return ' + '.join(terms)


def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')

    m = _degree(a)
    n = _degree(b)
    if m < n:
        return a

    b <<= m - n
    for i in range(m - n + 1):
        if (a >> m - i) & 1:
            a ^= b
        b >>= 1
    return a


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
    for _ in range(_degree(a) // 2):
        b = mod(_mul(b, b), a)
        if gcd(b ^ 2, a) != 1:
            return False

    return True


def next_irreducible(a):
    """Return next irreducible polynomial > a.

    NB: 'x' < 'x+1' < 'x^2+x+1' < 'x^3+x+1' < 'x^3+x^2+1' < ...
    """
    if a <= 1:
        a = 2
    else:
        a += 1 + (a % 2)
        while not is_irreducible(a):
            a += 2
    return a
