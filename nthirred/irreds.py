"""This module computes the n-th irreducible binary polynomial.

Two algorithms are combined. The degree of the n-th irreducible polynomial follows
from the known number of irreducibles per degree. Counting irreducibles of this
degree per residue modulo x^k (see module counting) then gives the k leading bits
of the result, as the reversal of an odd irreducible is irreducible as well. Finally,
a sieve restricted to polynomials with these leading bits (see module sieve)
picks the right one.

Choosing k about a third of the degree balances the running times of both steps.
"""

import time
import logging
from nthirred import RangeExceeded, InternalInconsistency
from nthirred import gf2x
from nthirred.counting import IRRED_OF_DEG, count_by_residue
from nthirred.sieve import find_irreducible

_FIRST_IRREDS = (0b10, 0b11, 0b111)  # x, x+1, x^2+x+1


def nth_irreducible_degree(n):
    """Return degree of the n-th irreducible polynomial (None if degree would exceed 63)."""
    if not 0 <= n < sum(IRRED_OF_DEG):
        return None

    d = 0
    num_irred = 0
    while num_irred <= n:
        d += 1
        num_irred += IRRED_OF_DEG[d]
    return d


def get_remainder(degree, idx, k):
    """Return the remainder modulo x^k of the idx-th irreducible of given degree.

    The irreducibles are ordered by their remainders in bit-reversed order
    (so 101 < 011 for k=3), which matches the order of the leading bits once the
    remainders are reversed. The index of the irreducible among the irreducibles
    with the same remainder is returned as well.
    """
    counts = count_by_residue(degree, k)
    num_irred = 0
    for rev_rem in range(1 << (k - 1), 1 << k):
        rem = gf2x.reverse(rev_rem, k)
        extra = int(counts[rem >> 1])
        if num_irred + extra > idx:
            return rem, idx - num_irred

        num_irred += extra  # num_irred <= idx
    raise InternalInconsistency(f'no remainder found for index {idx} of degree {degree}')


def prefix_length(degree):
    """Number of leading bits determined by counting, for given degree."""
    return max(2, (degree + 2) // 3)


def nth_irreducible(n, k=None):
    """Return the n-th irreducible polynomial, counting from n=0 for x.

    Optionally, the number k of leading bits determined by counting is set,
    1 <= k <= (d+1)/2 for degree d.
    """
    deg = nth_irreducible_degree(n)
    if deg is None:
        raise RangeExceeded(f'index {n} out of range for degrees below 64')

    if deg <= 2:
        return _FIRST_IRREDS[n]

    idx = n - sum(IRRED_OF_DEG[:deg])
    if k is None:
        k = prefix_length(deg)
    elif not 1 <= k <= (deg + 1) // 2:
        raise ValueError(f'prefix length k for degree {deg} must be in range 1..{(deg + 1) // 2}')

    start = time.process_time()
    rem, idx = get_remainder(deg, idx, k)
    t1 = time.process_time()
    f = find_irreducible(gf2x.reverse(rem, k) << (deg + 1 - k), k, idx)
    t2 = time.process_time()
    logging.debug(f'Degree {deg}, prefix length {k}: '
                  f'counting {t1 - start:.3f} seconds, sieving {t2 - t1:.3f} seconds')
    if f is None:
        raise InternalInconsistency(f'sieve found no irreducible for index {n}')

    return f
