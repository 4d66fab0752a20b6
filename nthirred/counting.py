"""This module counts irreducible polynomials of given degree per residue modulo x^k.

The count is computed by dynamic programming, following the sieve of Eratosthenes
with degrees in place of integers. A table of leftovers is kept, where entry
leftovers[d][g >> 1] holds the number of polynomials of degree d with remainder g
modulo x^k (for odd g) not yet identified as reducible. Processing the irreducibles
in order of increasing degree, their multiples are subtracted from the table, after
which the row for the target degree holds the number of irreducibles per residue.

Only the counts matter, not the irreducibles themselves: each irreducible of degree r
with remainder f modulo x^k moves the counts of degree d to degree d+r, permuting the
residues by multiplication with f. Irreducibles of degree above a third of the target
degree are handled separately, as the only multiples left are products of two of them.
"""

import logging
import numpy as np
from nthirred import InternalInconsistency
from nthirred import gf2x

# Number of irreducible polynomials of each degree (OEIS A001037, except for degree 0).
IRRED_OF_DEG = (
    0, 2, 1, 2, 3, 6, 9, 18, 30, 56, 99, 186, 335, 630, 1161, 2182,
    4080, 7710, 14532, 27594, 52377, 99858, 190557, 364722,
    698870, 1342176, 2580795, 4971008, 9586395, 18512790,
    35790267, 69273666, 134215680, 260300986, 505286415, 981706806,
    1908866960, 3714566310, 7233615333, 14096302710, 27487764474,
    53634713550, 104715342801, 204560302842, 399822314775, 781874934568,
    1529755125849, 2994414645858, 5864061663920, 11488774559616,
    22517997465744, 44152937520670, 86607683851185, 169947155749830,
    333599969907456, 655069036708398, 1286742745883790, 2528336632900554,
    4969489234738635, 9770521225481754, 19215358392200893, 37800705069076950,
    74382032520643617, 146402730743693304,
)


def _initialize(degree, k):
    leftovers = np.zeros((degree + 1, 1 << (k - 1)), dtype=np.int64)
    for d in range(k):
        leftovers[d, (1 << d) >> 1:1 << d] = 1  # each residue of degree d is a polynomial itself
    for d in range(k, degree + 1):
        leftovers[d] = 1 << (d - k)
    return leftovers


def _remove_multiples(leftovers, r, f, index):
    """Subtract the multiples of an irreducible of degree r with remainder f.

    Array index maps each residue h to (the index of) residue h/f. Cofactors are
    counted by the rows of degrees r and up, which hold the polynomials without
    factors among the irreducibles handled so far.
    """
    degree = len(leftovers) - 1
    leftovers[degree] -= leftovers[degree - r][index]
    # Rows above degree-r are not needed anymore. Row r is included, because
    # other irreducibles of degree r are still to be removed.
    for d in range(degree - 2*r, r - 1, -1):
        leftovers[d + r] -= leftovers[d][index]
    leftovers[r, f >> 1] -= 1  # f itself


def _remove_semis(leftovers, a, b, k):
    """Subtract the products of an irreducible of degree a and one of degree b.

    Rows a and b are assumed to count irreducibles already.
    """
    target = leftovers[a + b]
    residues = gf2x.residues(k)
    for i in np.flatnonzero(leftovers[a]):
        c = leftovers[a, i]
        index = gf2x.residue_index(gf2x.mul_array(residues, residues[i]), k)
        if a == b:
            # unordered pairs, with repetition for pairs with equal remainders
            target[index[i]] -= c * (c + 1) // 2
            target[index[i+1:]] -= c * leftovers[b, i+1:]
        else:
            target[index] -= c * leftovers[b]


def count_by_residue(degree, k):
    """Return the number of irreducibles of given degree per odd residue modulo x^k.

    Entry i of the returned array is the count for residue 2i+1.
    """
    if not 2 <= degree < len(IRRED_OF_DEG):
        raise ValueError('degree out of range')

    if not 1 <= k <= degree:
        raise ValueError('prefix length k out of range')

    leftovers = _initialize(degree, k)
    residues = gf2x.residues(k)
    for r in range(1, degree // 3 + 1):
        # At this point, leftovers[r] counts irreducibles of degree r.
        for i in np.flatnonzero(leftovers[r]):
            f = 2*int(i) + 1
            index = gf2x.residue_index(gf2x.mul_array(residues, gf2x.inverse(f, k)), k)
            for _ in range(int(leftovers[r, i])):
                _remove_multiples(leftovers, r, f, index)

    # Remaining multiples are products of two irreducibles of larger degree.
    for a in range(degree // 3 + 1, degree // 2 + 1):
        _remove_semis(leftovers, a, degree - a, k)

    counts = leftovers[degree]
    total = int(counts.sum())
    if total != IRRED_OF_DEG[degree]:
        raise InternalInconsistency(f'{total} irreducibles of degree {degree} counted, '
                                    f'expected {IRRED_OF_DEG[degree]}')

    logging.debug(f'Counted irreducibles of degree {degree} for {len(counts)} residues')
    return counts
