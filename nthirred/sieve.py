"""This module contains the functions for sieving binary polynomials.

Sieving removes all multiples of a set of irreducibles from another set, which is
either the set of all polynomials up to some degree, or the set of polynomials of
given degree with given leading bits. In the latter case the polynomials are
processed in blocks, keeping memory use proportional to 2^(d/2) for degree d.

Even polynomials are left out throughout, as these are all divisible by x.
Bitmaps are packed, 8 candidates per byte, and multiples are generated in chunks
of at most _CHUNK polynomials at a time.
"""

import functools
import logging
import numpy as np
from nthirred import gf2x

_CHUNK = 1 << 13
_BIT = np.array([1 << i for i in range(8)], dtype=np.uint8)


def _set_bits(bitmap, pos):
    pos = pos.ravel()
    np.bitwise_or.at(bitmap, pos >> 3, _BIT[pos & 7])


def _unmarked(bitmap, start, stop):
    """Yield the positions in range(start, stop) of the bits not set in bitmap, chunk by chunk."""
    for lo in range(start & ~7, stop, _CHUNK):
        hi = min(lo + _CHUNK, stop)
        bits = np.unpackbits(bitmap[lo >> 3:(hi + 7) >> 3], count=hi - lo, bitorder='little')
        pos = lo + np.flatnonzero(bits == 0)
        yield pos[pos >= start]


def _mark_multiples(bitmap, g, h, start, stop, k):
    """Mark the products g*(h + 2j) modulo x^k for start <= j < stop, elementwise in g and h."""
    if start >= stop:
        return

    cols = min(stop - start, _CHUNK)
    rows = max(1, _CHUNK // cols)
    for i in range(0, len(g), rows):
        g_i = g[i:i + rows, np.newaxis]
        h_i = h[i:i + rows, np.newaxis]
        for j in range(start, stop, cols):
            steps = np.arange(2 * j, 2 * min(j + cols, stop), 2, dtype=np.uint64)
            _set_bits(bitmap, gf2x.residue_index(gf2x.mul_array(h_i + steps, g_i), k))


@functools.lru_cache(maxsize=1)  # NB: 1-place cache, blocks of nearby degrees share one sieve
def small_irreducibles(d):
    """Return the odd irreducibles of degree at most d in ascending order.

    Irreducibles of degree e <= d/2 are collected degree by degree, marking all their
    multiples up to degree d. The odd polynomials left unmarked are the irreducibles.
    The result is cached and therefore read-only.
    """
    nbits = 1 << d  # odd polynomial g of degree at most d at position g >> 1
    composite = np.zeros((nbits + 7) >> 3, dtype=np.uint8)
    composite[0] = 1  # 1 is a unit
    for e in range(1, d // 2 + 1):
        for pos in _unmarked(composite, 1 << (e - 1), 1 << e):  # irreducibles of degree e
            g = 2 * pos.astype(np.uint64) + np.uint64(1)
            _mark_multiples(composite, g, np.ones_like(g), 1, 1 << (d - e), d + 1)
    irreds = np.concatenate([2 * pos.astype(np.uint64) + np.uint64(1)
                             for pos in _unmarked(composite, 0, nbits)])
    irreds.flags.writeable = False
    return irreds


def _group_by_degree(irreds):
    # irreds is sorted, so polynomials of equal degree are consecutive
    groups = []
    if irreds.size:
        for e in range(1, gf2x.degree(int(irreds[-1])) + 1):
            lo, hi = np.searchsorted(irreds, np.array([1 << e, 2 << e], dtype=np.uint64))
            if lo < hi:
                groups.append(irreds[lo:hi])
    return groups


def _find_with_sieve(f, k, small_irreds, idx, groups=None):
    """Find the idx-th irreducible of degree d having the same k leading bits as f.

    The candidates are the odd polynomials of degree d = deg(f) whose leading
    k bits are those of f, assuming the lower bits of f are all zero.
    Return the irreducible (or None, if not present) along with the number of
    irreducibles encountered.

    Every irreducible of degree at most d-k is assumed to have its multiples in
    the block, which holds if k <= (d+1)/2 (rounded down) and small_irreds covers
    degrees up to d/2 (rounded down). Pass groups to reuse _group_by_degree(small_irreds).
    """
    d = gf2x.degree(f)
    nbits = 1 << (d - k)
    composite = np.zeros((nbits + 7) >> 3, dtype=np.uint8)
    if groups is None:
        groups = _group_by_degree(small_irreds)
    for g in groups:
        r = d - gf2x.degree(int(g[0]))  # r >= k
        for i in range(0, len(g), _CHUNK):
            g_i = g[i:i + _CHUNK]
            h = gf2x.multiplier_array(f, g_i, k)
            _mark_multiples(composite, g_i, h, 0, 1 << (r - k), d + 1 - k)

    num_irred = 0
    for pos in _unmarked(composite, 0, nbits):
        if idx < num_irred + len(pos):
            return f + (int(pos[idx - num_irred]) << 1) + 1, idx + 1

        num_irred += len(pos)
    return None, num_irred


def find_irreducible(f, k, idx):
    """Return the idx-th irreducible of degree d having the same k leading bits as f.

    The lower d+1-k bits of f are assumed to be zero. The free bits are split up like
    this: [k bits of f][block index (d-k-d/2 bits)][d/2 bits]1, and each block is
    sieved separately. None is returned if there are at most idx such irreducibles.
    """
    d = gf2x.degree(f)
    if not 1 <= k <= (d + 1) // 2:
        raise ValueError('prefix length k out of range')

    if idx < 0:
        raise ValueError('negative index')

    sieve_len = d // 2
    small_irreds = small_irreducibles(sieve_len)
    groups = _group_by_degree(small_irreds)
    total_irred = 0
    for blck_idx in range(1 << (d - k - sieve_len)):
        g, num_irred = _find_with_sieve(f + (blck_idx << (sieve_len + 1)), d - sieve_len,
                                        small_irreds, idx - total_irred, groups)
        if g is not None:
            logging.debug(f'Sieved {blck_idx + 1} block(s) of 2^{sieve_len} polynomials')
            return g

        total_irred += num_irred
    return None
