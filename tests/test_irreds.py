import unittest
from unittest import mock
import numpy as np
from nthirred import RangeExceeded, InternalInconsistency
from nthirred import gf2x
from nthirred.counting import IRRED_OF_DEG
from nthirred.sieve import small_irreducibles
from nthirred.irreds import nth_irreducible, nth_irreducible_degree, get_remainder, prefix_length


class Arithmetic(unittest.TestCase):

    def test_small(self):
        self.assertEqual(nth_irreducible(0), 0b10)
        self.assertEqual(nth_irreducible(1), 0b11)
        self.assertEqual(nth_irreducible(2), 0b111)
        self.assertEqual(nth_irreducible(3), 0b1011)
        self.assertEqual(nth_irreducible(4), 0b1101)
        self.assertEqual(nth_irreducible(5), 0b10011)
        self.assertEqual(nth_irreducible(6), 0b11001)
        self.assertEqual(nth_irreducible(7), 0b11111)
        self.assertEqual(nth_irreducible(22), 117)
        self.assertEqual(nth_irreducible(100), 0b1100010011)

    def test_initial_range(self):
        a = 0
        for n in range(500):
            a = gf2x.next_irreducible(a)
            self.assertEqual(nth_irreducible(n), a)

    def test_prefix_length(self):
        self.assertEqual(prefix_length(3), 2)
        self.assertEqual(prefix_length(9), 3)
        self.assertEqual(prefix_length(63), 21)
        for n in (3, 4, 10, 50, 100, 263, 1000):
            d = nth_irreducible_degree(n)
            a = nth_irreducible(n)
            for k in range(1, (d + 1) // 2 + 1):
                self.assertEqual(nth_irreducible(n, k), a)
            self.assertRaises(ValueError, nth_irreducible, n, (d + 1) // 2 + 1)
            self.assertRaises(ValueError, nth_irreducible, n, 0)

    def test_large(self):
        small_irreds = [int(g) for g in small_irreducibles(14)]
        for n in (10**5, 10**6, 12345678):
            a = nth_irreducible(n)
            b = nth_irreducible(n + 1)
            self.assertLess(a, b)
            self.assertEqual(gf2x.next_irreducible(a), b)
            d = gf2x.degree(a)
            self.assertEqual(d, nth_irreducible_degree(n))
            for g in small_irreds:
                if gf2x.degree(g) > d // 2:
                    break

                self.assertNotEqual(gf2x.mod(a, g), 0)
            self.assertTrue(gf2x.is_irreducible(a))

    def test_remainder(self):
        d, k = 9, 3
        base = sum(IRRED_OF_DEG[:d])
        prev = 0
        for idx in range(IRRED_OF_DEG[d]):
            rem, sub_idx = get_remainder(d, idx, k)
            a = nth_irreducible(base + idx)
            self.assertEqual(gf2x.mod_red(gf2x.reverse(a, d + 1), k), rem)
            self.assertEqual(gf2x.reverse(rem, k), a >> (d + 1 - k))
            self.assertGreaterEqual(gf2x.reverse(rem, k), prev)
            prev = gf2x.reverse(rem, k)
            self.assertGreaterEqual(sub_idx, 0)

    def test_degree(self):
        total = sum(IRRED_OF_DEG)
        self.assertEqual(nth_irreducible_degree(0), 1)
        self.assertEqual(nth_irreducible_degree(1), 1)
        self.assertEqual(nth_irreducible_degree(2), 2)
        self.assertEqual(nth_irreducible_degree(3), 3)
        self.assertEqual(nth_irreducible_degree(100), 9)
        self.assertEqual(nth_irreducible_degree(total - 1), 63)
        self.assertIsNone(nth_irreducible_degree(total))
        self.assertIsNone(nth_irreducible_degree(-1))

    def test_range(self):
        total = sum(IRRED_OF_DEG)
        self.assertEqual(total, 297691289425574350)
        self.assertRaises(RangeExceeded, nth_irreducible, total)
        self.assertRaises(RangeExceeded, nth_irreducible, 2**64)
        self.assertRaises(RangeExceeded, nth_irreducible, -1)

    def test_inconsistency(self):
        d, k = 9, 3
        self.assertRaises(InternalInconsistency, get_remainder, d, IRRED_OF_DEG[d], k)
        with mock.patch('nthirred.irreds.count_by_residue', return_value=np.zeros(4, dtype=np.int64)):
            self.assertRaises(InternalInconsistency, nth_irreducible, 100)
        with mock.patch('nthirred.irreds.find_irreducible', return_value=None):
            self.assertRaises(InternalInconsistency, nth_irreducible, 100)
        self.assertNotIsInstance(InternalInconsistency(), ValueError)


if __name__ == "__main__":
    unittest.main()
