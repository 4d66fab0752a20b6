import unittest
from unittest import mock
from nthirred import gf2x
from nthirred import InternalInconsistency
from nthirred import counting


def mobius(n):
    m = 1
    p = 2
    while p * p <= n:
        if n % p == 0:
            n //= p
            if n % p == 0:
                return 0

            m = -m
        p += 1
    if n > 1:
        m = -m
    return m


class Arithmetic(unittest.TestCase):

    def test_table(self):
        self.assertEqual(len(counting.IRRED_OF_DEG), 64)
        for d in range(1, 64):
            s = sum(mobius(d // e) * 2**e for e in range(1, d + 1) if d % e == 0)
            self.assertEqual(counting.IRRED_OF_DEG[d], s // d)

    def test_initialize(self):
        leftovers = counting._initialize(6, 3)
        self.assertEqual(leftovers.tolist(), [[1, 0, 0, 0],
                                              [0, 1, 0, 0],
                                              [0, 0, 1, 1],
                                              [1, 1, 1, 1],
                                              [2, 2, 2, 2],
                                              [4, 4, 4, 4],
                                              [8, 8, 8, 8]])

    def test_totals(self):
        for d in range(2, 17):
            for k in range(1, min(d, 6) + 1):
                counts = counting.count_by_residue(d, k)
                self.assertEqual(len(counts), 1 << (k - 1))
                self.assertEqual(int(counts.sum()), counting.IRRED_OF_DEG[d])
                self.assertTrue((counts >= 0).all())
        counts = counting.count_by_residue(24, 8)
        self.assertEqual(int(counts.sum()), counting.IRRED_OF_DEG[24])

    def test_residues(self):
        self.assertEqual(counting.count_by_residue(3, 2).tolist(), [1, 1])
        self.assertEqual(counting.count_by_residue(2, 1).tolist(), [1])
        self.assertEqual(counting.count_by_residue(2, 2).tolist(), [0, 1])
        for d in range(2, 11):
            irreds = [a for a in range(1 << d, 2 << d) if gf2x.is_irreducible(a)]
            for k in range(1, min(d, 4) + 1):
                expected = [0] * (1 << (k - 1))
                for a in irreds:
                    expected[gf2x.mod_red(a, k) >> 1] += 1
                self.assertEqual(counting.count_by_residue(d, k).tolist(), expected)

    def test_errors(self):
        self.assertRaises(ValueError, counting.count_by_residue, 1, 1)
        self.assertRaises(ValueError, counting.count_by_residue, 64, 3)
        self.assertRaises(ValueError, counting.count_by_residue, 5, 0)
        self.assertRaises(ValueError, counting.count_by_residue, 5, 6)

    def test_inconsistency(self):
        table = list(counting.IRRED_OF_DEG)
        table[7] += 1
        with mock.patch('nthirred.counting.IRRED_OF_DEG', tuple(table)):
            self.assertRaises(InternalInconsistency, counting.count_by_residue, 7, 3)
        self.assertEqual(int(counting.count_by_residue(7, 3).sum()), counting.IRRED_OF_DEG[7])


if __name__ == "__main__":
    unittest.main()
