import unittest

import numpy as np

from groupslices.domain._errors import InvalidAxisError
from groupslices.infrastructure.hashing import hash_slice, hash_slices, mix_hash, slice_view
from groupslices.infrastructure.hashing._constants import FNV_PRIME_64, HASH_MASK, HASH_SEED


class TestMixHash(unittest.TestCase):
    def test_single_step(self):
        self.assertEqual(mix_hash(0, 1), FNV_PRIME_64)

    def test_result_fits_in_64_bits(self):
        h = mix_hash(HASH_MASK, HASH_MASK - 12345)
        self.assertGreaterEqual(h, 0)
        self.assertLessEqual(h, HASH_MASK)

    def test_negative_element_hash_is_reduced_twos_complement(self):
        self.assertEqual(mix_hash(0, -1), mix_hash(0, HASH_MASK))

    def test_fold_is_order_sensitive(self):
        ab = mix_hash(mix_hash(HASH_SEED, 1), 2)
        ba = mix_hash(mix_hash(HASH_SEED, 2), 1)
        self.assertNotEqual(ab, ba)


class TestHashSlices(unittest.TestCase):
    def test_equal_slices_hash_equal(self):
        a = np.array([[1, 2], [3, 4], [1, 2]])
        h = hash_slices(a, 0)
        self.assertEqual(h.dtype, np.uint64)
        self.assertEqual(h.shape, (3,))
        self.assertEqual(h[0], h[2])
        self.assertNotEqual(h[0], h[1])

    def test_permuted_content_hashes_differently(self):
        h = hash_slices(np.array([[1, 2], [2, 1]]), 0)
        self.assertNotEqual(h[0], h[1])

    def test_slices_follow_axis(self):
        a = np.array([[1, 2, 1], [3, 4, 3]])
        h = hash_slices(a, 1)
        self.assertEqual(h.shape, (3,))
        self.assertEqual(h[0], h[2])
        np.testing.assert_array_equal(hash_slices(a, -1), h)

    def test_traversal_is_c_order_over_remaining_axes(self):
        a = np.arange(24).reshape(2, 3, 4)
        h = hash_slices(a, 1)
        for k in range(3):
            expected = hash_slice(np.ascontiguousarray(a[:, k, :]), hash)
            self.assertEqual(int(h[k]), expected)

    def test_empty_slices_hash_to_seed(self):
        h = hash_slices(np.empty((3, 0)), 0)
        np.testing.assert_array_equal(h, np.full(3, HASH_SEED, dtype=np.uint64))

    def test_no_slices(self):
        h = hash_slices(np.empty((0, 4)), 0)
        self.assertEqual(h.shape, (0,))

    def test_one_dimensional_slices_are_scalars(self):
        h = hash_slices([5, 6, 5], 0)
        self.assertEqual(int(h[0]), mix_hash(HASH_SEED, hash(5)))
        self.assertEqual(h[0], h[2])

    def test_invalid_axis_raised_before_hashing(self):
        calls = []

        def recording(element):
            calls.append(element)
            return 0

        with self.assertRaises(InvalidAxisError):
            hash_slices(np.zeros((2, 2)), 2, hasher=recording)
        self.assertEqual(calls, [])

    def test_custom_hasher_is_used(self):
        h = hash_slices(np.array([[1, 2], [3, 4]]), 0, hasher="constant")
        self.assertEqual(h[0], h[1])

    def test_nan_slices_hash_deterministically(self):
        a = np.array([[np.nan, 1.0]])
        first = hash_slices(a, 0)
        for _ in range(5):
            np.testing.assert_array_equal(hash_slices(a, 0), first)
        h = hash_slices(np.array([[np.nan], [np.nan]]), 0)
        self.assertEqual(h[0], h[1])


class TestSliceView(unittest.TestCase):
    def test_view_shares_memory(self):
        a = np.arange(12).reshape(3, 4)
        v = slice_view(a, 1)
        self.assertEqual(v.shape, (4, 3))
        self.assertTrue(np.shares_memory(a, v))


if __name__ == "__main__":
    unittest.main()
