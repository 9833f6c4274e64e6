import dataclasses
import unittest

import numpy as np

import groupslices
from groupslices import InvalidAxisError, SliceGrouping


class TestSliceGrouping(unittest.TestCase):
    def setUp(self):
        self.a = np.array([[1, 2], [3, 4], [1, 2], [5, 6], [3, 4]])

    def test_from_array_scenario(self):
        g = SliceGrouping.from_array(self.a, -2)
        self.assertEqual(g.axis, 0)
        np.testing.assert_array_equal(g.labels, [0, 1, 0, 2, 1])
        np.testing.assert_array_equal(g.representatives, [0, 1, 0, 3, 1])
        self.assertEqual(g.groups, [[0, 2], [1, 4], [3]])
        np.testing.assert_array_equal(g.first, [0, 1, 3])
        np.testing.assert_array_equal(g.last, [2, 4, 3])
        np.testing.assert_array_equal(g.counts, [2, 2, 1])
        self.assertEqual(g.n_groups, 3)
        self.assertEqual(g.n_slices, 5)
        self.assertEqual(len(g), 5)

    def test_views_are_cached(self):
        g = SliceGrouping.from_array(self.a, 0)
        self.assertIs(g.groups, g.groups)
        self.assertIs(g.first, g.first)

    def test_frozen(self):
        g = SliceGrouping.from_array(self.a, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            g.axis = 1

    def test_repr(self):
        g = SliceGrouping.from_array(self.a, 0)
        self.assertEqual(repr(g), "SliceGrouping(axis=0, n_slices=5, n_groups=3)")

    def test_empty(self):
        g = SliceGrouping.from_array(np.empty((0, 3)), 0)
        self.assertEqual(g.n_groups, 0)
        self.assertEqual(g.groups, [])
        self.assertEqual(g.first.shape, (0,))
        self.assertEqual(g.last.shape, (0,))

    def test_invalid_axis(self):
        with self.assertRaises(InvalidAxisError):
            SliceGrouping.from_array(self.a, 2)


class TestPublicApi(unittest.TestCase):
    def test_exports(self):
        for name in groupslices.__all__:
            self.assertTrue(hasattr(groupslices, name), name)

    def test_end_to_end(self):
        a = np.array([[1, 2], [3, 4], [1, 2], [5, 6], [3, 4]])
        labels = groupslices.group_slices(a, 0)
        groups = groupslices.group_membership(labels)
        np.testing.assert_array_equal(groupslices.first_indices(groups), [0, 1, 3])
        np.testing.assert_array_equal(groupslices.last_indices(groups), [2, 4, 3])
        np.testing.assert_array_equal(
            groupslices.unique_slices(a, 0), a[groupslices.first_indices(labels)]
        )


if __name__ == "__main__":
    unittest.main()
