"""
Tests for ndtensor.Storage.
"""

import unittest
import numpy as np
import ndtensor as nd

class TestStorage(unittest.TestCase):

    def test_zeros(self):
        s = nd.Storage.zeros(4, "float32")
        self.assertEqual(len(s), 4)
        self.assertEqual(s.dtype, "float32")
        self.assertEqual(s.tolist(), [0.0, 0.0, 0.0, 0.0])
        self.assertEqual(s.view().dtype, np.float32)

    def test_offset_bounds(self):
        s = nd.Storage.zeros(3, "float64")
        s[2] = 1.5
        self.assertEqual(s[2], 1.5)
        with self.assertRaises(nd.IndexOutOfBoundsError):
            s[3]
        with self.assertRaises(nd.IndexOutOfBoundsError):
            s[-1] = 2.0
        self.assertEqual(s.tolist(), [0.0, 0.0, 1.5])

    def test_copy_is_independent(self):
        s1 = nd.Storage.zeros(2, "float64")
        s1[0] = 1.0
        s2 = s1.copy()
        s2[0] = 2.0
        self.assertEqual(s1[0], 1.0)
        self.assertEqual(s2[0], 2.0)

    def test_add(self):
        s1 = nd.Storage.zeros(3, "float64")
        s2 = nd.Storage.zeros(3, "float64")
        for i in range(3):
            s1[i] = float(i)
            s2[i] = 10.0 * i
        s1.add_(s2)
        self.assertEqual(s1.tolist(), [0.0, 11.0, 22.0])
        self.assertEqual(s2.tolist(), [0.0, 10.0, 20.0])
        s1.add_scalar_(0.5)
        self.assertEqual(s1.tolist(), [0.5, 11.5, 22.5])

    def test_add_length_mismatch(self):
        s1 = nd.Storage.zeros(3, "float64")
        s2 = nd.Storage.zeros(1, "float64")
        s2[0] = 5.0
        with self.assertRaises(nd.ShapeMismatchError):
            s1.add_(s2)
        # No broadcasting of the shorter operand
        self.assertEqual(s1.tolist(), [0.0, 0.0, 0.0])

    def test_add_dtype_mismatch(self):
        s1 = nd.Storage.zeros(2, "float32")
        s2 = nd.Storage.zeros(2, "float64")
        s2[0] = 1.0
        with self.assertRaises(nd.DTypeMismatchError):
            s1.add_(s2)
        self.assertEqual(s1.tolist(), [0.0, 0.0])

    def test_constructor_copies_data(self):
        data = np.array([1.0, 2.0, 3.0])
        s = nd.Storage(data, "float32")
        self.assertEqual(s.dtype, "float32")
        self.assertEqual(s.view().dtype, np.float32)
        data[0] = 99.0
        self.assertEqual(s[0], 1.0)
        self.assertEqual(nd.Storage([0.5, 1.5], "float64").tolist(), [0.5, 1.5])

    def test_constructor_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            nd.Storage([[1.0, 2.0], [3.0, 4.0]], "float64")
        with self.assertRaises(nd.UnsupportedDTypeError):
            nd.Storage([1.0], "int8")

    def test_view_is_read_only(self):
        s = nd.Storage.zeros(2, "float64")
        view = s.view()
        with self.assertRaises(ValueError):
            view[0] = 1.0
        self.assertEqual(s[0], 0.0)

if __name__ == '__main__':
    unittest.main()
