import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from array_errors import IndexOutOfRangeError
from static_array import StaticArray


class TestStaticArray(unittest.TestCase):
    def test_size(self):
        arr = StaticArray(5)
        self.assertEqual(arr.size(), 5)
        self.assertEqual(len(arr), 5)
        self.assertEqual(StaticArray(0).size(), 0)

    def test_starts_zeroed(self):
        arr = StaticArray(3)
        self.assertEqual(arr.to_list(), [0, 0, 0])
        self.assertEqual(str(arr), "StaticArray[0, 0, 0]")

    def test_fill_and_access(self):
        arr = StaticArray(4)
        arr.fill(42)
        for i in range(arr.size()):
            self.assertEqual(arr[i], 42)

    def test_get_and_set(self):
        arr = StaticArray(3)
        arr.set(0, 100)
        arr.set(1, 200)
        arr.set(2, 300)
        self.assertEqual(arr.get(0), 100)
        self.assertEqual(arr.get(1), 200)
        self.assertEqual(arr.get(2), 300)

    def test_subscript_operator(self):
        arr = StaticArray(3)
        arr[0] = 10
        arr[2] = 30
        self.assertEqual(arr[0], 10)
        self.assertEqual(arr[2], 30)

    def test_get_out_of_range(self):
        arr = StaticArray(3)
        with self.assertRaises(IndexOutOfRangeError) as ctx:
            arr.get(3)
        self.assertEqual(ctx.exception.high, 2)
        self.assertIn("[0, 2]", str(ctx.exception))
        with self.assertRaises(IndexOutOfRangeError):
            arr.get(-1)
        with self.assertRaises(IndexOutOfRangeError):
            arr.set(100, 1)

    def test_get_on_zero_size(self):
        arr = StaticArray(0)
        with self.assertRaises(IndexError):
            arr.get(0)

    def test_iteration(self):
        arr = StaticArray(5)
        arr.fill(3)
        self.assertEqual(sum(arr), 15)

    def test_float_dtype(self):
        arr = StaticArray(2, dtype=np.float64)
        arr.set(0, 0.5)
        self.assertEqual(arr.to_list(), [0.5, 0.0])

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            StaticArray(-1)
        with self.assertRaises(ValueError):
            StaticArray("three")

    def test_non_scalar_values_rejected(self):
        arr = StaticArray(3)
        with self.assertRaises(ValueError):
            arr.fill([1, 2, 3])
        with self.assertRaises(ValueError):
            arr.fill(np.array([1, 2, 3]))
        with self.assertRaises(ValueError):
            arr.set(0, [7])
        with self.assertRaises(ValueError):
            arr[1] = (4, 5)
        self.assertEqual(arr.to_list(), [0, 0, 0])

    def test_bad_value_rejected(self):
        arr = StaticArray(2)
        with self.assertRaises(ValueError):
            arr.set(0, "abc")
        self.assertEqual(arr.to_list(), [0, 0])

    def test_invalid_dtype(self):
        with self.assertRaises(ValueError):
            StaticArray(3, dtype=object)


if __name__ == "__main__":
    unittest.main()
