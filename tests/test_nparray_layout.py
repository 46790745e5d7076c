"""
    Run tests for the layout engine

    This file is part of NPArray.

    NPArray is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    NPArray is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with NPArray.  If not, see <https://www.gnu.org/licenses/>.
"""
import unittest
import itertools
import numpy as np

from nparray import Layout, ShapeError, InvalidIndexError, IndexOutOfRangeError
from nparray._hl.layout import validate_shape, num_elements, check_indices, linear_index


class TestLinearIndex(unittest.TestCase):
    def test_row_major_2d(self):
        self.assertEqual(linear_index((2, 3), Layout.ROW_MAJOR, (1, 2)), 5)
        self.assertEqual(linear_index((2, 3), Layout.ROW_MAJOR, (1, 1)), 4)
        self.assertEqual(linear_index((2, 3), Layout.ROW_MAJOR, (0, 2)), 2)

    def test_column_major_2d(self):
        self.assertEqual(linear_index((2, 3), Layout.COLUMN_MAJOR, (1, 2)), 1 + 2 * 2)
        self.assertEqual(linear_index((2, 3), Layout.COLUMN_MAJOR, (1, 1)), 3)
        self.assertEqual(linear_index((2, 3), Layout.COLUMN_MAJOR, (0, 2)), 4)

    def test_rank_one(self):
        for layout in Layout:
            self.assertEqual(linear_index((7,), layout, (4,)), 4)

    def test_matches_numpy(self):
        shape = (2, 3, 4, 5)
        for layout in Layout:
            for indices in itertools.product(*(range(extent) for extent in shape)):
                expected = np.ravel_multi_index(indices, shape, order=layout.value)
                self.assertEqual(linear_index(shape, layout, indices), expected)


class TestCheckIndices(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(check_indices((2, 3), (1, 2)), (1, 2))
        self.assertEqual(check_indices((2, 3), (np.int64(1), np.uint8(0))), (1, 0))

    def test_wrong_count(self):
        with self.assertRaises(InvalidIndexError):
            check_indices((2, 3), (1,))
        with self.assertRaises(InvalidIndexError):
            check_indices((2, 3), (1, 1, 0))

    def test_out_of_range(self):
        with self.assertRaises(IndexOutOfRangeError):
            check_indices((2, 3), (2, 0))
        with self.assertRaises(IndexOutOfRangeError):
            check_indices((2, 3), (0, 3))
        with self.assertRaises(IndexOutOfRangeError):
            check_indices((2, 3), (-1, 0))

    def test_out_of_range_is_index_error(self):
        with self.assertRaises(IndexError):
            check_indices((2, 3), (2, 0))

    def test_non_integer(self):
        with self.assertRaises(InvalidIndexError):
            check_indices((2, 3), (1.0, 0))


class TestShape(unittest.TestCase):
    def test_validate(self):
        self.assertEqual(validate_shape([2, 3]), (2, 3))
        self.assertEqual(validate_shape((0,)), (0,))

    def test_empty(self):
        with self.assertRaises(ShapeError):
            validate_shape(())

    def test_negative(self):
        with self.assertRaises(ShapeError):
            validate_shape((2, -1))

    def test_not_integers(self):
        with self.assertRaises(ShapeError):
            validate_shape((2.5, 1))
        with self.assertRaises(ShapeError):
            validate_shape(3)

    def test_num_elements(self):
        self.assertEqual(num_elements((2, 3, 4)), 24)
        self.assertEqual(num_elements((5, 0)), 0)


if __name__ == '__main__':
    unittest.main()
