"""
    Run tests for the element kind registry

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
import numpy as np

from nparray import DType, UnsupportedTypeError
from nparray._hl.dtypes import (descriptor_to_dtype, dtype_to_descriptor, byte_width_of, swap_width_of,
                                numpy_dtype_of, format_dtype)


class TestDescriptors(unittest.TestCase):
    def test_descriptor_table(self):
        expected = {
            DType.INT8: ('b1', 1),
            DType.UINT8: ('B1', 1),
            DType.INT16: ('i2', 2),
            DType.INT32: ('i4', 4),
            DType.INT64: ('i8', 8),
            DType.UINT16: ('u2', 2),
            DType.UINT32: ('u4', 4),
            DType.UINT64: ('u8', 8),
            DType.FLOAT32: ('f4', 4),
            DType.FLOAT64: ('f8', 8),
            DType.COMPLEX64: ('c8', 8),
            DType.COMPLEX128: ('c16', 16),
        }
        self.assertEqual(set(expected), set(DType))

        for data_type, (token, width) in expected.items():
            self.assertEqual(dtype_to_descriptor(data_type), token)
            self.assertIs(descriptor_to_dtype(token), data_type)
            self.assertEqual(byte_width_of(data_type), width)
            self.assertEqual(numpy_dtype_of(data_type).itemsize, width)

    def test_unknown_descriptor(self):
        for token in ('f2', 'i1', 'U8', '', 'c32'):
            with self.assertRaises(UnsupportedTypeError):
                descriptor_to_dtype(token)

    def test_unknown_dtype(self):
        with self.assertRaises(UnsupportedTypeError):
            dtype_to_descriptor('f8')
        with self.assertRaises(UnsupportedTypeError):
            byte_width_of(None)

    def test_swap_width(self):
        self.assertEqual(swap_width_of(DType.COMPLEX64), 4)
        self.assertEqual(swap_width_of(DType.COMPLEX128), 8)
        self.assertEqual(swap_width_of(DType.FLOAT64), 8)
        self.assertEqual(swap_width_of(DType.UINT8), 1)


class TestFormatDtype(unittest.TestCase):
    def test_dtype_passthrough(self):
        for data_type in DType:
            self.assertIs(format_dtype(data_type), data_type)

    def test_numpy_types(self):
        self.assertIs(format_dtype(np.float64), DType.FLOAT64)
        self.assertIs(format_dtype('int32'), DType.INT32)
        self.assertIs(format_dtype(np.dtype('>u2')), DType.UINT16)
        self.assertIs(format_dtype(np.int8), DType.INT8)
        self.assertIs(format_dtype(complex), DType.COMPLEX128)

    def test_unsupported(self):
        for data_type in (np.bool_, np.float16, 'U8', object, None, 'not a type'):
            with self.assertRaises(UnsupportedTypeError):
                format_dtype(data_type)


if __name__ == '__main__':
    unittest.main()
