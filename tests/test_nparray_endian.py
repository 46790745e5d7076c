"""
    Run tests for the byte order utilities

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
import sys
import unittest
import numpy as np

from nparray import UnsupportedWidthError
from nparray.utils.endian import host_is_little_endian, swap_bytes


class TestHostByteOrder(unittest.TestCase):
    def test_host_byte_order(self):
        self.assertEqual(host_is_little_endian(), sys.byteorder == 'little')
        probe = np.array([1], dtype=np.uint16).view(np.uint8)
        self.assertEqual(host_is_little_endian(), probe[0] == 1)


class TestSwapBytes(unittest.TestCase):
    def test_reverses_each_element(self):
        for width in (2, 4, 8, 16):
            pattern = bytes(range(width)) * 3
            buffer = bytearray(pattern)
            swap_bytes(buffer, 3, width)
            self.assertEqual(bytes(buffer), bytes(reversed(range(width))) * 3)

    def test_involution(self):
        rng = np.random.default_rng(0)
        for width in (1, 2, 4, 8, 16):
            pattern = rng.integers(0, 256, size=5 * width, dtype=np.uint8).tobytes()
            buffer = bytearray(pattern)
            swap_bytes(buffer, 5, width)
            swap_bytes(buffer, 5, width)
            self.assertEqual(bytes(buffer), pattern)

    def test_width_one_is_noop(self):
        buffer = bytearray(b'abc')
        swap_bytes(buffer, 3, 1)
        self.assertEqual(buffer, bytearray(b'abc'))

    def test_matches_numpy_byteswap(self):
        values = np.arange(10, dtype=np.float64) * 1.5
        swapped = values.copy()
        swap_bytes(swapped, values.size, 8)
        np.testing.assert_array_equal(swapped, values.byteswap())

    def test_only_given_elements_are_swapped(self):
        buffer = bytearray(b'\x01\x02\x03\x04')
        swap_bytes(buffer, 1, 2)
        self.assertEqual(buffer, bytearray(b'\x02\x01\x03\x04'))

    def test_unsupported_width(self):
        for width in (3, 5, 32):
            with self.assertRaises(UnsupportedWidthError):
                swap_bytes(bytearray(width * 2), 2, width)

    def test_read_only_buffer(self):
        with self.assertRaises(TypeError):
            swap_bytes(b'\x00\x01', 1, 2)

    def test_buffer_too_small(self):
        with self.assertRaises(ValueError):
            swap_bytes(bytearray(6), 2, 4)


if __name__ == '__main__':
    unittest.main()
