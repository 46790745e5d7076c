"""
    Byte order utilities.

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
from typing import Union
from numpy import ndarray

import sys
import numpy as np

from ..errors import UnsupportedWidthError


def host_is_little_endian() -> bool:
    """
    Check the byte order of the host.
    :return: True if the host stores integers least significant byte first
    """
    return sys.byteorder == 'little'


def swap_one_byte(elements: ndarray):
    pass


def swap_two_bytes(elements: ndarray):
    elements[:] = elements[:, [1, 0]]


def swap_four_bytes(elements: ndarray):
    elements[:] = elements[:, [3, 2, 1, 0]]


def swap_eight_bytes(elements: ndarray):
    elements[:] = elements[:, [7, 6, 5, 4, 3, 2, 1, 0]]


def swap_sixteen_bytes(elements: ndarray):
    # Reverses the whole span: for a complex128 element this also exchanges the two components.
    elements[:] = elements[:, [15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0]]


"""
Swap routines by element width
"""
swap_routines = {
    1: swap_one_byte,
    2: swap_two_bytes,
    4: swap_four_bytes,
    8: swap_eight_bytes,
    16: swap_sixteen_bytes
}


def _byte_view(buffer: Union[bytearray, memoryview, ndarray]) -> ndarray:
    if isinstance(buffer, ndarray):
        return buffer.reshape(-1).view(np.uint8)
    return np.frombuffer(buffer, dtype=np.uint8)


def swap_bytes(buffer: Union[bytearray, memoryview, ndarray], element_count: int, element_width: int):
    """
    Reverse the byte order of each element of a buffer in place.
    :param buffer: writable buffer holding at least element_count * element_width bytes
    :param element_count: number of elements to swap
    :param element_width: size of one element in bytes (1, 2, 4, 8 or 16)
    :return:
    """
    if element_width not in swap_routines:
        raise UnsupportedWidthError(f'Cannot swap bytes for elements of width {element_width}. '
                                    f'Supported widths are: {", ".join(str(w) for w in swap_routines)}.')

    raw = _byte_view(buffer)
    if not raw.flags.writeable:
        raise TypeError('Byte swapping requires a writable buffer.')

    num_bytes = element_count * element_width
    if num_bytes > raw.size:
        raise ValueError(f'Buffer of {raw.size} bytes is too small for {element_count} elements of width {element_width}.')

    swap_routines[element_width](raw[:num_bytes].reshape(element_count, element_width))
