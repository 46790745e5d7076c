"""
    Implements address linearization for row-major and column-major storage.

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
from typing import Sequence, Tuple
from enum import Enum

import operator

from ..errors import ShapeError, InvalidIndexError, IndexOutOfRangeError


class Layout(Enum):
    """
    Storage order of the flat buffer. Values are the numpy order codes.
    """
    ROW_MAJOR = 'C'
    COLUMN_MAJOR = 'F'


def validate_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Check that a shape has at least one axis and only non-negative extents.
    :param shape: sequence of extents
    :return: shape as a tuple of ints
    """
    try:
        extents = tuple(operator.index(extent) for extent in shape)
    except TypeError as err:
        raise ShapeError(f'Shape must be a sequence of integers, got {shape!r}.') from err

    if len(extents) < 1:
        raise ShapeError('Shape must have at least one element.')
    if any(extent < 0 for extent in extents):
        raise ShapeError(f'Shape extents must be non-negative, got {extents}.')

    return extents


def num_elements(shape: Sequence[int]) -> int:
    count = 1
    for extent in shape:
        count *= extent
    return count


def check_indices(shape: Sequence[int], indices: Sequence[int]) -> Tuple[int, ...]:
    """
    Validate a full index tuple against a shape.
    :param shape: shape of the array
    :param indices: one index per axis
    :return: indices as a tuple of ints
    """
    if len(indices) != len(shape):
        raise InvalidIndexError(f'Expected {len(shape)} indices, got {len(indices)}.')

    try:
        checked = tuple(operator.index(index) for index in indices)
    except TypeError as err:
        raise InvalidIndexError(f'Indices must be integers, got {tuple(indices)!r}.') from err

    for axis, (index, extent) in enumerate(zip(checked, shape)):
        if index < 0 or index >= extent:
            raise IndexOutOfRangeError(f'Index {index} out of range for axis {axis} with extent {extent}.')

    return checked


def row_major_index(shape: Sequence[int], indices: Sequence[int]) -> int:
    # Last axis varies fastest.
    rank = len(shape)
    index = indices[rank - 1]
    coeff = 1
    for axis in range(rank - 1, 0, -1):
        coeff *= shape[axis]
        index += coeff * indices[axis - 1]
    return index


def column_major_index(shape: Sequence[int], indices: Sequence[int]) -> int:
    # First axis varies fastest.
    rank = len(shape)
    index = indices[0]
    coeff = 1
    for axis in range(rank - 1):
        coeff *= shape[axis]
        index += coeff * indices[axis + 1]
    return index


def linear_index(shape: Sequence[int], layout: Layout, indices: Sequence[int]) -> int:
    """
    Map a validated index tuple to its offset in the flat buffer.
    :param shape: shape of the array
    :param layout: storage order of the buffer
    :param indices: one index per axis, each within its extent
    :return: flat offset
    """
    if layout is Layout.ROW_MAJOR:
        return row_major_index(shape, indices)
    return column_major_index(shape, indices)
