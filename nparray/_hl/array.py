"""
    Implements high-level support for N-dimensional array objects.

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
from typing import Any, Iterator, Optional, Sequence, Tuple, Union
from numpy import ndarray

import operator
import numpy as np

from .dtypes import DType, format_dtype, numpy_dtype_of
from .layout import Layout, validate_shape, num_elements, check_indices, linear_index
from ..errors import ShapeError, InvalidIndexError, IndexOutOfRangeError


class NDArray:
    """
        Represents a dense N-dimensional array stored in a flat buffer.
    """
    def __init__(self, shape: Sequence[int], dtype: Union[DType, Any], data: Optional[Any] = None,
                 layout: Union[Layout, str] = Layout.ROW_MAJOR):
        """
        Create a new array object.
        :param shape: extent of each axis (at least one axis)
        :param dtype: element kind, as a DType or anything numpy.dtype accepts
        :param data: flat sequence of product(shape) elements, zeros if omitted
        :param layout: storage order of data
        """
        self._dtype: DType = format_dtype(dtype)
        self._shape: Tuple[int, ...] = validate_shape(shape)
        self._layout: Layout = Layout(layout)

        size = num_elements(self._shape)
        numpy_type = numpy_dtype_of(self._dtype)

        if data is None:
            self._data: ndarray = np.zeros(size, dtype=numpy_type)
        else:
            flat = np.array(data, dtype=numpy_type).reshape(-1)
            if flat.size != size:
                raise ShapeError(f'Shape {self._shape} is incompatible with {flat.size} elements provided.')
            self._data = flat

    @classmethod
    def _from_buffer(cls, buffer: bytearray, shape: Tuple[int, ...], dtype: DType, layout: Layout) -> 'NDArray':
        """
        Wrap a decoded payload without copying it.
        :param buffer: payload in host byte order
        :param shape: validated shape
        :param dtype: element kind
        :param layout: storage order of the payload
        :return: array owning the buffer
        """
        array = cls.__new__(cls)
        array._dtype = dtype
        array._shape = shape
        array._layout = layout
        array._data = np.frombuffer(buffer, dtype=numpy_dtype_of(dtype))
        return array

    @classmethod
    def from_numpy(cls, array: ndarray, dtype: Optional[Union[DType, Any]] = None,
                   layout: Optional[Union[Layout, str]] = None) -> 'NDArray':
        """
        Copy a numpy array.
        :param array: numpy array with at least one dimension
        :param dtype: element kind (defaults to the kind of array)
        :param layout: storage order (defaults to column-major for Fortran ordered arrays only)
        :return: array object
        """
        array = np.asarray(array)
        if layout is None:
            fortran = array.flags.f_contiguous and not array.flags.c_contiguous
            layout = Layout.COLUMN_MAJOR if fortran else Layout.ROW_MAJOR
        layout = Layout(layout)

        return cls(array.shape, array.dtype if dtype is None else dtype, array.ravel(order=layout.value), layout)

    @classmethod
    def load(cls, file_path: str, dtype: Union[DType, Any]) -> 'NDArray':
        """
        Load an array from a file.
        :param file_path: path to the file on disk
        :param dtype: expected element kind
        :return: array object
        """
        from .serialization import load
        return load(file_path, dtype)

    def save(self, file_path: str):
        """
        Save the array to exactly the given path.
        :param file_path: path to the file on disk
        :return:
        """
        from .serialization import save
        save(self, file_path)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def c_contiguous(self) -> bool:
        """
        True if data is stored in row-major order, False if in column-major order.
        """
        return self._layout is Layout.ROW_MAJOR

    @property
    def data(self) -> ndarray:
        """
        Flat buffer of the array (shares memory with the array).
        """
        return self._data

    def linear_index(self, *indices: int) -> int:
        """
        Get the offset in the flat buffer of the element at the given indices.
        :param indices: one index per axis
        :return: flat offset
        """
        checked = check_indices(self._shape, indices)
        return linear_index(self._shape, self._layout, checked)

    def _offset(self, key: Union[int, Sequence[int]]) -> int:
        if isinstance(key, (tuple, list)):
            return self.linear_index(*key)

        try:
            offset = operator.index(key)
        except TypeError as err:
            raise InvalidIndexError(f'Expected an integer or a tuple of integers, got {key!r}.') from err

        if offset < 0 or offset >= self.size:
            raise IndexOutOfRangeError(f'Flat index {offset} out of range for array of size {self.size}.')
        return offset

    def __getitem__(self, key: Union[int, Sequence[int]]) -> Any:
        """
        Access an element by full index tuple or by flat index.
        :param key: tuple of indices or flat index
        :return: element
        """
        return self._data[self._offset(key)]

    def __setitem__(self, key: Union[int, Sequence[int]], value: Any):
        self._data[self._offset(key)] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NDArray):
            return NotImplemented
        return (self._shape == other._shape and self._dtype is other._dtype
                and self._layout is other._layout and np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f'NDArray(shape={self._shape}, dtype={self._dtype!r}, layout={self._layout})'

    def fill(self, value: Any):
        self._data.fill(value)

    def reshape(self, new_shape: Sequence[int]):
        """
        Change the shape without touching the flat buffer.
        :param new_shape: shape with the same number of elements
        :return:
        """
        new_shape = validate_shape(new_shape)

        if num_elements(new_shape) != self.size:
            raise ShapeError(f'Shape {new_shape} is incompatible with {self.size} elements in array.')

        self._shape = new_shape

    def reallocate(self, new_shape: Sequence[int]):
        """
        Resize the flat buffer to fit the new shape.
        Trailing elements are lost if the array shrinks, new elements are zero.
        :param new_shape: new shape
        :return:
        """
        new_shape = validate_shape(new_shape)

        data = np.zeros(num_elements(new_shape), dtype=self._data.dtype)
        kept = min(data.size, self._data.size)
        data[:kept] = self._data[:kept]

        self._shape = new_shape
        self._data = data

    def tobytes(self) -> bytes:
        """
        Serialize the flat buffer in host byte order.
        :return: raw bytes
        """
        return self._data.tobytes()

    def to_numpy(self) -> ndarray:
        """
        Copy the array into a numpy array of the same shape.
        :return: numpy array
        """
        return self._data.reshape(self._shape, order=self._layout.value).copy(order=self._layout.value)
