"""
    Implements the registry of supported element kinds.

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
from typing import Any, Union
from enum import Enum

import numpy as np

from ..errors import UnsupportedTypeError


class DType(Enum):
    """
    Element kinds an array can hold.
    """
    INT8 = 'int8'
    UINT8 = 'uint8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    UINT16 = 'uint16'
    UINT32 = 'uint32'
    UINT64 = 'uint64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    COMPLEX64 = 'complex64'
    COMPLEX128 = 'complex128'

    def __repr__(self) -> str:
        return f'DType.{self.name}'


"""
Descriptor tokens by element kind
"""
descriptors = {
    DType.INT8: 'b1',
    DType.UINT8: 'B1',
    DType.INT16: 'i2',
    DType.INT32: 'i4',
    DType.INT64: 'i8',
    DType.UINT16: 'u2',
    DType.UINT32: 'u4',
    DType.UINT64: 'u8',
    DType.FLOAT32: 'f4',
    DType.FLOAT64: 'f8',
    DType.COMPLEX64: 'c8',
    DType.COMPLEX128: 'c16'
}

"""
Element kinds by descriptor token
"""
descriptor_dtypes = {value: key for key, value in descriptors.items()}

"""
Size in bytes of one element
"""
byte_widths = {
    DType.INT8: 1,
    DType.UINT8: 1,
    DType.INT16: 2,
    DType.INT32: 4,
    DType.INT64: 8,
    DType.UINT16: 2,
    DType.UINT32: 4,
    DType.UINT64: 8,
    DType.FLOAT32: 4,
    DType.FLOAT64: 8,
    DType.COMPLEX64: 8,
    DType.COMPLEX128: 16
}

"""
Element kinds by numpy (kind, itemsize)
"""
numpy_kinds = {
    ('i', 1): DType.INT8,
    ('u', 1): DType.UINT8,
    ('i', 2): DType.INT16,
    ('i', 4): DType.INT32,
    ('i', 8): DType.INT64,
    ('u', 2): DType.UINT16,
    ('u', 4): DType.UINT32,
    ('u', 8): DType.UINT64,
    ('f', 4): DType.FLOAT32,
    ('f', 8): DType.FLOAT64,
    ('c', 8): DType.COMPLEX64,
    ('c', 16): DType.COMPLEX128
}


def _supported() -> str:
    return ", ".join(dtype.value for dtype in DType)


def _check_dtype(data_type: Any):
    if not isinstance(data_type, DType):
        raise UnsupportedTypeError(f'Unknown DType {data_type!r}.')


def descriptor_to_dtype(token: str) -> DType:
    """
    Get the element kind for a descriptor token (without endianness marker).
    :param token: descriptor token, e.g. "f8"
    :return: element kind
    """
    if token not in descriptor_dtypes:
        raise UnsupportedTypeError(f'Data type {token!r} is unknown. '
                                   f'Supported descriptors are: {", ".join(descriptor_dtypes)}.')

    return descriptor_dtypes[token]


def dtype_to_descriptor(data_type: DType) -> str:
    _check_dtype(data_type)
    return descriptors[data_type]


def byte_width_of(data_type: DType) -> int:
    _check_dtype(data_type)
    return byte_widths[data_type]


def swap_width_of(data_type: DType) -> int:
    """
    Width of the independently byte-ordered unit of an element.
    Complex values are two floats, each swapped on its own.
    :param data_type: element kind
    :return: width in bytes
    """
    width = byte_width_of(data_type)
    if data_type in (DType.COMPLEX64, DType.COMPLEX128):
        return width // 2
    return width


def numpy_dtype_of(data_type: DType) -> np.dtype:
    """
    Native byte order numpy type used for the flat buffer of an array.
    :param data_type: element kind
    :return: numpy dtype
    """
    _check_dtype(data_type)
    return np.dtype(data_type.value)


def format_dtype(data_type: Union[DType, Any]) -> DType:
    """
    Converts an element kind given as a DType or anything accepted by numpy.dtype
    into one of the supported kinds, raises an exception if it is not possible.
    :param data_type: element kind
    :return: supported element kind
    """
    if isinstance(data_type, DType):
        return data_type
    if data_type is None:
        raise UnsupportedTypeError(f'An element kind is required. Supported types are: {_supported()}')

    try:
        numpy_type = np.dtype(data_type)
    except TypeError as err:
        raise UnsupportedTypeError(f'Type {data_type!r} is not supported. Supported types are: {_supported()}') from err

    key = (numpy_type.kind, numpy_type.itemsize)
    if key not in numpy_kinds:
        raise UnsupportedTypeError(f'Type {numpy_type} is not supported. Supported types are: {_supported()}')

    return numpy_kinds[key]
