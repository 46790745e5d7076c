"""
    Implements reading and writing arrays in the .npy format.

    The data is stored in a binary file as follows:
    <MAGIC BYTES><MAJOR VERSION><MINOR VERSION><HEADER LENGTH><HEADER><PAYLOAD>

    The header is an ASCII dictionary literal holding the descr, fortran_order and shape keys,
    padded with spaces and a newline so that the payload starts at a multiple of 64 bytes.

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
from typing import Any, BinaryIO, Dict, Optional, Tuple, Union
from numpy import ndarray

import io
import ast
import logging
import numpy as np

from .array import NDArray
from .dtypes import DType, format_dtype, descriptor_to_dtype, dtype_to_descriptor, byte_width_of, swap_width_of
from .layout import Layout, num_elements
from ..utils.endian import host_is_little_endian, swap_bytes
from ..errors import MalformedFileError, DtypeMismatchError
from .. import config

logger = logging.getLogger(__name__)

"""
Integer types of the header length field by width
"""
header_length_types = {
    2: np.uint16,
    4: np.uint32
}


def _read_exact(fp: BinaryIO, num_bytes: int, what: str) -> bytes:
    data = fp.read(num_bytes)
    if len(data) != num_bytes:
        raise MalformedFileError(f'Expected {num_bytes} bytes of {what}, got {len(data)}.')
    return data


def _remaining_bytes(fp: BinaryIO) -> Optional[int]:
    if not fp.seekable():
        return None

    position = fp.tell()
    end = fp.seek(0, io.SEEK_END)
    fp.seek(position)
    return end - position


def read_magic(fp: BinaryIO) -> Tuple[int, int]:
    """
    Read and check the magic bytes and the version number.
    :param fp: binary file object positioned at the start of the file
    :return: major and minor version
    """
    magic_bytes = fp.read(config.NUM_BYTES_MAGIC_BYTES)
    if magic_bytes != config.MAGIC_BYTES:
        raise MalformedFileError(f'Expected magic bytes to be "{config.MAGIC_BYTES}", got "{magic_bytes}".')

    major_version, minor_version = _read_exact(fp, config.NUM_BYTES_VERSION, 'version')
    if major_version < 1:
        raise MalformedFileError(f'Unsupported format version {major_version}.{minor_version}.')

    return major_version, minor_version


def header_length_width(major_version: int) -> int:
    return config.NUM_BYTES_HEADER_LENGTH[1 if major_version == 1 else 2]


def _read_header_length(fp: BinaryIO, major_version: int) -> int:
    width = header_length_width(major_version)
    length_field = bytearray(_read_exact(fp, width, 'header length'))

    # Stored little endian.
    if not host_is_little_endian():
        swap_bytes(length_field, 1, width)

    return int(np.frombuffer(length_field, dtype=header_length_types[width])[0])


def _header_length_bytes(length: int, major_version: int) -> bytes:
    width = header_length_width(major_version)
    length_field = bytearray(np.array([length], dtype=header_length_types[width]).tobytes())

    if not host_is_little_endian():
        swap_bytes(length_field, 1, width)

    return bytes(length_field)


def parse_header(header: Union[bytes, str]) -> Dict[str, Any]:
    """
    Tokenize the header dictionary literal and check the required keys.
    Field order and whitespace are free.
    :param header: header text
    :return: dictionary of header fields
    """
    if isinstance(header, bytes):
        header = header.decode('latin1')

    try:
        fields = ast.literal_eval(header.strip())
    except (SyntaxError, ValueError, TypeError, MemoryError, RecursionError) as err:
        raise MalformedFileError(f'Cannot parse header {header!r}.') from err

    if not isinstance(fields, dict):
        raise MalformedFileError(f'Expected header to be a dictionary, got {header!r}.')

    missing = [key for key in config.HEADER_KEYS if key not in fields]
    if missing:
        raise MalformedFileError(f'Header is missing keys: {", ".join(missing)}.')

    return fields


def parse_descr(descr: Any) -> Tuple[DType, bool]:
    """
    Split a descr string into its element kind and byte order.
    :param descr: descr header field, e.g. "<f8"
    :return: element kind and True if the payload is big endian
    """
    if not isinstance(descr, str) or not descr:
        raise MalformedFileError(f'Expected descr to be a non-empty string, got {descr!r}.')

    if descr[0] in config.ENDIAN_MARKERS:
        marker, token = descr[0], descr[1:]
    else:
        marker, token = '', descr

    return descriptor_to_dtype(token), marker == config.BIG_ENDIAN_MARKER


def parse_fortran_order(fortran_order: Any) -> Layout:
    if not isinstance(fortran_order, bool):
        raise MalformedFileError(f'Expected fortran_order to be True or False, got {fortran_order!r}.')

    return Layout.COLUMN_MAJOR if fortran_order else Layout.ROW_MAJOR


def parse_shape(shape: Any) -> Tuple[int, ...]:
    """
    Check the shape header field. An empty tuple stands for a single element.
    :param shape: shape header field
    :return: shape with at least one axis
    """
    if not isinstance(shape, tuple):
        raise MalformedFileError(f'Expected shape to be a tuple, got {shape!r}.')
    if not all(isinstance(extent, int) and not isinstance(extent, bool) and extent >= 0 for extent in shape):
        raise MalformedFileError(f'Expected shape to hold non-negative integers, got {shape!r}.')

    if len(shape) == 0:
        return (1,)
    return shape


def read_array(fp: BinaryIO, dtype: Union[DType, Any]) -> NDArray:
    """
    Read an array from an open binary file object.
    :param fp: binary file object positioned at the start of the array
    :param dtype: expected element kind
    :return: array object
    """
    expected_dtype = format_dtype(dtype)

    major_version, minor_version = read_magic(fp)
    header_length = _read_header_length(fp, major_version)
    header = _read_exact(fp, header_length, 'header')
    logger.debug('Read header of %d bytes, version %d.%d: %r', header_length, major_version, minor_version, header)

    encoding = 'utf-8' if major_version >= 3 else 'latin1'
    try:
        header_text = header.decode(encoding)
    except UnicodeDecodeError as err:
        raise MalformedFileError(f'Header is not valid {encoding} text.') from err

    fields = parse_header(header_text)
    data_type, big_endian = parse_descr(fields['descr'])
    layout = parse_fortran_order(fields['fortran_order'])
    shape = parse_shape(fields['shape'])

    if data_type is not expected_dtype:
        raise DtypeMismatchError(f'Expected data type {expected_dtype.value}, file holds {data_type.value}.')

    num_bytes = num_elements(shape) * byte_width_of(data_type)
    remaining = _remaining_bytes(fp)
    if remaining is not None and remaining < num_bytes:
        raise MalformedFileError(f'Expected {num_bytes} bytes of payload, got {remaining}.')

    try:
        payload = bytearray(num_bytes)
    except (OverflowError, MemoryError) as err:
        raise MalformedFileError(f'Cannot allocate {num_bytes} bytes of payload for shape {shape}.') from err
    num_read = fp.readinto(payload)
    if num_read != num_bytes:
        raise MalformedFileError(f'Expected {num_bytes} bytes of payload, got {num_read}.')

    if big_endian == host_is_little_endian():
        swap_width = swap_width_of(data_type)
        logger.debug('Swapping byte order of %d bytes in units of %d.', num_bytes, swap_width)
        swap_bytes(payload, num_bytes // swap_width, swap_width)

    return NDArray._from_buffer(payload, shape, data_type, layout)


def build_header(data_type: DType, shape: Tuple[int, ...], layout: Layout) -> str:
    """
    Build the unpadded header text.
    :param data_type: element kind
    :param shape: shape of the array
    :param layout: storage order of the array
    :return: header dictionary literal
    """
    marker = config.LITTLE_ENDIAN_MARKER if host_is_little_endian() else config.BIG_ENDIAN_MARKER
    fortran_order = 'False' if layout is Layout.ROW_MAJOR else 'True'
    shape_text = ''.join(f'{extent},' for extent in shape)

    return f"{{'descr': '{marker}{dtype_to_descriptor(data_type)}', 'fortran_order': {fortran_order}, " \
           f"'shape': ({shape_text}), }}"


def pad_header(header: str) -> Tuple[int, bytes]:
    """
    Pad the header with spaces and a newline so that the payload is aligned, and pick the version.
    :param header: unpadded header text
    :return: major version and padded header
    """
    for major_version in (1, 2):
        preamble_length = config.NUM_BYTES_MAGIC_BYTES + config.NUM_BYTES_VERSION + \
            header_length_width(major_version) + len(header) + 1
        padding = -preamble_length % config.ALIGNMENT

        if major_version == 1 and preamble_length + padding > config.MAX_VERSION_1_LENGTH:
            continue

        return major_version, (header + ' ' * padding + '\n').encode('ascii')


def write_array(fp: BinaryIO, array: Union[NDArray, ndarray]):
    """
    Write an array to an open binary file object. The payload is written in host byte order.
    :param fp: binary file object
    :param array: array object, or numpy array
    :return:
    """
    if isinstance(array, ndarray):
        array = NDArray.from_numpy(array)

    data_type = format_dtype(array.dtype)
    major_version, header = pad_header(build_header(data_type, array.shape, array.layout))
    logger.debug('Writing header of %d bytes, version %d.%d: %r', len(header), major_version,
                 config.MINOR_VERSION, header)

    fp.write(config.MAGIC_BYTES)
    fp.write(bytes([major_version, config.MINOR_VERSION]))
    fp.write(_header_length_bytes(len(header), major_version))
    fp.write(header)
    fp.write(array.tobytes())


def load(file_path: str, dtype: Union[DType, Any]) -> NDArray:
    """
    Load an array from a file.
    :param file_path: path to the file on disk
    :param dtype: expected element kind
    :return: array object
    """
    with open(file_path, 'rb') as fp:
        return read_array(fp, dtype)


def save(array: Union[NDArray, ndarray], file_path: str):
    """
    Save an array to exactly the given path.
    :param array: array object, or numpy array
    :param file_path: path to the file on disk
    :return:
    """
    with open(file_path, 'wb') as fp:
        write_array(fp, array)
