"""
    Format configuration

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

"""
    Magic bytes for format identification
"""
MAGIC_BYTES = b'\x93NUMPY'

"""
    Number of magic bytes.
"""
NUM_BYTES_MAGIC_BYTES = len(MAGIC_BYTES)
"""
    Number of bytes in which to store the version number (one byte major, one byte minor).
"""
NUM_BYTES_VERSION = 2
"""
    Number of bytes in which to store the length of the header, by major version.
    Any major version above 1 uses the 4-byte field.
"""
NUM_BYTES_HEADER_LENGTH = {
    1: 2,
    2: 4
}
"""
    Largest preamble that can still be written with a version 1 header.
"""
MAX_VERSION_1_LENGTH = 65535
"""
    Minor version written to new files.
"""
MINOR_VERSION = 0
"""
    The payload always starts at a multiple of this many bytes.
"""
ALIGNMENT = 64
"""
    Keys that every header must define.
"""
HEADER_KEYS = ('descr', 'fortran_order', 'shape')
"""
    Endianness markers in the descr field.
"""
LITTLE_ENDIAN_MARKER = '<'
BIG_ENDIAN_MARKER = '>'
ENDIAN_MARKERS = ('<', '>', '|', '=')
