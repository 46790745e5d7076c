"""
    Error types raised by NPArray

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

__all__ = [
    "NPArrayError",
    "ShapeError",
    "InvalidIndexError",
    "IndexOutOfRangeError",
    "UnsupportedTypeError",
    "DtypeMismatchError",
    "MalformedFileError",
    "UnsupportedWidthError",
]


class NPArrayError(Exception):
    """
    Base class for NPArray errors.
    """


class ShapeError(NPArrayError, ValueError):
    """
    Raised when a shape is empty, holds a negative extent, or does not match the number of elements.
    """


class InvalidIndexError(NPArrayError, IndexError):
    """Raised when the number of indices does not match the rank of the array."""


class IndexOutOfRangeError(InvalidIndexError):
    """Raised when an index falls outside the extent of its axis."""


class UnsupportedTypeError(NPArrayError, TypeError):
    """Raised for an element kind or descriptor outside the supported set."""


class DtypeMismatchError(NPArrayError, TypeError):
    """Raised when a file holds a different element kind than the one requested."""


class MalformedFileError(NPArrayError, ValueError):
    """
    Raised when a file cannot be decoded: bad magic bytes, unsupported version,
    unparseable header or truncated data.
    """


class UnsupportedWidthError(NPArrayError, ValueError):
    """Raised when bytes are swapped for an element width other than 1, 2, 4, 8 or 16."""
