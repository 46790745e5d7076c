"""
    NPArray versioning

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
from typing import NamedTuple


class VersionInfo(NamedTuple):
    """
    Library release number, independent of the .npy format version written to files.
    """
    major: int
    minor: int
    bugfix: int

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}.{self.bugfix}'


version_tuple = VersionInfo(0, 1, 0)

version = str(version_tuple)
