"""
    Python implementation of a dense N-dimensional array with .npy persistence.

    An array owns a flat buffer of a single element kind, a shape and a storage order
    (row-major or column-major). Elements are addressed by full index tuple or by flat index.

    The data is stored in a binary file as follows:
    <MAGIC BYTES><VERSION><HEADER LENGTH><HEADER><PAYLOAD>
"""
from ._hl.array import NDArray
from ._hl.dtypes import DType
from ._hl.layout import Layout
from ._hl.serialization import load, save
from .errors import (NPArrayError, ShapeError, InvalidIndexError, IndexOutOfRangeError, UnsupportedTypeError,
                     DtypeMismatchError, MalformedFileError, UnsupportedWidthError)
from .version import version as __version__
