"""
mtxread - MatrixMarket coordinate reader

Reads MatrixMarket coordinate files (real / integer / pattern values,
general / symmetric storage) into compressed sparse row or column
matrices backed by numpy arrays.

Pipeline:
    ┌────────┐   ┌────────────┐   ┌─────────────┐   ┌──────────┐
    │ header │ → │ coordinate │ → │ sort + scan │ → │ CSR/CSC  │
    │ parser │   │ list (COO) │   │  compress   │   │  matrix  │
    └────────┘   └────────────┘   └─────────────┘   └──────────┘

Example:
    >>> import mtxread
    >>> csr = mtxread.read_csr("a.mtx")
    >>> csr.row_offsets, csr.col_indices, csr.values
    >>>
    >>> # Narrower types
    >>> csc = mtxread.read_csc("a.mtx", coord_dtype=mtxread.int32,
    ...                        value_dtype=mtxread.float32)
    >>>
    >>> # scipy interop
    >>> sp_mat = csr.to_scipy()
"""

__version__ = '0.1.0'

from . import error
from .error import (
    MatrixMarketError,
    FileOpenError,
    MalformedHeader,
    UnknownValueFormat,
    UnknownSymmetry,
    MalformedDataLine,
    InvalidNumber,
    UnexpectedEOF,
    OutOfBoundsCoordinate,
    NumericOverflow,
)

from ._dtypes import (
    DType,
    float32,
    float64,
    int32,
    int64,
    uint32,
    uint64,
)

from .config import (
    set_precision,
    get_precision,
    get_config,
)

from ._header import Header, Symmetry, ValueFormat
from ._coo import CooEntries, Nonzero
from ._matrix import CompressedBase, CSRMatrix, CSCMatrix
from ._compress import Layout, compress

from .io import (
    read_header,
    read_coo,
    read_matrix,
    read_csr,
    read_csc,
)

__all__ = [
    # Version
    '__version__',

    # Reading
    'read_header',
    'read_coo',
    'read_matrix',
    'read_csr',
    'read_csc',

    # Types
    'Header',
    'Symmetry',
    'ValueFormat',
    'CooEntries',
    'Nonzero',
    'CompressedBase',
    'CSRMatrix',
    'CSCMatrix',
    'Layout',
    'compress',

    # Numeric types & configuration
    'DType',
    'float32',
    'float64',
    'int32',
    'int64',
    'uint32',
    'uint64',
    'set_precision',
    'get_precision',
    'get_config',

    # Errors
    'error',
    'MatrixMarketError',
    'FileOpenError',
    'MalformedHeader',
    'UnknownValueFormat',
    'UnknownSymmetry',
    'MalformedDataLine',
    'InvalidNumber',
    'UnexpectedEOF',
    'OutOfBoundsCoordinate',
    'NumericOverflow',
]
