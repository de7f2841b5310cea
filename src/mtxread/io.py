"""
MatrixMarket file readers.

Pipeline per call:

    open -> parse_header -> read_coordinates -> compress -> matrix

Each call is independent: it opens its own file handle, keeps the
coordinate list local and either returns a complete matrix or raises a
MatrixMarketError. No partially built matrix is ever returned.

Example:
    >>> import mtxread
    >>> csr = mtxread.read_csr("bcsstk01.mtx")
    >>> csc = mtxread.read_csc("bcsstk01.mtx", coord_dtype="int32", value_dtype="float32")
    >>> csr.row_offsets, csr.col_indices, csr.values
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from ._compress import Layout, compress
from ._coo import CooEntries, read_coordinates
from ._header import Header, parse_header
from ._matrix import CSCMatrix, CSRMatrix
from ._tokens import LineReader
from .config import DtypeLike, get_config
from .error import FileOpenError

logger = logging.getLogger("mtxread.io")

__all__ = ['read_header', 'read_coo', 'read_csr', 'read_csc', 'read_matrix']

PathLike = Union[str, "os.PathLike[str]"]


@contextmanager
def _open_lines(path: PathLike) -> Iterator[LineReader]:
    """Open `path` for forward-only line reading."""
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileOpenError(f"Could not open file for reading: {os.fspath(path)!s}") from e
    with f:
        yield LineReader(f)


def read_header(path: PathLike, coord_dtype: Optional[DtypeLike] = None) -> Header:
    """
    Read only the header of a MatrixMarket file.

    Args:
        path: File path
        coord_dtype: Coordinate type the declared sizes must fit in

    Returns:
        Header with the declared (pre-expansion) entry count
    """
    coord, _ = get_config().resolve(coord_dtype, None)
    with _open_lines(path) as reader:
        return parse_header(reader, coord)


def read_coo(
    path: PathLike,
    coord_dtype: Optional[DtypeLike] = None,
    value_dtype: Optional[DtypeLike] = None,
) -> CooEntries:
    """
    Read a MatrixMarket file into an unsorted, 0-indexed coordinate list.

    Symmetric files are already expanded; entries appear in file order with
    each mirrored entry directly after its original.
    """
    coord, value = get_config().resolve(coord_dtype, value_dtype)
    with _open_lines(path) as reader:
        header = parse_header(reader, coord)
        return read_coordinates(reader, header, coord, value)


def read_matrix(
    path: PathLike,
    layout: Union[Layout, str],
    coord_dtype: Optional[DtypeLike] = None,
    value_dtype: Optional[DtypeLike] = None,
) -> Union[CSRMatrix, CSCMatrix]:
    """
    Read a MatrixMarket file into the requested compressed layout.

    Args:
        path: File path
        layout: Layout.CSR / Layout.CSC or 'csr' / 'csc'
        coord_dtype: Dtype of offsets and indices (default from config)
        value_dtype: Dtype of values (default from config)

    Raises:
        FileOpenError: Path missing or unreadable
        MalformedHeader, UnknownValueFormat, UnknownSymmetry: Bad header
        MalformedDataLine, InvalidNumber, UnexpectedEOF: Bad data lines
        OutOfBoundsCoordinate: Entry outside the declared shape
        NumericOverflow: Sizes, counts or values do not fit the dtypes
    """
    layout = Layout(layout)
    coo = read_coo(path, coord_dtype, value_dtype)
    matrix = compress(coo, layout)
    logger.debug(f"Read {path!s}: {matrix!r}")
    return matrix


def read_csr(
    path: PathLike,
    coord_dtype: Optional[DtypeLike] = None,
    value_dtype: Optional[DtypeLike] = None,
) -> CSRMatrix:
    """
    Read a MatrixMarket coordinate file as a CSRMatrix.

    Example:
        >>> csr = read_csr("a.mtx")
        >>> csr.row_offsets  # len num_rows + 1
    """
    return read_matrix(path, Layout.CSR, coord_dtype, value_dtype)


def read_csc(
    path: PathLike,
    coord_dtype: Optional[DtypeLike] = None,
    value_dtype: Optional[DtypeLike] = None,
) -> CSCMatrix:
    """Read a MatrixMarket coordinate file as a CSCMatrix."""
    return read_matrix(path, Layout.CSC, coord_dtype, value_dtype)
