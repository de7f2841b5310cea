"""
COO to compressed (CSR / CSC) conversion.

Both layouts share one routine: the layout only decides which coordinate
is primary (segmented by the offsets array) and which is secondary
(stored in the indices array).

    CSR: primary = row, secondary = col, offsets has num_rows + 1 entries
    CSC: primary = col, secondary = row, offsets has num_cols + 1 entries
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple, Union

import numpy as np

from ._coo import CooEntries
from ._dtypes import int_bounds
from ._matrix import CSCMatrix, CSRMatrix
from .error import NumericOverflow

logger = logging.getLogger("mtxread.compress")

__all__ = ['Layout', 'compress', 'compress_arrays']


class Layout(Enum):
    """Compressed layout, doubling as the primary/secondary selector."""
    CSR = 'csr'
    CSC = 'csc'

    def select(self, coo: CooEntries) -> Tuple[np.ndarray, np.ndarray]:
        """(primary, secondary) coordinate arrays of `coo`."""
        if self is Layout.CSR:
            return coo.rows, coo.cols
        return coo.cols, coo.rows

    def primary_size(self, shape: Tuple[int, int]) -> int:
        return shape[0] if self is Layout.CSR else shape[1]


def compress_arrays(
    primary: np.ndarray,
    secondary: np.ndarray,
    values: np.ndarray,
    n_primary: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sort entries by (primary, secondary) and build the compressed arrays.

    Args:
        primary: Coordinate each entry is grouped by, in [0, n_primary)
        secondary: Complementary coordinate of each entry
        values: Value of each entry
        n_primary: Number of primary slots (rows for CSR, cols for CSC)

    Returns:
        (offsets, indices, values). ``offsets`` has n_primary + 1 entries,
        starts at 0, ends at len(values) and repeats its value for every
        empty slot. Within a slot the indices are ascending. All arrays are
        new; none alias the inputs.

    Raises:
        NumericOverflow: Entry count does not fit in the coordinate dtype
    """
    coord = primary.dtype
    nnz = len(values)
    _, hi = int_bounds(coord)
    if nnz > hi:
        raise NumericOverflow(f"{nnz} entries do not fit in {coord.name} offsets")

    # lexsort: last key is primary
    order = np.lexsort((secondary, primary))
    indices = secondary[order]
    data = values[order]

    counts = np.bincount(primary.astype(np.intp, copy=False), minlength=n_primary)
    offsets = np.zeros(n_primary + 1, dtype=coord)
    offsets[1:] = np.cumsum(counts)

    return offsets, indices, data


def compress(coo: CooEntries, layout: Union[Layout, str]) -> Union[CSRMatrix, CSCMatrix]:
    """
    Convert a coordinate list into a CSRMatrix or CSCMatrix.

    ``num_nonzeros`` of the result is the number of stored entries, which
    for symmetric input exceeds the count declared in the file.

    Example:
        >>> csr = compress(coo, Layout.CSR)
        >>> csc = compress(coo, 'csc')
    """
    layout = Layout(layout)
    primary, secondary = layout.select(coo)
    n_primary = layout.primary_size(coo.shape)

    offsets, indices, values = compress_arrays(primary, secondary, coo.values, n_primary)

    num_rows, num_cols = coo.shape
    logger.debug(f"Compressed {len(values)} entries into {layout.value} ({num_rows}x{num_cols})")

    if layout is Layout.CSR:
        return CSRMatrix(
            num_rows=num_rows,
            num_cols=num_cols,
            num_nonzeros=len(values),
            row_offsets=offsets,
            col_indices=indices,
            values=values,
        )
    return CSCMatrix(
        num_rows=num_rows,
        num_cols=num_cols,
        num_nonzeros=len(values),
        col_offsets=offsets,
        row_indices=indices,
        values=values,
    )
