"""
Compressed Sparse Matrices

Result types of the read functions. Each matrix owns three contiguous
numpy arrays:

    - offsets[primary + 1]: Cumulative entry counts per row (CSR) / column (CSC)
    - indices[nnz]: Secondary coordinate (col for CSR, row for CSC)
    - values[nnz]: Entry values

Type Hierarchy:

    CompressedBase (ABC)
    ├── CSRMatrix - row_offsets / col_indices / values
    └── CSCMatrix - col_offsets / row_indices / values

Duplicate coordinates read from a file are stored as separate entries.
Conversions that produce dense output (to_dense, to_scipy().toarray())
add them together.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from scipy.sparse import csr_matrix, csc_matrix, spmatrix

__all__ = ['CompressedBase', 'CSRMatrix', 'CSCMatrix']


class CompressedBase(ABC):
    """
    Shared interface of CSRMatrix and CSCMatrix.

    Subclasses name their arrays after the layout (``row_offsets`` vs
    ``col_offsets``); the layout-neutral aliases ``indptr``, ``indices`` and
    ``data`` follow scipy's naming.
    """

    __slots__ = ('num_rows', 'num_cols', 'num_nonzeros', '_offsets', '_indices', '_values')

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        num_nonzeros: int,
        offsets: np.ndarray,
        indices: np.ndarray,
        values: np.ndarray,
    ):
        self.num_rows = int(num_rows)
        self.num_cols = int(num_cols)
        self.num_nonzeros = int(num_nonzeros)
        self._offsets = np.asarray(offsets)
        self._indices = np.asarray(indices)
        self._values = np.asarray(values)

        if self.num_rows < 0 or self.num_cols < 0:
            raise ValueError(f"Invalid shape: ({self.num_rows}, {self.num_cols})")
        if len(self._offsets) != self.primary_size + 1:
            raise ValueError(
                f"offsets length {len(self._offsets)} != {self._primary_name} + 1 = {self.primary_size + 1}"
            )
        if len(self._indices) != self.num_nonzeros or len(self._values) != self.num_nonzeros:
            raise ValueError(
                f"indices/values lengths ({len(self._indices)}, {len(self._values)}) "
                f"!= num_nonzeros {self.num_nonzeros}"
            )

    # =========================================================================
    # Layout Hooks
    # =========================================================================

    @property
    @abstractmethod
    def format(self) -> str:
        """Sparse format ('csr' or 'csc')."""
        ...

    @property
    @abstractmethod
    def primary_size(self) -> int:
        """Number of compressed slots (rows for CSR, cols for CSC)."""
        ...

    @property
    @abstractmethod
    def secondary_size(self) -> int:
        ...

    @property
    @abstractmethod
    def _primary_name(self) -> str:
        ...

    @abstractmethod
    def to_scipy(self) -> 'spmatrix':
        """Convert to the matching scipy sparse matrix (duplicates kept)."""
        ...

    @abstractmethod
    def entries(self) -> Iterator[Tuple[int, int, object]]:
        """Iterate (row, col, value) in storage order."""
        ...

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.num_rows, self.num_cols)

    @property
    def nnz(self) -> int:
        return self.num_nonzeros

    @property
    def rows(self) -> int:
        return self.num_rows

    @property
    def cols(self) -> int:
        return self.num_cols

    @property
    def dtype(self) -> np.dtype:
        """Value dtype."""
        return self._values.dtype

    @property
    def index_dtype(self) -> np.dtype:
        """Coordinate dtype of offsets and indices."""
        return self._offsets.dtype

    @property
    def density(self) -> float:
        """Stored entries over total size."""
        total = self.num_rows * self.num_cols
        return self.num_nonzeros / total if total > 0 else 0.0

    @property
    def indptr(self) -> np.ndarray:
        return self._offsets

    @property
    def indices(self) -> np.ndarray:
        return self._indices

    @property
    def data(self) -> np.ndarray:
        return self._values

    @property
    def values(self) -> np.ndarray:
        return self._values

    # =========================================================================
    # Segment Access
    # =========================================================================

    def _segment(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        if i < 0 or i >= self.primary_size:
            raise IndexError(f"{self._primary_name} index {i} out of range [0, {self.primary_size})")
        start = int(self._offsets[i])
        end = int(self._offsets[i + 1])
        return self._indices[start:end], self._values[start:end]

    def _segment_length(self, i: int) -> int:
        if i < 0 or i >= self.primary_size:
            raise IndexError(f"{self._primary_name} index {i} out of range [0, {self.primary_size})")
        return int(self._offsets[i + 1]) - int(self._offsets[i])

    def segment_lengths(self) -> np.ndarray:
        """Entries per compressed slot."""
        return np.diff(self._offsets.astype(np.int64))

    # =========================================================================
    # Validation & Conversion
    # =========================================================================

    def validate(self) -> None:
        """
        Check the structural invariants.

        Raises:
            ValueError: offsets do not start at 0, decrease, or do not end at
                num_nonzeros; an index is out of range; or indices are not
                ascending within a slot.
        """
        offsets = self._offsets.astype(np.int64)
        if offsets[0] != 0:
            raise ValueError(f"offsets[0] = {offsets[0]}, expected 0")
        if offsets[-1] != self.num_nonzeros:
            raise ValueError(f"offsets[-1] = {offsets[-1]}, expected {self.num_nonzeros}")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets are not non-decreasing")

        if self.num_nonzeros == 0:
            return
        indices = self._indices.astype(np.int64)
        if indices.min() < 0 or indices.max() >= self.secondary_size:
            raise ValueError(f"indices out of range [0, {self.secondary_size})")

        # Descents are only allowed where a new slot starts
        descents = np.flatnonzero(np.diff(indices) < 0) + 1
        if len(np.setdiff1d(descents, offsets[1:-1])):
            raise ValueError("indices are not sorted within a slot")

    def to_dense(self) -> np.ndarray:
        """Dense ndarray; duplicate entries are summed."""
        dense = np.zeros(self.shape, dtype=self.dtype)
        if self.num_nonzeros:
            r, c, _ = self._coordinates()
            np.add.at(dense, (r, c), self._values)
        return dense

    def _coordinates(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """(rows, cols, values) arrays in storage order."""
        primary = np.repeat(np.arange(self.primary_size, dtype=np.int64), self.segment_lengths())
        secondary = self._indices.astype(np.int64)
        if self.format == 'csr':
            return primary, secondary, self._values
        return secondary, primary, self._values

    def copy(self) -> 'CompressedBase':
        """Create deep copy."""
        return type(self)(
            self.num_rows,
            self.num_cols,
            self.num_nonzeros,
            self._offsets.copy(),
            self._indices.copy(),
            self._values.copy(),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, nnz={self.num_nonzeros}, "
            f"dtype={self.dtype}, index_dtype={self.index_dtype})"
        )

    def __len__(self) -> int:
        return self.num_rows


class CSRMatrix(CompressedBase):
    """
    Compressed sparse row matrix.

    Example:
        >>> csr = read_csr("a.mtx")
        >>> cols, vals = csr.get_row(0)
        >>> for i, j, v in csr.entries():
        ...     print(i, j, v)
    """

    __slots__ = ()

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        num_nonzeros: int,
        row_offsets: np.ndarray,
        col_indices: np.ndarray,
        values: np.ndarray,
    ):
        super().__init__(num_rows, num_cols, num_nonzeros, row_offsets, col_indices, values)

    @property
    def format(self) -> str:
        return 'csr'

    @property
    def primary_size(self) -> int:
        return self.num_rows

    @property
    def secondary_size(self) -> int:
        return self.num_cols

    @property
    def _primary_name(self) -> str:
        return 'row'

    @property
    def row_offsets(self) -> np.ndarray:
        return self._offsets

    @property
    def col_indices(self) -> np.ndarray:
        return self._indices

    def get_row(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        """(col_indices, values) of row i."""
        return self._segment(i)

    def row_length(self, i: int) -> int:
        return self._segment_length(i)

    def entries(self) -> Iterator[Tuple[int, int, object]]:
        for i in range(self.num_rows):
            start, end = int(self._offsets[i]), int(self._offsets[i + 1])
            for k in range(start, end):
                yield i, int(self._indices[k]), self._values[k].item()

    def to_scipy(self) -> 'csr_matrix':
        """Convert to scipy CSR matrix."""
        import scipy.sparse as sp

        return sp.csr_matrix(
            (self._values.copy(),
             self._indices.astype(np.int64),
             self._offsets.astype(np.int64)),
            shape=self.shape
        )


class CSCMatrix(CompressedBase):
    """Compressed sparse column matrix."""

    __slots__ = ()

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        num_nonzeros: int,
        col_offsets: np.ndarray,
        row_indices: np.ndarray,
        values: np.ndarray,
    ):
        super().__init__(num_rows, num_cols, num_nonzeros, col_offsets, row_indices, values)

    @property
    def format(self) -> str:
        return 'csc'

    @property
    def primary_size(self) -> int:
        return self.num_cols

    @property
    def secondary_size(self) -> int:
        return self.num_rows

    @property
    def _primary_name(self) -> str:
        return 'col'

    @property
    def col_offsets(self) -> np.ndarray:
        return self._offsets

    @property
    def row_indices(self) -> np.ndarray:
        return self._indices

    def get_col(self, j: int) -> Tuple[np.ndarray, np.ndarray]:
        """(row_indices, values) of column j."""
        return self._segment(j)

    def col_length(self, j: int) -> int:
        return self._segment_length(j)

    def entries(self) -> Iterator[Tuple[int, int, object]]:
        for j in range(self.num_cols):
            start, end = int(self._offsets[j]), int(self._offsets[j + 1])
            for k in range(start, end):
                yield int(self._indices[k]), j, self._values[k].item()

    def to_scipy(self) -> 'csc_matrix':
        """Convert to scipy CSC matrix."""
        import scipy.sparse as sp

        return sp.csc_matrix(
            (self._values.copy(),
             self._indices.astype(np.int64),
             self._offsets.astype(np.int64)),
            shape=self.shape
        )
