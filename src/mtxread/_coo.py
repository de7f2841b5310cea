"""
Coordinate (COO) ingestion.

Reads the data lines that follow the header into a coordinate list:
- 1-based file coordinates are bounds-checked and shifted to 0-based
- pattern files get an implicit value of one
- symmetric files get the mirrored entry for every off-diagonal line

Duplicate coordinates are kept as separate entries; nothing is summed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple, Union

import numpy as np

from ._dtypes import int_bounds, is_float_dtype
from ._header import Header
from ._tokens import LineReader, Tokens, parse_float, parse_int
from .error import (
    InvalidNumber,
    MalformedDataLine,
    NumericOverflow,
    OutOfBoundsCoordinate,
    UnexpectedEOF,
)

logger = logging.getLogger("mtxread.coo")

__all__ = ['Nonzero', 'CooEntries', 'iter_nonzeros', 'read_coordinates']

Number = Union[int, float]


class Nonzero(NamedTuple):
    row: int
    col: int
    value: Number


@dataclass
class CooEntries:
    """
    Coordinate list of a matrix, 0-indexed.

    Attributes:
        rows: Row coordinate of every entry
        cols: Column coordinate of every entry
        values: Value of every entry
        shape: Declared matrix dimensions (rows, cols)
    """
    rows: np.ndarray
    cols: np.ndarray
    values: np.ndarray
    shape: Tuple[int, int]

    @property
    def nnz(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return self.nnz

    def __iter__(self) -> Iterator[Nonzero]:
        for r, c, v in zip(self.rows.tolist(), self.cols.tolist(), self.values.tolist()):
            yield Nonzero(r, c, v)


def _value_parser(header: Header, value: np.dtype):
    """Return a function turning the value field into a Python number."""
    if header.is_pattern:
        return None
    if is_float_dtype(value):
        cast = value.type

        def parse_bounded_float(token: str) -> float:
            v = parse_float(token)
            # Explicit inf/nan tokens pass; finite values must stay finite
            if np.isfinite(v):
                with np.errstate(over='ignore'):
                    if not np.isfinite(cast(v)):
                        raise OverflowError(f"value {token} does not fit in {value.name}")
            return v

        return parse_bounded_float

    lo, hi = int_bounds(value)

    def parse_bounded_int(token: str) -> int:
        v = parse_int(token)
        if v < lo or v > hi:
            raise OverflowError(f"value {v} does not fit in {value.name}")
        return v

    return parse_bounded_int


def iter_nonzeros(
    reader: LineReader,
    header: Header,
    value: np.dtype,
) -> Iterator[Nonzero]:
    """
    Yield the entries of the next `header.num_nonzeros` lines of `reader`.

    One entry per line, plus the mirrored entry for off-diagonal lines of a
    symmetric matrix. Lines are read unconditionally; comments are not
    allowed between data lines.

    Raises:
        UnexpectedEOF: Input ends before the declared number of lines
        MalformedDataLine: Field count does not match the value format
        InvalidNumber: A field is not a valid number
        OutOfBoundsCoordinate: Row or column (or its symmetric mirror)
            outside the declared shape
        NumericOverflow: A value does not fit in `value`
    """
    expected = header.fields_per_line
    parse_value = _value_parser(header, value)
    one = value.type(1)
    symmetric = header.is_symmetric

    for i in range(header.num_nonzeros):
        line = reader.next_line()
        if line is None:
            raise UnexpectedEOF(
                f"Bad matrix: expected {header.num_nonzeros} data lines, got {i}",
                line=reader.lineno,
            )

        tokens = Tokens(line, ' ')
        if len(tokens) != expected:
            kind = "pattern" if header.is_pattern else "value"
            raise MalformedDataLine(
                f"Bad matrix: ill-shaped {kind} line, expected {expected} fields, got {len(tokens)}",
                line=reader.lineno,
            )

        try:
            row = parse_int(tokens.pop())
            col = parse_int(tokens.pop())
            v = one if parse_value is None else parse_value(tokens.pop())
        except OverflowError as e:
            raise NumericOverflow(str(e), line=reader.lineno) from None
        except ValueError:
            raise InvalidNumber(f"Bad matrix: invalid numeric field in {line!r}", line=reader.lineno) from None

        if row < 1 or row > header.num_rows:
            raise OutOfBoundsCoordinate(
                f"Bad matrix: row {row} out of bounds [1, {header.num_rows}]", line=reader.lineno
            )
        if col < 1 or col > header.num_cols:
            raise OutOfBoundsCoordinate(
                f"Bad matrix: col {col} out of bounds [1, {header.num_cols}]", line=reader.lineno
            )

        # Fix the 1-indexing
        row -= 1
        col -= 1

        yield Nonzero(row, col, v)
        if symmetric and row != col:
            # Non-square symmetric headers can push the mirror out of shape
            if col >= header.num_rows or row >= header.num_cols:
                raise OutOfBoundsCoordinate(
                    f"Bad matrix: mirrored entry ({col + 1}, {row + 1}) out of bounds "
                    f"for {header.num_rows}x{header.num_cols} symmetric matrix",
                    line=reader.lineno,
                )
            yield Nonzero(col, row, v)


def read_coordinates(
    reader: LineReader,
    header: Header,
    coord: np.dtype,
    value: np.dtype,
) -> CooEntries:
    """
    Read all data lines into a CooEntries.

    Args:
        reader: Line source positioned at the first data line
        header: Header parsed from the same source
        coord: Coordinate dtype of the returned row/col arrays
        value: Value dtype of the returned values array
    """
    rows = []
    cols = []
    values = []
    for nz in iter_nonzeros(reader, header, value):
        rows.append(nz.row)
        cols.append(nz.col)
        values.append(nz.value)

    coo = CooEntries(
        rows=np.array(rows, dtype=coord),
        cols=np.array(cols, dtype=coord),
        values=np.array(values, dtype=value),
        shape=header.shape,
    )
    logger.debug(
        f"Read {header.num_nonzeros} data lines into {coo.nnz} entries"
        f"{' (symmetric expansion)' if header.is_symmetric else ''}"
    )
    return coo
