"""
MatrixMarket header parsing.

A coordinate file starts with a banner line

    %%MatrixMarket matrix coordinate <value-format> <symmetry>

followed by any number of ``%`` comment lines and a size line

    <num_rows> <num_cols> <num_nonzeros>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from ._dtypes import int_bounds
from ._tokens import LineReader, Tokens, parse_int
from .error import MalformedHeader, NumericOverflow, UnknownSymmetry, UnknownValueFormat

logger = logging.getLogger("mtxread.header")

__all__ = ['Symmetry', 'ValueFormat', 'Header', 'parse_header']

BANNER = "%%MatrixMarket"


class Symmetry(Enum):
    GENERAL = 'general'
    SYMMETRIC = 'symmetric'


class ValueFormat(Enum):
    REAL = 'real'
    INTEGER = 'integer'
    PATTERN = 'pattern'


@dataclass(frozen=True)
class Header:
    """
    Validated file header.

    ``num_nonzeros`` is the count declared in the file, before symmetric
    expansion.
    """
    symmetry: Symmetry
    value_format: ValueFormat
    num_rows: int
    num_cols: int
    num_nonzeros: int

    @property
    def shape(self):
        return (self.num_rows, self.num_cols)

    @property
    def is_symmetric(self) -> bool:
        return self.symmetry is Symmetry.SYMMETRIC

    @property
    def is_pattern(self) -> bool:
        return self.value_format is ValueFormat.PATTERN

    @property
    def fields_per_line(self) -> int:
        """Number of fields every data line must have."""
        return 2 if self.is_pattern else 3


def parse_value_format(token: str) -> ValueFormat:
    try:
        return ValueFormat(token)
    except ValueError:
        raise UnknownValueFormat(f"Bad header: unknown value format {token!r}") from None


def parse_symmetry(token: str) -> Symmetry:
    try:
        return Symmetry(token)
    except ValueError:
        raise UnknownSymmetry(f"Bad header: unknown symmetry {token!r}") from None


def _parse_size(token: str, name: str, coord: np.dtype, line: int) -> int:
    try:
        value = parse_int(token)
    except ValueError:
        raise MalformedHeader(f"Bad header: {name} is not an integer: {token!r}", line=line) from None
    if value < 0:
        raise MalformedHeader(f"Bad header: negative {name}: {value}", line=line)
    _, hi = int_bounds(coord)
    if value > hi:
        raise NumericOverflow(f"{name} {value} does not fit in {coord.name}", line=line)
    return value


def parse_header(reader: LineReader, coord: Optional[np.dtype] = None) -> Header:
    """
    Consume the banner, comments and size line from `reader`.

    Args:
        reader: Line source positioned at the start of the file
        coord: Coordinate dtype the sizes must fit in (default int64)

    Returns:
        Validated Header; `reader` is left positioned at the first data line.

    Raises:
        MalformedHeader: Wrong banner shape/literals, missing or bad size line
        UnknownValueFormat: Value format not real/integer/pattern
        UnknownSymmetry: Symmetry not general/symmetric
        NumericOverflow: A size does not fit in `coord`
    """
    coord = np.dtype('int64') if coord is None else coord

    line = reader.next_line()
    if line is None:
        raise MalformedHeader("Bad header: empty file")

    tokens = Tokens(line, ' ')
    if len(tokens) != 5:
        raise MalformedHeader("Bad header: ill-shaped format line", line=reader.lineno)
    if tokens.pop() != BANNER:
        raise MalformedHeader(f"Bad header: missing {BANNER}", line=reader.lineno)
    if tokens.pop() != "matrix":
        raise MalformedHeader("Bad header: only matrix supported", line=reader.lineno)
    if tokens.pop() != "coordinate":
        raise MalformedHeader("Bad header: only coordinate supported", line=reader.lineno)

    value_format = parse_value_format(tokens.pop())
    symmetry = parse_symmetry(tokens.pop())

    line = reader.next_line()
    while line is not None and line.startswith('%'):
        line = reader.next_line()
    if line is None:
        raise MalformedHeader("Bad header: missing matrix size")

    tokens = Tokens(line, ' ')
    if len(tokens) != 3:
        raise MalformedHeader("Bad header: missing matrix size", line=reader.lineno)

    num_rows = _parse_size(tokens.pop(), "num_rows", coord, reader.lineno)
    num_cols = _parse_size(tokens.pop(), "num_cols", coord, reader.lineno)
    num_nonzeros = _parse_size(tokens.pop(), "num_nonzeros", coord, reader.lineno)

    header = Header(
        symmetry=symmetry,
        value_format=value_format,
        num_rows=num_rows,
        num_cols=num_cols,
        num_nonzeros=num_nonzeros,
    )
    logger.debug(
        f"Parsed header: {value_format.value} {symmetry.value} "
        f"{num_rows}x{num_cols}, {num_nonzeros} declared entries"
    )
    return header
