"""
Command-line interface for mtxread.

Usage:
    python -m mtxread FILE [options]

Prints one "row col value" line (0-indexed) per stored entry, in CSR
(row-major) or CSC (column-major) storage order.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from ._dtypes import COORD_DTYPES, VALUE_DTYPES
from .error import MatrixMarketError
from .io import read_header, read_matrix


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="python -m mtxread",
        description="Read a MatrixMarket coordinate file and print its entries.",
    )
    p.add_argument("file", type=Path, help="MatrixMarket .mtx path")
    p.add_argument("--layout", choices=("csr", "csc"), default="csr", help="Compressed layout (default: csr)")
    p.add_argument("--coord-dtype", choices=sorted(COORD_DTYPES), default=None, help="Coordinate type")
    p.add_argument("--value-dtype", choices=sorted(VALUE_DTYPES), default=None, help="Value type")
    p.add_argument("--header-only", action="store_true", help="Print the header summary and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _format_value(value) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    args = _parse_args(argv)
    out = sys.stdout if out is None else out

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.header_only:
            header = read_header(args.file, args.coord_dtype)
            out.write(
                f"{header.num_rows} {header.num_cols} {header.num_nonzeros} "
                f"{header.value_format.value} {header.symmetry.value}\n"
            )
            return 0

        matrix = read_matrix(args.file, args.layout, args.coord_dtype, args.value_dtype)
    except MatrixMarketError as e:
        print(f"Error {e.code}: {e}", file=sys.stderr)
        return 1

    for i, j, v in matrix.entries():
        out.write(f"{i} {j} {_format_value(v)}\n")
    return 0
