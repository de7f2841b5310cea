"""
Line-level text handling.

- LineReader: forward-only line source that tracks line numbers
- Tokens: fields of one line, consumed front to back
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

__all__ = ['LineReader', 'Tokens', 'parse_int', 'parse_float']


class LineReader:
    """
    Forward-only reader over text lines.

    Line terminators are removed; nothing else is stripped. ``lineno`` is
    the 1-based number of the most recently returned line.
    """

    __slots__ = ('_it', 'lineno')

    def __init__(self, lines: Iterable[str]):
        self._it: Iterator[str] = iter(lines)
        self.lineno = 0

    def next_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of input."""
        line = next(self._it, None)
        if line is None:
            return None
        self.lineno += 1
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        return line


class Tokens:
    """
    Fields of one line, split on a single separator character.

    Consecutive separators are not merged and nothing is trimmed, so
    ``"1  2"`` yields three fields with an empty one in the middle.

    Example:
        >>> t = Tokens("3 3 2", " ")
        >>> len(t)
        3
        >>> t.pop()
        '3'
        >>> len(t)
        2
    """

    __slots__ = ('_fields', '_pos')

    def __init__(self, line: str, sep: str = ' '):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        self._fields: List[str] = line.split(sep)
        self._pos = 0

    def pop(self) -> str:
        """Remove and return the first remaining field."""
        token = self.peek()
        self._pos += 1
        return token

    def peek(self) -> str:
        """Return the first remaining field without consuming it."""
        if self._pos >= len(self._fields):
            raise IndexError("no fields remaining")
        return self._fields[self._pos]

    def __len__(self) -> int:
        return len(self._fields) - self._pos

    def __repr__(self) -> str:
        return f"Tokens({self._fields[self._pos:]!r})"


def _check_numeric_text(token: str) -> None:
    # int()/float() accept surrounding whitespace and digit separators
    if not token or token != token.strip() or '_' in token:
        raise ValueError(f"invalid numeric token: {token!r}")


def parse_int(token: str) -> int:
    """Parse a decimal integer field, rejecting anything int() would merely tolerate."""
    _check_numeric_text(token)
    return int(token)


def parse_float(token: str) -> float:
    """Parse a floating point field (C-locale syntax)."""
    _check_numeric_text(token)
    return float(token)
