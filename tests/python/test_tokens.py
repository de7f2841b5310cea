"""
Tests for the line tokenizer and numeric field parsing.
"""

import pytest

from mtxread._tokens import LineReader, Tokens, parse_float, parse_int


class TestTokens:
    """Test splitting and in-order consumption."""

    def test_split_on_space(self):
        """Fields come back in order."""
        t = Tokens("3 4 5", " ")
        assert len(t) == 3
        assert t.pop() == "3"
        assert t.peek() == "4"
        assert len(t) == 2
        assert t.pop() == "4"
        assert t.pop() == "5"
        assert len(t) == 0

    def test_consecutive_separators_not_merged(self):
        """Repeated separators produce empty fields."""
        t = Tokens("1  2", " ")
        assert len(t) == 3
        assert [t.pop(), t.pop(), t.pop()] == ["1", "", "2"]

    def test_trailing_separator(self):
        """A trailing separator yields a trailing empty field."""
        assert len(Tokens("1 2 ", " ")) == 3

    def test_no_trimming(self):
        """Tabs are not separators and are kept in the field."""
        t = Tokens("1\t2 3", " ")
        assert t.pop() == "1\t2"

    def test_empty_line(self):
        """An empty line is a single empty field."""
        t = Tokens("", " ")
        assert len(t) == 1
        assert t.pop() == ""

    def test_pop_exhausted(self):
        """Popping past the end is a programming error."""
        t = Tokens("a", " ")
        t.pop()
        with pytest.raises(IndexError):
            t.pop()
        with pytest.raises(IndexError, match="no fields remaining"):
            t.peek()

    def test_other_separator(self):
        """Any single character can separate fields."""
        t = Tokens("a,b,c", ",")
        assert len(t) == 3

    def test_multichar_separator_rejected(self):
        """Separator must be exactly one character."""
        with pytest.raises(ValueError):
            Tokens("a b", "  ")


class TestLineReader:
    """Test line numbering and terminator handling."""

    def test_strips_terminators_only(self):
        """\\n and \\r\\n are removed, spaces are kept."""
        reader = LineReader(["a \n", "b\r\n", "c"])
        assert reader.next_line() == "a "
        assert reader.next_line() == "b"
        assert reader.next_line() == "c"
        assert reader.lineno == 3

    def test_end_of_input(self):
        """None at end of input, line number unchanged."""
        reader = LineReader(["x\n"])
        reader.next_line()
        assert reader.next_line() is None
        assert reader.lineno == 1


class TestNumericFields:
    """Test strict numeric parsing."""

    def test_parse_int(self):
        assert parse_int("42") == 42
        assert parse_int("-7") == -7

    @pytest.mark.parametrize("token", ["", "4.0", "abc", " 1", "1 ", "1_000", "0x10"])
    def test_parse_int_rejects(self, token):
        """Tokens int() would tolerate or that are not integers fail."""
        with pytest.raises(ValueError):
            parse_int(token)

    def test_parse_float(self):
        assert parse_float("2.5") == 2.5
        assert parse_float("1e3") == 1000.0
        assert parse_float("-4") == -4.0

    @pytest.mark.parametrize("token", ["", "abc", "1,5", "1_0.0", " 2.0"])
    def test_parse_float_rejects(self, token):
        with pytest.raises(ValueError):
            parse_float(token)
