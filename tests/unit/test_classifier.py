"""Tests for character classification."""

import pytest

from simplecsv.core.parser import CharClass, Dialect, classify, is_escape, is_quote


class TestClassify:
    """Tests for classify function."""

    @pytest.mark.parametrize(
        ("c", "expected"),
        [
            ('"', CharClass.QUOTE),
            ("\\", CharClass.ESCAPE),
            (",", CharClass.SEPARATOR),
            ("a", CharClass.REGULAR),
            (" ", CharClass.REGULAR),
            (";", CharClass.REGULAR),
        ],
    )
    def test_default_dialect(self, c: str, expected: CharClass) -> None:
        """Test classification with the default dialect."""
        assert classify(c, Dialect()) is expected

    @pytest.mark.parametrize("c", ["\n", "\r"])
    def test_line_breaks_are_data_for_lines(self, c: str) -> None:
        """Test LF and CR are regular without record boundaries."""
        assert classify(c, Dialect()) is CharClass.REGULAR

    @pytest.mark.parametrize("c", ["\n", "\r"])
    def test_line_breaks_terminate_in_streams(self, c: str) -> None:
        """Test LF and CR are terminators with record boundaries."""
        assert classify(c, Dialect(), record_boundaries=True) is CharClass.TERMINATOR

    def test_custom_characters(self) -> None:
        """Test classification follows the dialect's characters."""
        dialect = Dialect(separator=";", quotechar="'", escapechar="~")
        assert classify(";", dialect) is CharClass.SEPARATOR
        assert classify("'", dialect) is CharClass.QUOTE
        assert classify("~", dialect) is CharClass.ESCAPE
        assert classify(",", dialect) is CharClass.REGULAR
        assert classify('"', dialect) is CharClass.REGULAR

    def test_tab_separator_in_stream(self) -> None:
        """Test TAB stays a separator when record boundaries are on."""
        dialect = Dialect(separator="\t")
        assert classify("\t", dialect, record_boundaries=True) is CharClass.SEPARATOR


class TestUnsetCharacters:
    """Tests for dialects without quote or escape character."""

    def test_no_quote(self) -> None:
        """Test no character is a quote when quoting is disabled."""
        dialect = Dialect(quotechar=None)
        assert not is_quote('"', dialect)
        assert classify('"', dialect) is CharClass.REGULAR

    def test_no_escape(self) -> None:
        """Test no character is an escape when escaping is disabled."""
        dialect = Dialect(escapechar=None)
        assert not is_escape("\\", dialect)
        assert classify("\\", dialect) is CharClass.REGULAR

    def test_predicates(self) -> None:
        """Test is_quote and is_escape with the default dialect."""
        dialect = Dialect()
        assert is_quote('"', dialect)
        assert not is_quote("'", dialect)
        assert is_escape("\\", dialect)
        assert not is_escape("/", dialect)
