"""Tests for field accumulation and normalization."""

import pytest

from simplecsv.core.parser import Dialect, FieldAccumulator, normalize_field
from simplecsv.core.parser.fields import strip_outer_quotes, unescape


class TestFieldAccumulator:
    """Tests for FieldAccumulator."""

    def test_append_and_getvalue(self) -> None:
        """Test characters are joined in order."""
        field = FieldAccumulator()
        for c in "abc":
            field.append(c)
        assert field.getvalue() == "abc"
        assert len(field) == 3
        assert field

    def test_empty(self) -> None:
        """Test a new accumulator is empty."""
        field = FieldAccumulator()
        assert field.getvalue() == ""
        assert not field

    def test_clear(self) -> None:
        """Test clear() empties the buffer."""
        field = FieldAccumulator()
        field.append('"')
        field.append("a")
        field.clear()
        assert field.getvalue() == ""
        assert not field


class TestUnescape:
    """Tests for unescape function."""

    @pytest.mark.parametrize(
        ("c", "expected"),
        [("n", "\n"), ("t", "\t"), ("r", "\r"), ("b", "\b"), ("f", "\f")],
    )
    def test_control_sequences(self, c: str, expected: str) -> None:
        """Test known escape sequences produce control characters."""
        assert unescape(c) == expected

    @pytest.mark.parametrize("c", ["a", ",", '"', "\\", "x"])
    def test_other_characters(self, c: str) -> None:
        """Test any other character stands for itself."""
        assert unescape(c) == c


class TestStripOuterQuotes:
    """Tests for strip_outer_quotes function."""

    def test_strips_pair(self) -> None:
        """Test one pair of quotes is removed."""
        assert strip_outer_quotes('"abc"', '"') == "abc"

    def test_strips_only_one_pair(self) -> None:
        """Test inner quotes survive."""
        assert strip_outer_quotes('""abc""', '"') == '"abc"'

    def test_empty_quoted(self) -> None:
        """Test two quotes give an empty string."""
        assert strip_outer_quotes('""', '"') == ""

    @pytest.mark.parametrize("text", ['"', '"abc', 'abc"', ' "abc" ', "", "abc"])
    def test_unchanged(self, text: str) -> None:
        """Test text without an exact outer pair is unchanged."""
        assert strip_outer_quotes(text, '"') == text

    def test_no_quotechar(self) -> None:
        """Test nothing is stripped when quoting is disabled."""
        assert strip_outer_quotes('"abc"', None) == '"abc"'


class TestNormalizeField:
    """Tests for normalize_field function."""

    def test_default_strips_quotes(self) -> None:
        """Test the default dialect removes outer quotes."""
        assert normalize_field('"a,b"', Dialect()) == "a,b"

    def test_default_keeps_whitespace(self) -> None:
        """Test no trimming happens by default."""
        assert normalize_field("  a  ", Dialect()) == "  a  "
        assert normalize_field(' "a" ', Dialect()) == ' "a" '

    def test_retain_outer_quotes(self) -> None:
        """Test outer quotes are kept when retained."""
        assert normalize_field('"a,b"', Dialect(retain_outer_quotes=True)) == '"a,b"'

    def test_retain_outer_quotes_with_trim(self) -> None:
        """Test trimming still applies around retained quotes."""
        dialect = Dialect(retain_outer_quotes=True, trim_whitespace=True)
        assert normalize_field('  "a"  ', dialect) == '"a"'

    def test_trim(self) -> None:
        """Test whitespace is trimmed outside and inside the quotes."""
        dialect = Dialect(trim_whitespace=True)
        assert normalize_field('  " abc "  ', dialect) == "abc"
        assert normalize_field("  abc  ", dialect) == "abc"

    def test_trim_whitespace_only(self) -> None:
        """Test a whitespace-only field trims to empty."""
        assert normalize_field("   ", Dialect(trim_whitespace=True)) == ""

    def test_trim_short_fields(self) -> None:
        """Test one-character fields are handled."""
        dialect = Dialect(trim_whitespace=True)
        assert normalize_field("a", dialect) == "a"
        assert normalize_field('"', dialect) == '"'
        assert normalize_field("", dialect) == ""

    def test_always_quote(self) -> None:
        """Test every field is wrapped in quotes."""
        dialect = Dialect(always_quote_output=True)
        assert normalize_field("a", dialect) == '"a"'
        assert normalize_field("", dialect) == '""'

    def test_always_quote_with_trim(self) -> None:
        """Test trimming happens before wrapping."""
        dialect = Dialect(always_quote_output=True, trim_whitespace=True)
        assert normalize_field("  a  ", dialect) == '"a"'

    def test_custom_quotechar(self) -> None:
        """Test the dialect's quote character is used."""
        assert normalize_field("'a'", Dialect(quotechar="'")) == "a"
        assert normalize_field('"a"', Dialect(quotechar="'")) == '"a"'
