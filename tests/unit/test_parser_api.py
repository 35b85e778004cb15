"""Tests for the file-level parser API."""

from pathlib import Path

import pytest

from simplecsv.core.dialects import get_dialect
from simplecsv.core.parser import (
    Dialect,
    UnterminatedQuotedFieldError,
    parse_file,
)


class TestParseFile:
    """Tests for parse_file function."""

    def test_crlf_file(self, simple_csv: Path) -> None:
        """Test a CRLF file is split into records."""
        records = list(parse_file(simple_csv))
        assert records == [["name", "city"], ["Anna", "Berlin"], ["Ben", "Hamburg"]]

    def test_path_as_string(self, simple_csv: Path) -> None:
        """Test paths may be given as strings."""
        assert len(list(parse_file(str(simple_csv)))) == 3

    def test_multiline(self, multiline_csv: Path) -> None:
        """Test a quoted field spanning lines stays one field."""
        records = list(parse_file(multiline_csv))
        assert records[1] == ["1", "first line\nsecond line"]
        assert records[2] == ["2", "plain"]

    def test_quoted_crlf_kept(self, tmp_path: Path) -> None:
        """Test CRLF inside quotes reaches the field untranslated."""
        path = tmp_path / "crlf.csv"
        path.write_bytes(b'"a\r\nb",c\r\n')
        assert list(parse_file(path)) == [["a\r\nb", "c"]]

    def test_utf8_bom(self, tmp_path: Path) -> None:
        """Test the BOM does not end up in the first field."""
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbfid,name\n1,x\n")
        assert list(parse_file(path)) == [["id", "name"], ["1", "x"]]

    def test_windows1252(self, semicolon_csv: Path) -> None:
        """Test an explicit encoding with the semicolon preset."""
        records = list(
            parse_file(semicolon_csv, get_dialect("semicolon"), encoding="windows-1252")
        )
        assert records == [["Konto", "Text"], ["1200", 'Grüße "Nord"']]

    def test_skip_records(self, simple_csv: Path) -> None:
        """Test leading records are skipped."""
        assert list(parse_file(simple_csv, skip_records=1)) == [
            ["Anna", "Berlin"],
            ["Ben", "Hamburg"],
        ]

    def test_dialect(self, tmp_path: Path) -> None:
        """Test a custom dialect is applied."""
        path = tmp_path / "pipe.csv"
        path.write_text(" a | b \n", encoding="utf-8")
        dialect = Dialect(separator="|", trim_whitespace=True)
        assert list(parse_file(path, dialect)) == [["a", "b"]]

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file has no records."""
        path = tmp_path / "empty.csv"
        path.write_bytes(b"")
        assert list(parse_file(path)) == []

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Test a missing file raises at call time."""
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "missing.csv")

    def test_unterminated(self, broken_quotes_csv: Path) -> None:
        """Test records before the broken one are yielded first."""
        records = []
        with pytest.raises(UnterminatedQuotedFieldError) as exc_info:
            for record in parse_file(broken_quotes_csv):
                records.append(record)
        assert records == [["a", "b"]]
        assert exc_info.value.line_no == 2
        assert exc_info.value.record_no == 2
