"""
Pytest configuration and fixtures for simplecsv tests.

Provides fixtures for:
- Sample CSV files written to a temporary directory
- Dialect YAML files
- Large file generation for robustness tests
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Sample File Fixtures
# =============================================================================


@pytest.fixture
def simple_csv(tmp_path: Path) -> Path:
    """Three records, CRLF line endings."""
    path = tmp_path / "simple.csv"
    path.write_bytes(b"name,city\r\nAnna,Berlin\r\nBen,Hamburg\r\n")
    return path


@pytest.fixture
def multiline_csv(tmp_path: Path) -> Path:
    """Quoted field spanning two physical lines."""
    path = tmp_path / "multiline.csv"
    path.write_bytes(b'id,note\n1,"first line\nsecond line"\n2,plain\n')
    return path


@pytest.fixture
def broken_quotes_csv(tmp_path: Path) -> Path:
    """Second record never closes its quote."""
    path = tmp_path / "broken_quotes.csv"
    path.write_bytes(b'a,b\n"c,d\ne,f\n')
    return path


@pytest.fixture
def semicolon_csv(tmp_path: Path) -> Path:
    """Spreadsheet export: semicolons, doubled quotes, Windows-1252."""
    path = tmp_path / "semicolon.csv"
    content = 'Konto;Text\r\n1200;"Grüße ""Nord"""\r\n'
    path.write_bytes(content.encode("windows-1252"))
    return path


@pytest.fixture
def dialect_file(tmp_path: Path) -> Path:
    """YAML file with two user presets."""
    path = tmp_path / "dialects.yaml"
    path.write_text(
        "dialects:\n"
        "  export:\n"
        "    base: semicolon\n"
        '    label: "Semicolon export, trimmed"\n'
        "    trim_whitespace: true\n"
        "  export-raw:\n"
        "    base: export\n"
        "    retain_outer_quotes: true\n",
        encoding="utf-8",
    )
    return path


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def large_text() -> str:
    """Generate 2,000 records mixing plain, quoted and multi-line fields."""
    lines = []
    for i in range(1, 2_001):
        if i % 10 == 0:
            lines.append(f'{i},"multi\nline {i}",end')
        elif i % 3 == 0:
            lines.append(f'{i},"quoted, with comma",end')
        else:
            lines.append(f"{i},plain {i},end")
    return "\r\n".join(lines) + "\r\n"
