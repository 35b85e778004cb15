"""
Encoding detection for CSV files.

parse_file() reads bytes from disk but tokenizes text, so it has to settle
on an encoding before the first character is scanned. A byte order mark
wins; anything else is left to charset-normalizer.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from charset_normalizer import from_bytes

# Bytes read from the start of a file for detection
DETECTION_SAMPLE_SIZE = 8192

# UTF-32 first: the UTF-32-LE mark starts with the UTF-16-LE one
BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

# Codec names (as normalized by codecs.lookup) reported under another name
CANONICAL_NAMES = {
    "ascii": "utf-8",
    "cp1252": "windows-1252",
    "iso8859-1": "windows-1252",
}


def _canonical(name: str) -> str:
    codec = codecs.lookup(name).name
    return CANONICAL_NAMES.get(codec, codec)


def detect_encoding(data: bytes) -> str:
    """
    Detect the encoding of raw CSV bytes.

    Pure ASCII is reported as UTF-8 and Latin-1 as its Windows superset,
    so that the answer also fits the rest of a file the sample was cut from.

    Args:
        data: Start of the content; only the first DETECTION_SAMPLE_SIZE
            bytes are looked at

    Returns:
        Encoding name usable with ``open()``/``bytes.decode()``
    """
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding

    sample = data[:DETECTION_SAMPLE_SIZE]
    best = from_bytes(sample).best()
    if best is not None:
        return _canonical(best.encoding)

    try:
        sample.decode("utf-8")
    except UnicodeDecodeError:
        return "windows-1252"
    return "utf-8"


def detect_file_encoding(path: Path | str) -> str:
    """Detect the encoding of a file from its first bytes."""
    with Path(path).open("rb") as f:
        return detect_encoding(f.read(DETECTION_SAMPLE_SIZE))
