"""
simplecsv: configurable CSV tokenizer.

A library and CLI tool for splitting delimited text into records under a
configurable dialect (separator, quote and escape characters plus quoting,
escaping and whitespace modes). Quoted fields may span several lines.

Usage:
    from simplecsv.core.parser import parse_line, parse_text
    fields = parse_line('"a,b",c')
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
