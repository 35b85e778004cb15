"""
simplecsv core library.

This package contains the core functionality:
- parser: dialects, tokenizers and record readers
- dialects: named dialect presets loaded from YAML
"""

__all__: list[str] = []
