"""Fuzz testing infrastructure for kdlnumbers.

This package contains:
- test_parsing_literals_property: differential fuzzing of parse_number()
  against a regex-and-builtins reference reader

Python 3.13+.
"""
