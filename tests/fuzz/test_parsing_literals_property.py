"""Differential fuzzing of parse_number() against a reference reader.

The reference reader accepts literals with one regular expression per
radix and converts them with int() and float(). Both readers must agree
on acceptance, on the value, and on when a literal is too large.

Run with:
    pytest tests/fuzz/ -m fuzz -v

Python 3.13+.
"""

from __future__ import annotations

import math
import re

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from kdlnumbers import UnsupportedMagnitudeError, parse_number, serialize_number
from kdlnumbers.syntax import Cursor, parse_number_literal

pytestmark = pytest.mark.fuzz

_DECIMAL = re.compile(r"[+-]?[0-9][0-9_]*(\.[0-9][0-9_]*)?([eE][+-]?[0-9][0-9_]*)?")
_PREFIXED: dict[str, tuple[int, re.Pattern[str]]] = {
    "0x": (16, re.compile(r"[0-9a-fA-F][0-9a-fA-F_]*")),
    "0o": (8, re.compile(r"[0-7][0-7_]*")),
    "0b": (2, re.compile(r"[01][01_]*")),
}

_TOO_LARGE = object()

# Biased towards characters that appear in number literals
_literal_text = st.text(alphabet="0123456789abcdefABCDEFxob+-._eE", max_size=30)


def _reference_read(text: str) -> int | float | object | None:
    """Read text with builtins; _TOO_LARGE marks values the format cannot hold."""
    prefix = text[:2]
    if prefix in _PREFIXED:
        radix, pattern = _PREFIXED[prefix]
        body = text[2:]
        if not pattern.fullmatch(body):
            return None
        value = int(body.replace("_", ""), radix)
        if radix in (2, 8) and value > 2**63 - 1:
            return _TOO_LARGE
        return value

    match = _DECIMAL.fullmatch(text)
    if match is None:
        return None
    stripped = text.replace("_", "")
    if match.group(1) is None and match.group(2) is None:
        return int(stripped)
    value = float(stripped)
    return _TOO_LARGE if math.isinf(value) else value


class TestParseNumberDifferential:
    """parse_number() agrees with the reference reader."""

    @given(text=_literal_text)
    @settings(max_examples=2000)
    def test_agrees_with_reference(self, text: str) -> None:
        expected = _reference_read(text)
        if expected is _TOO_LARGE:
            event("outcome=too_large")
            with pytest.raises(UnsupportedMagnitudeError):
                parse_number(text)
            return

        number = parse_number(text)
        if expected is None:
            event("outcome=rejected")
            assert number is None
            return

        event(f"outcome={type(number).__name__}")
        assert number is not None
        assert number.value == expected

    @given(text=_literal_text)
    @settings(max_examples=1000)
    def test_scanner_consumes_exactly_accepted_literals(self, text: str) -> None:
        """A literal is accepted iff the scanner consumes the whole text."""
        expected = _reference_read(text)
        result = parse_number_literal(Cursor(text, 0))
        consumed_all = result is not None and result.cursor.is_eof
        assert consumed_all == (expected is not None)

    @given(text=_literal_text)
    @settings(max_examples=1000)
    def test_serialized_output_reparses(self, text: str) -> None:
        try:
            number = parse_number(text)
        except UnsupportedMagnitudeError:
            return
        if number is None:
            return
        assert parse_number(serialize_number(number)) is not None
