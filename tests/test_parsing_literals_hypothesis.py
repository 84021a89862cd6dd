"""Hypothesis property tests for the literal cascade and serializer.

Covers width selection per magnitude, radix preservation, and the
parse -> serialize -> parse round trip for every radix and double form.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from kdlnumbers import (
    BigIntNumber,
    Float64Number,
    Int32Number,
    Int64Number,
    UnsupportedMagnitudeError,
    parse_number,
    serialize_number,
)
from kdlnumbers.syntax import is_well_formed
from tests.strategies import (
    beyond_int64_values,
    decimal_point_literals,
    int32_values,
    int64_only_values,
    radix_literals,
    scientific_literals,
    separated_digits,
    to_literal,
    width_of,
)

_WIDTH_TYPES = {"int32": Int32Number, "int64": Int64Number, "bigint": BigIntNumber}


class TestWidthSelection:
    """The cascade picks the narrowest variant holding the value."""

    @given(value=int32_values)
    def test_int32_range_is_int32(self, value: int) -> None:
        """PROPERTY: every 32-bit value parses to Int32Number."""
        assert parse_number(str(value)) == Int32Number(value)

    @given(value=int64_only_values)
    def test_int64_range_is_int64(self, value: int) -> None:
        """PROPERTY: 64-bit values outside 32 bits parse to Int64Number."""
        assert parse_number(str(value)) == Int64Number(value)

    @given(value=beyond_int64_values, negate=st.booleans())
    def test_beyond_int64_decimal_is_bigint(self, value: int, negate: bool) -> None:
        """PROPERTY: base 10 beyond 64 bits parses to BigIntNumber."""
        value = -value if negate else value
        assert parse_number(str(value)) == BigIntNumber(value)

    @given(value=beyond_int64_values)
    def test_beyond_int64_hex_is_bigint(self, value: int) -> None:
        """PROPERTY: base 16 beyond 64 bits parses to a positive BigIntNumber."""
        number = parse_number(to_literal(value, 16))
        assert number == BigIntNumber(value, 16)

    @given(value=beyond_int64_values, radix=st.sampled_from([2, 8]))
    def test_beyond_int64_binary_octal_raises(self, value: int, radix: int) -> None:
        """PROPERTY: base 2 and 8 beyond 64 bits fail explicitly."""
        event(f"radix={radix}")
        with pytest.raises(UnsupportedMagnitudeError) as exc_info:
            parse_number(to_literal(value, radix))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.radix == radix

    @given(literal=radix_literals())
    def test_variant_and_radix(self, literal: tuple[str, int, int]) -> None:
        """PROPERTY: parsed value, radix and width match the generated literal."""
        text, value, radix = literal
        number = parse_number(text)
        assert number is not None
        assert number.value == value
        assert number.radix == radix
        # Non-decimal values are never negative, so width_of() applies unchanged
        assert isinstance(number, _WIDTH_TYPES[width_of(value)])


class TestRoundTrip:
    """serialize_number() output reparses to an equal value."""

    @given(literal=radix_literals())
    def test_integer_round_trip(self, literal: tuple[str, int, int]) -> None:
        """PROPERTY: parse(serialize(parse(t))) == parse(t) for integers."""
        text, _, radix = literal
        number = parse_number(text)
        assert number is not None
        written = serialize_number(number)
        assert written == text
        assert parse_number(written) == number
        event(f"radix={radix}")

    @given(text=decimal_point_literals())
    def test_decimal_point_round_trip(self, text: str) -> None:
        """PROPERTY: positional doubles keep their value and decimal point."""
        number = parse_number(text)
        assert isinstance(number, Float64Number)
        written = serialize_number(number)
        assert "." in written
        assert "E" not in written
        assert parse_number(written) == number

    @given(text=scientific_literals())
    @settings(max_examples=200)
    def test_scientific_round_trip(self, text: str) -> None:
        """PROPERTY: scientific doubles stay scientific with a bare exponent."""
        number = parse_number(text)
        assert isinstance(number, Float64Number)
        written = serialize_number(number)
        mantissa, _, exponent = written.partition("E")
        assert exponent[0] in "+-"
        assert exponent[1:] == "0" or not exponent[1:].startswith("0")
        assert ("." in mantissa) == ("." in text)
        assert parse_number(written) == number
        event(f"has_point={'.' in text}")

    @given(literal=separated_digits())
    def test_separators_ignored(self, literal: tuple[str, int]) -> None:
        """PROPERTY: digit separators never change the value."""
        text, value = literal
        assert parse_number(text) == Int32Number(value)


class TestMalformedNeverRaises:
    """Arbitrary text yields a number or None, never a crash."""

    @given(text=st.text(alphabet="0123456789abcdefxob+-._eE", max_size=24))
    @settings(max_examples=300)
    def test_number_like_text(self, text: str) -> None:
        """PROPERTY: parse_number() only raises capability errors."""
        try:
            number = parse_number(text)
        except UnsupportedMagnitudeError:
            event("outcome=unsupported")
            return
        event(f"outcome={'none' if number is None else type(number).__name__}")
        if number is None:
            return
        assert number.radix in (2, 8, 10, 16)
        if number.radix != 10:
            assert number.value >= 0

    @given(text=st.from_regex(r"[+-]?[0-9a-f_]{1,12}", fullmatch=True))
    def test_signed_hex_never_accepted(self, text: str) -> None:
        """PROPERTY: a sign is never part of a base 16 body."""
        if text[0] in "+-":
            assert not is_well_formed(text, 16)
