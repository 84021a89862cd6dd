"""Roundtrip Example - Reading and Writing KDL Number Literals.

Demonstrates:

1. Parsing literals in every radix
2. Overflow into wider storage
3. Writing numbers back with and without radix prefixes
4. Choosing the exponent marker
5. Telling "not a number" apart from "too large"

Python 3.13+.
"""

from __future__ import annotations


def example_1_radixes() -> None:
    """Parse literals written in binary, octal, decimal and hexadecimal."""
    from kdlnumbers import parse_number, serialize_number

    print("=" * 60)
    print("Example 1: Radixes")
    print("=" * 60)

    for text in ("0b1010", "0o755", "1_000_000", "0xDEAD_BEEF", "-42"):
        number = parse_number(text)
        assert number is not None
        written = serialize_number(number)
        print(f"  {text:<14} -> {number.kind:<8} {number.value:<12} -> {written}")

    print()


def example_2_overflow() -> None:
    """Values escalate to the narrowest storage that holds them."""
    from kdlnumbers import parse_number

    print("=" * 60)
    print("Example 2: Overflow Cascade")
    print("=" * 60)

    literals = (
        "2147483647",
        "2147483648",
        "0x80000000",
        "9223372036854775808",
        "0x" + "f" * 20,
    )
    for text in literals:
        number = parse_number(text)
        assert number is not None
        print(f"  {text:<24} -> {number.kind}")

    print()


def example_3_print_config() -> None:
    """Write the same values under different PrintConfig settings."""
    from kdlnumbers import PrintConfig, parse_number, serialize_number

    print("=" * 60)
    print("Example 3: PrintConfig")
    print("=" * 60)

    configs = {
        "default": PrintConfig(),
        "base 10 only": PrintConfig(respect_radix=False),
        "lowercase e": PrintConfig(exponent_char="e"),
    }
    numbers = [parse_number(text) for text in ("0xff", "1.0", "1e10", "1.5E-3")]

    for label, config in configs.items():
        written = [serialize_number(n, config) for n in numbers if n is not None]
        print(f"  {label:<14} {' '.join(written)}")

    print()


def example_4_failures() -> None:
    """Malformed text yields None; unsupported magnitudes raise."""
    from kdlnumbers import UnsupportedMagnitudeError, parse_number

    print("=" * 60)
    print("Example 4: Failures")
    print("=" * 60)

    for text in ("12abc", "-0x10", "1."):
        print(f"  {text!r:<10} -> {parse_number(text)}")

    try:
        parse_number("0b1" + "0" * 64)
    except UnsupportedMagnitudeError as e:
        print()
        print(e)

    print()


def main() -> None:
    """Run all roundtrip examples."""
    print()
    print("kdlnumbers Roundtrip Examples")
    print()

    example_1_radixes()
    example_2_overflow()
    example_3_print_config()
    example_4_failures()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
