"""kdlnumbers - Lossless KDL number literal parsing and printing.

Reads KDL number literals (binary, octal, decimal, hexadecimal; integers of
any size and IEEE doubles) into typed, immutable values that remember how
they were written, and prints them back in an equivalent form.

Public API:
    parse_number - Parse literal text to the narrowest fitting variant
    serialize_number - Literal text for a value, per PrintConfig
    write_number - Write literal text to a text stream
    zero - Canonical zero for a radix
    from_int32 / from_int64 / from_bigint / from_double - Direct constructors
    PrintConfig - Writer options (radix prefixes, exponent marker)
    KDLNumber - Union of Int32Number, Int64Number, BigIntNumber, Float64Number

Exceptions:
    KDLError - Base exception class
    InvalidRadixError - Radix outside {2, 8, 10, 16}
    UnsupportedMagnitudeError - Valid literal too large for the format
    UnsupportedRadixError - Rendering requested in an unsupported radix

Submodules:
    kdlnumbers.value_types - Number variants and constructors
    kdlnumbers.parsing - Literal parsing and the overflow cascade
    kdlnumbers.syntax - Character classes, literal scanner, serializer
    kdlnumbers.diagnostics - Error types, codes and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    InvalidRadixError,
    KDLError,
    UnsupportedMagnitudeError,
    UnsupportedRadixError,
)
from .enums import NumberKind, ParseFlags
from .parsing import parse_number
from .syntax import PrintConfig, serialize_number, write_number
from .value_types import (
    BigIntNumber,
    Float64Number,
    Int32Number,
    Int64Number,
    KDLNumber,
    from_bigint,
    from_double,
    from_int32,
    from_int64,
    is_kdl_number,
    zero,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("kdlnumbers")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# KDL specification conformance
__kdl_spec_version__ = "1.0.0"
__spec_url__ = "https://github.com/kdl-org/kdl/blob/1.0.0/SPEC.md"

__all__ = [
    "BigIntNumber",
    "Float64Number",
    "Int32Number",
    "Int64Number",
    "InvalidRadixError",
    "KDLError",
    "KDLNumber",
    "NumberKind",
    "ParseFlags",
    "PrintConfig",
    "UnsupportedMagnitudeError",
    "UnsupportedRadixError",
    "__kdl_spec_version__",
    "__spec_url__",
    "__version__",
    "from_bigint",
    "from_double",
    "from_int32",
    "from_int64",
    "is_kdl_number",
    "parse_number",
    "serialize_number",
    "write_number",
    "zero",
]
