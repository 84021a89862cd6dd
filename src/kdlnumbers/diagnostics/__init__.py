"""Diagnostic system for KDL number errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidRadixError,
    KDLError,
    UnsupportedMagnitudeError,
    UnsupportedRadixError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidRadixError",
    "KDLError",
    "OutputFormat",
    "UnsupportedMagnitudeError",
    "UnsupportedRadixError",
]
