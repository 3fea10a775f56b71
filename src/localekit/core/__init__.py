"""Core utilities shared across runtime, formatting and localization layers.

This package provides foundational pieces that every other layer depends on.
By isolating them here, we maintain a clean dependency graph:

    core <- runtime <- formatting <- localization

Exports:
    LocaleKitError: Base exception for the library
    LocaleLoadError: Exception raised when locale data cannot be loaded
    FormattingError: Exception raised when a value cannot be formatted
    BabelImportError: Exception raised when the optional Babel extra is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError
from .errors import FormattingError, LocaleKitError, LocaleLoadError

__all__ = ["BabelImportError", "FormattingError", "LocaleKitError", "LocaleLoadError"]
