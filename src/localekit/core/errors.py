"""Core error types shared across runtime, formatting and localization layers.

Lookup misses and malformed translation data never raise: they surface as
fallback strings. Exceptions are reserved for load-time failures and for
values that cannot be formatted at all.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["FormattingError", "LocaleKitError", "LocaleLoadError"]


class LocaleKitError(Exception):
    """Base exception for all localekit errors."""


class LocaleLoadError(LocaleKitError):
    """Raised when locale data cannot be loaded.

    Loading is all-or-nothing per locale: when this error is raised, the
    dataset is left exactly as it was before the load call.

    Attributes:
        locale: Locale code being loaded (empty if it could not be determined)
        source_path: Path of the source document (None for in-memory data)
    """

    def __init__(
        self,
        message: str,
        *,
        locale: str = "",
        source_path: str | None = None,
    ) -> None:
        """Initialize LocaleLoadError.

        Args:
            message: Human-readable error message
            locale: Locale code being loaded
            source_path: Path of the source document, if any
        """
        super().__init__(message)
        self.locale = locale
        self.source_path = source_path


class FormattingError(LocaleKitError, ValueError):
    """Raised when a value cannot be rendered by the format engine.

    Subclasses ValueError so callers validating numeric input can catch
    the broader type.

    Attributes:
        value: The value that failed to format
    """

    def __init__(self, message: str, value: object) -> None:
        """Initialize FormattingError.

        Args:
            message: Human-readable error message
            value: The value that failed to format
        """
        super().__init__(message)
        self.value = value
