"""Domain exception hierarchy for the settings registry.

Exceptions carry a machine-readable error code and structured context so
callers and log processors can handle them uniformly. Problems with the
*content* of the settings document (unknown effects, bad colours, wrong
value types) are never raised: they are logged and replaced by safe values.
The exceptions below cover programming and collaborator failures only.

Example:
    >>> from selvis.foundation.domain.exceptions import SchemaError
    >>> raise SchemaError("Duplicate setting key", key="maxSize")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DomainError",
    "SchemaError",
    "SettingsDocumentError",
    "SettingsNotLoadedError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (keys, paths, values).

    Example:
        >>> raise DomainError("Operation failed", context={"key": "maxSize"})
        DomainError: Operation failed (key=maxSize)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class SchemaError(DomainError):
    """Raised at startup when the settings schema is inconsistent.

    Covers duplicate keys, a missing or repeated effect descriptor, an
    unresolvable fallback effect, and setting types without a
    materialization rule.
    """

    error_code: str = "SETTINGS_SCHEMA_INVALID"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, context)


class SettingsNotLoadedError(DomainError):
    """Raised when settings are read before the first ``load()``."""

    error_code: str = "SETTINGS_NOT_LOADED"

    def __init__(self) -> None:
        super().__init__("Settings have not been loaded yet; call load() first")


class SettingsDocumentError(DomainError):
    """Raised by a backing store when the persisted document cannot be read.

    Attributes:
        path: Filesystem path of the offending document.
    """

    error_code: str = "SETTINGS_DOCUMENT_INVALID"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Settings document is unreadable: {reason}",
            {"path": path, "reason": reason},
        )
