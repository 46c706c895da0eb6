"""
Custom exception classes for appcache.

The declaration accumulator itself never raises; these exceptions belong to
the layers that turn files and mappings into declarations.
"""

from typing import Any, Dict, Optional


class AppcacheException(Exception):
    """Base exception class for all appcache exceptions."""

    pass


class ConfigLoadError(AppcacheException):
    """
    Raised when declarations cannot be read from their source.

    Example:
        >>> raise ConfigLoadError(
        ...     reason="Unsupported config format",
        ...     details={"suffix": ".toml"}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class DeclarationValidationError(AppcacheException):
    """Raised when declaration data does not conform to the expected shape."""

    def __init__(self, reason: str, errors: Optional[list] = None):
        self.reason = reason
        self.errors = errors or []
        message = reason
        if self.errors:
            message += f" - {self.errors}"
        super().__init__(message)
