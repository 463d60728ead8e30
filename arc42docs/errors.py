"""Error taxonomy for arc42docs operations."""

from __future__ import annotations


class Arc42Error(RuntimeError):
    """Base class for failures reported back to callers."""


class ValidationError(Arc42Error):
    """Raised when a caller explicitly supplies an unsupported value."""


class NotInitializedError(Arc42Error):
    """Raised when an operation targets a workspace that does not exist."""


class AlreadyInitializedError(Arc42Error):
    """Raised when init targets an existing workspace without force."""


class NotFoundError(Arc42Error):
    """Raised for registry misses and missing section files."""


class ConfigurationError(Arc42Error):
    """Raised when the default language or format was never registered."""


__all__ = [
    "AlreadyInitializedError",
    "Arc42Error",
    "ConfigurationError",
    "NotFoundError",
    "NotInitializedError",
    "ValidationError",
]
