"""
Shared error handling for the argcache caching facade.
"""

from typing import Dict, Any, Optional


class ArgCacheException(Exception):
    """Base exception for argcache components."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a loggable payload."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(ArgCacheException):
    """A required argument was missing or unusable."""

    def __init__(self, message: str = "Invalid argument", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class ExtractionError(ArgCacheException):
    """A key strategy could not produce a fragment for an argument."""

    def __init__(self, message: str = "Key extraction failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("EXTRACTION_FAILURE", message, details)


class BackingStoreError(ArgCacheException):
    """The backing key-value store failed."""

    def __init__(self, store: str, message: str = "Backing store error", details: Optional[Dict[str, Any]] = None):
        super().__init__("BACKING_STORE_FAILURE", f"{store}: {message}", details)
