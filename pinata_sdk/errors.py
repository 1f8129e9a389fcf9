"""
Custom exceptions for the Pinata SDK.
"""

from typing import Any, Optional


class PinataError(Exception):
    """Base exception for all Pinata-specific errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class NetworkError(PinataError):
    """Raised for non-success HTTP responses and transport failures."""

    pass


class AuthenticationError(PinataError):
    """Raised when the service rejects the credentials (401/403)."""

    pass


class ValidationError(PinataError):
    """Raised when configuration or a required argument is missing."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message, None, details)


# Gateway URL errors
class UnresolvedCIDError(PinataError):
    """Raised when a URL to convert does not contain a CID."""

    pass


class UnsupportedURLPatternError(PinataError):
    """Raised when a URL contains a CID but in no supported position."""

    pass
