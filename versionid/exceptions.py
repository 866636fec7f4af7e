"""
Custom exceptions for version identifier handling.

Provides the exception types raised when text or bytes cannot be
decoded into a version identifier.
"""

from typing import Optional


class VersionError(Exception):
    """Base exception for version identifier errors."""
    pass


class InvalidFormat(VersionError, ValueError):
    """Raised when input cannot be decoded into a version identifier.

    Subclasses ValueError so validation layers (pydantic) report it as
    an ordinary validation failure.
    """

    def __init__(self, message: str, text: object = None, token: Optional[str] = None):
        self.message = message
        self.text = text
        self.token = token
        super().__init__(message)
