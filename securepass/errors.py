"""
errors.py - Failure kinds reported by the password generator
"""
from enum import Enum
from typing import Optional

from . import config


class ErrorKind(Enum):
    """Why a password could not be generated"""

    INVALID_LENGTH = "invalid_length"
    NO_CATEGORY_SELECTED = "no_category_selected"
    LENGTH_TOO_SHORT_FOR_CATEGORIES = "length_too_short_for_categories"
    SECURE_RANDOM_UNAVAILABLE = "secure_random_unavailable"

    def describe(self, min_length: Optional[int] = None, max_length: Optional[int] = None) -> str:
        """
        Return the user-facing message for this failure.

        The length bounds are only used by INVALID_LENGTH and default
        to the configured range.
        """
        if self is ErrorKind.INVALID_LENGTH:
            if min_length is None:
                min_length = config.MIN_LENGTH
            if max_length is None:
                max_length = config.MAX_LENGTH
            return f"Password length must be between {min_length} and {max_length}."
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.NO_CATEGORY_SELECTED: "Select at least one character type.",
    ErrorKind.LENGTH_TOO_SHORT_FOR_CATEGORIES: (
        "Password length must be at least the number of selected character types."
    ),
    ErrorKind.SECURE_RANDOM_UNAVAILABLE: (
        "Secure password generation requires a cryptographically secure random source."
    ),
}


class GenerationError(Exception):
    """Raised when a password cannot be produced"""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or kind.describe()
        super().__init__(self.message)


class SecureRandomUnavailable(GenerationError):
    """The secure byte source is missing or failed"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorKind.SECURE_RANDOM_UNAVAILABLE, message)
