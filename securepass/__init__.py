"""
SecurePass - Cryptographically secure password generator.

Features:
- Passwords drawn from the OS CSPRNG (os.urandom)
- Rejection sampling, so no character is favoured by modulo bias
- At least one character from every selected character type
- Typed results instead of silent fallbacks
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .categories import CharacterCategory
from .errors import ErrorKind, GenerationError, SecureRandomUnavailable
from .generator import (
    GenerationRequest,
    GenerationResult,
    PasswordGenerator,
    generate_password,
)
from .random_source import RandomSource

__all__ = [
    "CharacterCategory",
    "ErrorKind",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "PasswordGenerator",
    "RandomSource",
    "SecureRandomUnavailable",
    "generate_password",
]


def get_version():
    """Get the current version string."""
    return __version__
