"""
generator.py - Secure password generation using cryptographically secure randomness
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Union

from . import config
from .categories import (
    ALL_CATEGORIES,
    CharacterCategory,
    build_pool,
    normalize_categories,
)
from .errors import ErrorKind, GenerationError, SecureRandomUnavailable
from .random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """What the caller asks for: a length and the categories to draw from"""

    length: int
    categories: FrozenSet[CharacterCategory] = field(default=ALL_CATEGORIES)


@dataclass(frozen=True)
class GenerationResult:
    """Either a finished password or the reason there is none"""

    password: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, password: str) -> "GenerationResult":
        return cls(password=password)

    @classmethod
    def failure(cls, error: ErrorKind, message: Optional[str] = None) -> "GenerationResult":
        return cls(error=error, message=message or error.describe())

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """
        Return the password.

        Raises:
            GenerationError: If generation failed
        """
        if self.error is not None:
            raise GenerationError(self.error, self.message)
        return self.password


class PasswordGenerator:
    """Builds passwords that cover every enabled character category"""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        min_length: int = config.MIN_LENGTH,
        max_length: int = config.MAX_LENGTH,
    ):
        if min_length < 1:
            raise ValueError("Minimum password length must be at least 1")
        if min_length > max_length:
            raise ValueError("Minimum password length exceeds the maximum")

        self.random_source = random_source or RandomSource()
        self.min_length = min_length
        self.max_length = max_length

    def generate(
        self,
        length: int,
        categories: Iterable[Union[CharacterCategory, str]] = ALL_CATEGORIES,
    ) -> GenerationResult:
        """
        Generate a password of exactly `length` characters.

        Every enabled category contributes at least one character; the
        rest are drawn from the combined pool and the whole sequence is
        shuffled.

        Args:
            length: Number of characters, within [min_length, max_length]
            categories: Categories (members or names) to draw from

        Returns:
            A GenerationResult holding the password or an ErrorKind

        Raises:
            ValueError: If a category name is not recognised
        """
        if not self._valid_length(length):
            logger.debug("Rejected password length %r", length)
            return GenerationResult.failure(
                ErrorKind.INVALID_LENGTH,
                ErrorKind.INVALID_LENGTH.describe(self.min_length, self.max_length),
            )

        enabled = normalize_categories(categories)
        if not enabled:
            return GenerationResult.failure(ErrorKind.NO_CATEGORY_SELECTED)

        if len(enabled) > length:
            logger.debug("%d categories cannot fit in %d characters", len(enabled), length)
            return GenerationResult.failure(ErrorKind.LENGTH_TOO_SHORT_FOR_CATEGORIES)

        try:
            self.random_source.ensure_available()
            characters = self._draw_characters(length, enabled)
        except SecureRandomUnavailable as e:
            logger.debug("Secure random source unavailable: %s", e)
            return GenerationResult.failure(ErrorKind.SECURE_RANDOM_UNAVAILABLE)

        logger.debug(
            "Generated %d-character password from %s",
            length, ", ".join(c.value for c in enabled),
        )
        return GenerationResult.success("".join(characters))

    def generate_request(self, request: GenerationRequest) -> GenerationResult:
        """Generate a password for a GenerationRequest."""
        return self.generate(request.length, request.categories)

    def _valid_length(self, length) -> bool:
        # bool is an int subclass but never a length
        if not isinstance(length, int) or isinstance(length, bool):
            return False
        return self.min_length <= length <= self.max_length

    def _draw_characters(self, length: int, enabled: List[CharacterCategory]) -> List[str]:
        source = self.random_source
        pool = build_pool(enabled)

        # One character from each category guarantees coverage
        required = [source.uniform_character(c.alphabet) for c in enabled]

        remaining = max(length - len(required), 0)
        characters = [source.uniform_character(pool) for _ in range(remaining)]
        characters.extend(required)

        # Fisher-Yates
        for i in range(len(characters) - 1, 0, -1):
            j = source.uniform_index(i + 1)
            characters[i], characters[j] = characters[j], characters[i]

        return characters


def generate_password(
    length: int = config.DEFAULT_LENGTH,
    use_lowercase: bool = True,
    use_uppercase: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    generator: Optional[PasswordGenerator] = None,
) -> str:
    """
    Generate a cryptographically secure random password.

    Args:
        length: Length of the password (default: config.DEFAULT_LENGTH)
        use_lowercase: Include lowercase letters a-z
        use_uppercase: Include uppercase letters A-Z
        use_digits: Include digits 0-9
        use_symbols: Include ASCII punctuation
        generator: Generator to use (default: one backed by os.urandom)

    Returns:
        A secure random password

    Raises:
        GenerationError: If the length is out of range, no character
            types are selected or no secure random source exists
    """
    flags = {
        CharacterCategory.LOWERCASE: use_lowercase,
        CharacterCategory.UPPERCASE: use_uppercase,
        CharacterCategory.DIGITS: use_digits,
        CharacterCategory.SYMBOLS: use_symbols,
    }
    categories = [category for category, enabled in flags.items() if enabled]

    generator = generator or PasswordGenerator()
    return generator.generate(length, categories).unwrap()
