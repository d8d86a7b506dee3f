"""
categories.py - Character categories and their fixed alphabets
"""
import string
from enum import Enum
from typing import FrozenSet, Iterable, List, Union


class CharacterCategory(Enum):
    """A named class of characters a password may draw from"""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]

    @property
    def label(self) -> str:
        return LABELS[self]

    @classmethod
    def parse(cls, value: Union["CharacterCategory", str]) -> "CharacterCategory":
        """
        Resolve a category from a member or a (case-insensitive) name.

        Raises:
            ValueError: If the name is not a known category
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Not a character category: {value!r}")

        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown character category: {value!r}") from None


ALPHABETS = {
    CharacterCategory.LOWERCASE: string.ascii_lowercase,
    CharacterCategory.UPPERCASE: string.ascii_uppercase,
    CharacterCategory.DIGITS: string.digits,
    CharacterCategory.SYMBOLS: string.punctuation,
}

LABELS = {
    CharacterCategory.LOWERCASE: "Lowercase (a-z)",
    CharacterCategory.UPPERCASE: "Uppercase (A-Z)",
    CharacterCategory.DIGITS: "Numbers (0-9)",
    CharacterCategory.SYMBOLS: "Symbols (!@#...)",
}

_ALIASES = {
    "lower": "lowercase",
    "upper": "uppercase",
    "digit": "digits",
    "numbers": "digits",
    "number": "digits",
    "symbol": "symbols",
}

# Pool order; affects adjacency before the shuffle only
CATEGORY_ORDER = (
    CharacterCategory.LOWERCASE,
    CharacterCategory.UPPERCASE,
    CharacterCategory.DIGITS,
    CharacterCategory.SYMBOLS,
)

ALL_CATEGORIES: FrozenSet[CharacterCategory] = frozenset(CATEGORY_ORDER)


def normalize_categories(
    categories: Iterable[Union[CharacterCategory, str]]
) -> List[CharacterCategory]:
    """
    Deduplicate categories and return them in pool order.

    Args:
        categories: Members or names, in any order

    Returns:
        Enabled categories ordered as in CATEGORY_ORDER
    """
    if isinstance(categories, (str, CharacterCategory)):
        categories = [categories]
    enabled = {CharacterCategory.parse(c) for c in categories}
    return [c for c in CATEGORY_ORDER if c in enabled]


def build_pool(categories: Iterable[CharacterCategory]) -> str:
    """Concatenate the alphabets of the given categories."""
    return "".join(c.alphabet for c in categories)
