"""
Configuration for SecurePass password generation
"""
import os

DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 20


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    try:
        return int(value)
    except ValueError:
        return default


def load_bounds() -> tuple:
    """
    Read the length settings from the environment.

    Bounds that contradict each other (minimum below 1 or above the
    maximum) are replaced by the built-in 8-128 range, and the default
    length is clamped into whatever range is in effect.

    Returns:
        Tuple of (min_length, max_length, default_length)
    """
    min_length = _env_int("SECUREPASS_MIN_LENGTH", DEFAULT_MIN_LENGTH)
    max_length = _env_int("SECUREPASS_MAX_LENGTH", DEFAULT_MAX_LENGTH)
    default_length = _env_int("SECUREPASS_DEFAULT_LENGTH", DEFAULT_PASSWORD_LENGTH)

    if min_length < 1 or min_length > max_length:
        min_length, max_length = DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH

    default_length = min(max(default_length, min_length), max_length)
    return (min_length, max_length, default_length)


# Password length bounds
MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH = load_bounds()

# Seconds before a copied password is cleared (0 = never)
CLIPBOARD_TIMEOUT = _env_int("SECUREPASS_CLIPBOARD_TIMEOUT", 30)
