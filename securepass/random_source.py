"""
random_source.py - Unbiased random selection on top of a secure byte source

Every draw goes through rejection sampling so that reducing a random word
modulo the bound never favours the low values.
"""
import logging
import os
from typing import Callable, Optional

from .errors import SecureRandomUnavailable

logger = logging.getLogger(__name__)

# A byte source takes a count and returns that many secure random bytes
ByteSource = Callable[[int], bytes]

WORD_RANGE = 2 ** 32
BYTE_RANGE = 256


class RandomSource:
    """Draws unbiased indices and characters from a CSPRNG"""

    def __init__(self, byte_source: Optional[ByteSource] = None):
        """
        Args:
            byte_source: Callable returning n secure random bytes
                         (default: os.urandom)
        """
        self.byte_source = byte_source or os.urandom
        self._available = None

    @property
    def available(self) -> bool:
        """
        Check once whether the byte source works.

        The probe draws a single byte; the answer is cached.
        """
        if self._available is None:
            try:
                probe = self.byte_source(1)
                self._available = isinstance(probe, (bytes, bytearray)) and len(probe) == 1
            except (OSError, NotImplementedError) as e:
                logger.debug("Secure byte source probe failed: %s", e)
                self._available = False
        return self._available

    def ensure_available(self) -> None:
        """Raise SecureRandomUnavailable unless the byte source works."""
        if not self.available:
            raise SecureRandomUnavailable()

    def uniform_index(self, bound_exclusive: int) -> int:
        """
        Return a uniformly distributed integer in [0, bound_exclusive).

        A 32-bit word is drawn and redrawn while it falls in the top
        slice of the range that is not a whole multiple of the bound.
        A bound of 0 or less returns 0 without drawing.
        """
        if bound_exclusive <= 0:
            return 0
        if bound_exclusive > WORD_RANGE:
            raise ValueError(f"Bound must not exceed 2**32, got {bound_exclusive}")
        self.ensure_available()

        limit = (WORD_RANGE // bound_exclusive) * bound_exclusive
        while True:
            value = int.from_bytes(self._draw(4), "big")
            if value < limit:
                return value % bound_exclusive

    def uniform_character(self, pool: str) -> str:
        """
        Return one character of pool, chosen uniformly.

        Pools are small, so a single byte is drawn per attempt rather
        than a full word. An empty pool returns an empty string.
        """
        pool_length = len(pool)
        if pool_length == 0:
            return ""
        if pool_length > BYTE_RANGE:
            raise ValueError(f"Pool must hold at most {BYTE_RANGE} characters, got {pool_length}")
        self.ensure_available()

        limit = (BYTE_RANGE // pool_length) * pool_length
        while True:
            value = self._draw(1)[0]
            if value < limit:
                return pool[value % pool_length]

    def _draw(self, count: int) -> bytes:
        try:
            data = self.byte_source(count)
        except (OSError, NotImplementedError) as e:
            raise SecureRandomUnavailable(f"Secure byte source failed: {e}") from e
        if not isinstance(data, (bytes, bytearray)):
            raise SecureRandomUnavailable(
                f"Secure byte source returned {type(data).__name__}, expected bytes"
            )
        if len(data) != count:
            raise SecureRandomUnavailable(
                f"Secure byte source returned {len(data)} bytes, expected {count}"
            )
        return data
