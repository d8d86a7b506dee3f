"""
Tests for unbiased selection in RandomSource.
"""

from collections import Counter

import pytest

from securepass.errors import ErrorKind, SecureRandomUnavailable
from securepass.random_source import RandomSource
from tests.conftest import (
    FailingAfterBytes,
    ScriptedBytes,
    UnavailableBytes,
)

PROBE = [0]


def test_uniform_index_stays_in_range():
    source = RandomSource()
    for bound in (1, 2, 3, 7, 10, 94, 1000, 2 ** 31 + 1):
        for _ in range(200):
            assert 0 <= source.uniform_index(bound) < bound


def test_uniform_index_distribution_chi_square():
    source = RandomSource()
    buckets = 10
    trials = 20000
    counts = Counter(source.uniform_index(buckets) for _ in range(trials))

    expected = trials / buckets
    chi_square = sum((counts[b] - expected) ** 2 / expected for b in range(buckets))

    # 9 degrees of freedom; 40 is far beyond the p=0.001 critical value (27.9)
    assert set(counts) == set(range(buckets))
    assert chi_square < 40


def test_uniform_index_zero_bound_draws_nothing():
    scripted = ScriptedBytes([])
    source = RandomSource(scripted)

    assert source.uniform_index(0) == 0
    assert source.uniform_index(-5) == 0
    assert scripted.calls == 0


def test_uniform_index_rejects_words_above_limit():
    # For a bound of 3 the limit is 2**32 - 1, so 0xFFFFFFFF must be redrawn
    scripted = ScriptedBytes(PROBE + [0xFF, 0xFF, 0xFF, 0xFF] + [0, 0, 0, 5])
    source = RandomSource(scripted)

    assert source.uniform_index(3) == 2
    assert scripted.exhausted


def test_uniform_index_reads_big_endian_words():
    scripted = ScriptedBytes(PROBE + [0, 0, 1, 0])
    source = RandomSource(scripted)

    assert source.uniform_index(1000) == 256


def test_uniform_index_rejects_oversized_bound():
    with pytest.raises(ValueError):
        RandomSource().uniform_index(2 ** 32 + 1)


def test_uniform_character_rejects_bytes_above_limit():
    pool = "".join(chr(ord("!") + i) for i in range(90))
    # limit = (256 // 90) * 90 = 180
    scripted = ScriptedBytes(PROBE + [250, 180, 179])
    source = RandomSource(scripted)

    assert source.uniform_character(pool) == pool[179 % 90]
    assert scripted.exhausted


def test_uniform_character_every_byte_value_is_unbiased():
    # Feeding each byte value once: 255 is rejected, 0..254 split evenly over 3
    scripted = ScriptedBytes(PROBE + [255] + list(range(255)))
    source = RandomSource(scripted)

    counts = Counter(source.uniform_character("abc") for _ in range(255))

    assert counts == {"a": 85, "b": 85, "c": 85}
    assert scripted.exhausted


def test_uniform_character_empty_pool():
    scripted = ScriptedBytes([])
    source = RandomSource(scripted)

    assert source.uniform_character("") == ""
    assert scripted.calls == 0


def test_uniform_character_rejects_oversized_pool():
    with pytest.raises(ValueError):
        RandomSource().uniform_character("x" * 257)


def test_uniform_character_single_character_pool():
    assert RandomSource().uniform_character("z") == "z"


def test_default_source_is_available():
    source = RandomSource()
    assert source.available
    source.ensure_available()


def test_unavailable_source_fails_before_drawing():
    unavailable = UnavailableBytes()
    source = RandomSource(unavailable)

    assert not source.available
    with pytest.raises(SecureRandomUnavailable) as exc_info:
        source.uniform_index(10)
    with pytest.raises(SecureRandomUnavailable):
        source.uniform_character("abc")

    assert exc_info.value.kind is ErrorKind.SECURE_RANDOM_UNAVAILABLE
    # Only the one-time probe ever touched the byte source
    assert unavailable.calls == 1


def test_short_probe_means_unavailable():
    source = RandomSource(lambda n: b"")
    assert not source.available


def test_failure_mid_draw_raises_unavailable():
    source = RandomSource(FailingAfterBytes(ok_calls=2))

    # A two-character pool never rejects, so exactly one draw succeeds
    source.uniform_character("ab")
    with pytest.raises(SecureRandomUnavailable):
        source.uniform_character("ab")


def test_short_read_mid_draw_raises_unavailable():
    # The probe gets its one byte; every later read comes back one byte long
    source = RandomSource(lambda n: b"\x00")

    with pytest.raises(SecureRandomUnavailable):
        source.uniform_index(10)


def test_non_bytes_mid_draw_raises_unavailable():
    # The probe sees one byte; later reads return something that is not bytes
    source = RandomSource(lambda n: b"\x00" if n == 1 else None)

    assert source.available
    with pytest.raises(SecureRandomUnavailable):
        source.uniform_index(10)
