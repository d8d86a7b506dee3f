"""Shared byte-source stubs for the SecurePass tests."""

import os

import pytest

from securepass.generator import PasswordGenerator
from securepass.random_source import RandomSource


class ScriptedBytes:
    """Serves a fixed list of byte values, in order, and counts what was drawn."""

    def __init__(self, values):
        self.values = list(values)
        self.position = 0
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        if self.position + n > len(self.values):
            raise AssertionError("scripted byte source exhausted")
        chunk = bytes(self.values[self.position:self.position + n])
        self.position += n
        return chunk

    @property
    def exhausted(self):
        return self.position == len(self.values)


class CountingBytes:
    """Deterministic counter: byte k of the stream is k % 256."""

    def __init__(self):
        self.drawn = 0
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        chunk = bytes((self.drawn + i) % 256 for i in range(n))
        self.drawn += n
        return chunk


class UnavailableBytes:
    """A platform without a secure random source."""

    def __init__(self):
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        raise NotImplementedError("no secure random source")


class FailingAfterBytes:
    """Works for the first `ok_calls` calls, then fails like a broken device."""

    def __init__(self, ok_calls):
        self.ok_calls = ok_calls
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        if self.calls > self.ok_calls:
            raise OSError("entropy device went away")
        return os.urandom(n)


@pytest.fixture
def counting_bytes():
    return CountingBytes()


@pytest.fixture
def generator():
    return PasswordGenerator(RandomSource(), min_length=8, max_length=128)
