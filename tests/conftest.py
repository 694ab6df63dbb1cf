"""Shared fixtures for the jordle tests."""

import random

import pytest

from jordle import GuessEngine, WordBank

CANDIDATES = ["abbey", "crane", "speed", "allow", "llama"]
EXTRA_GUESSES = ["babes", "lolly", "abide", "erase", "geese", "zzzzz", "kayak", "civic"]


class FixedRandom(random.Random):
    """A Random whose choice() always returns the given word."""

    def __init__(self, word: str):
        super().__init__(0)
        self.word = word

    def choice(self, seq):
        assert self.word in seq
        return self.word


@pytest.fixture
def word_bank():
    return WordBank(CANDIDATES, EXTRA_GUESSES)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_engine(word_bank):
    """Build an engine whose first secret is fixed."""

    def _make(secret: str = "abbey", **kwargs) -> GuessEngine:
        return GuessEngine(word_bank, rng=FixedRandom(secret), **kwargs)

    return _make
