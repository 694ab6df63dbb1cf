import logging
import os
import random
from collections.abc import Iterable

from .common import WORD_LENGTH, EmptyWordBank

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
ANSWERS_PATH = os.path.join(DATA_DIR, "answers.txt")
GUESSES_PATH = os.path.join(DATA_DIR, "guesses.txt")


def normalize_word(word: str) -> str:
    return word.lower()


def _is_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


class WordBank:
    """The valid-word universe for the game.

    ``candidates`` are the words a secret may be drawn from. ``acceptable``
    is every word a guess may be; it always contains the candidates.
    Read-only once built, so one bank can back any number of rounds.
    """

    def __init__(self, candidates: Iterable[str], acceptable: Iterable[str] = ()):
        seen: set[str] = set()
        ordered: list[str] = []
        for word in candidates:
            word = normalize_word(word.strip())
            if _is_word(word) and word not in seen:
                seen.add(word)
                ordered.append(word)

        if not ordered:
            raise EmptyWordBank("no five-letter candidate words")

        self._candidates = tuple(ordered)
        self._acceptable = frozenset(
            normalize_word(word.strip())
            for word in acceptable
            if _is_word(normalize_word(word.strip()))
        ) | seen

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    @property
    def acceptable(self) -> frozenset[str]:
        return self._acceptable

    def select_secret(self, rng: random.Random | None = None) -> str:
        if not self._candidates:
            raise EmptyWordBank("no five-letter candidate words")
        return (rng or random).choice(self._candidates)

    def is_acceptable_guess(self, word: str) -> bool:
        return normalize_word(word) in self._acceptable

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_acceptable_guess(word)

    def __len__(self) -> int:
        return len(self._acceptable)

    def __repr__(self) -> str:
        return (
            f"WordBank(candidates={len(self._candidates)}, "
            f"acceptable={len(self._acceptable)})"
        )


def read_word_list(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as file:
        words = file.read().split()
    normalized = (normalize_word(word.strip()) for word in words)
    return [word for word in normalized if _is_word(word)]


def load_word_bank(
    answers_path: str | None = None, guesses_path: str | None = None
) -> WordBank:
    """Build a WordBank from word files, defaulting to the bundled lists.

    A missing answers file raises FileNotFoundError. A missing guesses file
    is tolerated: only candidate words are then accepted as guesses.
    """
    answers_path = answers_path or ANSWERS_PATH
    guesses_path = guesses_path or GUESSES_PATH

    if not os.path.exists(answers_path):
        raise FileNotFoundError(f"answer list not found: {answers_path}")
    answers = read_word_list(answers_path)

    guesses: list[str] = []
    if os.path.exists(guesses_path):
        guesses = read_word_list(guesses_path)
    else:
        logger.warning("guess list not found, accepting answers only: %s", guesses_path)

    bank = WordBank(answers, guesses)
    logger.info(
        "Loaded %d candidate words, %d acceptable guesses",
        len(bank.candidates),
        len(bank),
    )
    return bank
