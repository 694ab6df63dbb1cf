from abc import ABC, abstractmethod
from enum import Enum, IntEnum

WORD_LENGTH = 5
MAX_ATTEMPTS = 6


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def code(self) -> str:
        return _FEEDBACK_CODES[self]


_FEEDBACK_CODES = {
    Feedback.CORRECT: "g",
    Feedback.PRESENT: "y",
    Feedback.ABSENT: "i",
}

FeedbackPattern = tuple[Feedback, ...]


def pattern_code(pattern: FeedbackPattern) -> str:
    """Render a pattern as a result string such as ``"yygyi"``."""
    return "".join(feedback.code for feedback in pattern)


def is_solved(pattern: FeedbackPattern) -> bool:
    return bool(pattern) and all(f is Feedback.CORRECT for f in pattern)


class RoundStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class InvalidReason(Enum):
    WRONG_LENGTH = "wrong_length"
    NON_ALPHABETIC = "non_alphabetic"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    ROUND_ALREADY_OVER = "round_already_over"


class InvalidGuess(Exception):
    """A rejected guess. The round that raised it is left untouched."""

    def __init__(self, reason: InvalidReason, guess: str = ""):
        super().__init__(f"{reason.value}: {guess!r}")
        self.reason = reason
        self.guess = guess


class EmptyWordBank(Exception):
    pass


class RoundBase(ABC):
    @abstractmethod
    def submit_guess(self, raw: str) -> FeedbackPattern:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass

    @property
    @abstractmethod
    def secret(self) -> str:
        pass

    @property
    @abstractmethod
    def length(self) -> int:
        pass

    @property
    @abstractmethod
    def max_attempts(self) -> int:
        pass

    @property
    @abstractmethod
    def attempts_used(self) -> int:
        pass

    @property
    @abstractmethod
    def guesses(self) -> list[str]:
        pass

    @property
    @abstractmethod
    def history(self) -> tuple[tuple[str, FeedbackPattern], ...]:
        pass

    @property
    @abstractmethod
    def status(self) -> RoundStatus:
        pass

    @property
    def is_won(self) -> bool:
        return self.status is RoundStatus.WON

    @property
    def is_game_over(self) -> bool:
        return self.status is not RoundStatus.IN_PROGRESS
