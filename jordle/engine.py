import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from .common import (
    MAX_ATTEMPTS,
    WORD_LENGTH,
    Feedback,
    FeedbackPattern,
    InvalidGuess,
    InvalidReason,
    RoundBase,
    RoundStatus,
    is_solved,
)
from .word_bank import WordBank, normalize_word

logger = logging.getLogger(__name__)

OutcomeListener = Callable[[bool], None]


def score_guess(guess: str, secret: str) -> FeedbackPattern:
    """Score ``guess`` against ``secret``.

    Exact matches are taken first. The remaining positions are then scanned
    left to right, and a letter is PRESENT only while the secret still has
    an unmatched copy of it, so a guess never gets more CORRECT + PRESENT
    marks for a letter than the secret contains.

    Raises ValueError when the two words differ in length.
    """
    guess = normalize_word(guess)
    secret = normalize_word(secret)
    length = len(secret)
    if len(guess) != length:
        raise ValueError(f"guess {guess!r} and secret differ in length")

    feedback = [Feedback.ABSENT] * length
    secret_char_counts: dict[str, int] = {}

    for i in range(length):
        if guess[i] == secret[i]:
            feedback[i] = Feedback.CORRECT
        else:
            secret_char_counts[secret[i]] = secret_char_counts.get(secret[i], 0) + 1

    for i in range(length):
        if feedback[i] != Feedback.CORRECT:
            char = guess[i]
            if secret_char_counts.get(char, 0) > 0:
                feedback[i] = Feedback.PRESENT
                secret_char_counts[char] -= 1

    return tuple(feedback)


@dataclass
class RoundState:
    secret: str
    max_attempts: int = MAX_ATTEMPTS
    history: list[tuple[str, FeedbackPattern]] = field(default_factory=list)

    @property
    def attempts_used(self) -> int:
        return len(self.history)

    @property
    def status(self) -> RoundStatus:
        if self.history and is_solved(self.history[-1][1]):
            return RoundStatus.WON
        if self.attempts_used >= self.max_attempts:
            return RoundStatus.LOST
        return RoundStatus.IN_PROGRESS


class GuessEngine(RoundBase):
    """Runs one round at a time against a shared WordBank.

    Not thread-safe; a round expects a single caller. The bank itself can be
    shared between engines.
    """

    def __init__(
        self,
        word_bank: WordBank,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self._word_bank = word_bank
        self._rng = rng
        self._max_attempts = max_attempts
        self._listeners: list[OutcomeListener] = []
        self._state = self._new_round()

    def _new_round(self) -> RoundState:
        secret = self._word_bank.select_secret(self._rng)
        logger.debug("New round started")
        return RoundState(secret=secret, max_attempts=self._max_attempts)

    def reset(self) -> None:
        self._state = self._new_round()

    def submit_guess(self, raw: str) -> FeedbackPattern:
        guess = normalize_word(raw)

        if len(guess) != WORD_LENGTH:
            raise InvalidGuess(InvalidReason.WRONG_LENGTH, guess)
        if not (guess.isascii() and guess.isalpha()):
            raise InvalidGuess(InvalidReason.NON_ALPHABETIC, guess)
        if not self._word_bank.is_acceptable_guess(guess):
            raise InvalidGuess(InvalidReason.NOT_IN_DICTIONARY, guess)
        if self._state.status is not RoundStatus.IN_PROGRESS:
            raise InvalidGuess(InvalidReason.ROUND_ALREADY_OVER, guess)

        pattern = score_guess(guess, self._state.secret)
        self._state.history.append((guess, pattern))

        status = self._state.status
        if status is not RoundStatus.IN_PROGRESS:
            logger.debug(
                "Round finished: %s after %d attempts",
                status.value,
                self._state.attempts_used,
            )
            self._emit_outcome(status is RoundStatus.WON)

        return pattern

    def add_outcome_listener(self, listener: OutcomeListener) -> None:
        self._listeners.append(listener)

    def remove_outcome_listener(self, listener: OutcomeListener) -> None:
        self._listeners.remove(listener)

    def _emit_outcome(self, won: bool) -> None:
        for listener in list(self._listeners):
            listener(won)

    @property
    def word_bank(self) -> WordBank:
        return self._word_bank

    @property
    def secret(self) -> str:
        return self._state.secret

    @property
    def length(self) -> int:
        return WORD_LENGTH

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def attempts_used(self) -> int:
        return self._state.attempts_used

    @property
    def remaining_attempts(self) -> int:
        return self._max_attempts - self._state.attempts_used

    @property
    def guesses(self) -> list[str]:
        return [guess for guess, _ in self._state.history]

    @property
    def history(self) -> tuple[tuple[str, FeedbackPattern], ...]:
        return tuple(self._state.history)

    @property
    def status(self) -> RoundStatus:
        return self._state.status
