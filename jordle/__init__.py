from .board import render_board
from .common import (
    MAX_ATTEMPTS,
    WORD_LENGTH,
    EmptyWordBank,
    Feedback,
    FeedbackPattern,
    InvalidGuess,
    InvalidReason,
    RoundBase,
    RoundStatus,
    is_solved,
    pattern_code,
)
from .engine import GuessEngine, RoundState, score_guess
from .stats import Statistics
from .word_bank import WordBank, load_word_bank

__version__ = "1.1.0"
__author__ = "Raven95676"
__license__ = "AGPL-3.0"
__copyright__ = "Copyright (c) 2025 Raven95676"
__all__ = [
    "MAX_ATTEMPTS",
    "WORD_LENGTH",
    "EmptyWordBank",
    "Feedback",
    "FeedbackPattern",
    "GuessEngine",
    "InvalidGuess",
    "InvalidReason",
    "RoundBase",
    "RoundState",
    "RoundStatus",
    "Statistics",
    "WordBank",
    "is_solved",
    "load_word_bank",
    "pattern_code",
    "render_board",
    "score_guess",
]
