"""
Tests for guess scoring.

Covers the exact-match pass, the left-to-right present pass and the
handling of repeated letters in either word.
"""

from collections import Counter
from itertools import product

import pytest

from jordle import Feedback, is_solved, load_word_bank, pattern_code, score_guess

C, P, A = Feedback.CORRECT, Feedback.PRESENT, Feedback.ABSENT


class TestScoreGuess:
    """Tests for score_guess."""

    def test_identical_words_all_correct(self):
        """A guess equal to the secret is all CORRECT."""
        assert score_guess("abbey", "abbey") == (C, C, C, C, C)

    def test_babes_against_abbey(self):
        """Exact B and E matches are taken first; the leading B claims the other B."""
        assert score_guess("babes", "abbey") == (P, P, C, C, A)

    def test_no_shared_letters(self):
        """Letters missing from the secret are all ABSENT."""
        assert score_guess("zzzzz", "abbey") == (A, A, A, A, A)

    def test_case_insensitive(self):
        """Upper and mixed case inputs score like lowercase."""
        assert score_guess("BaBeS", "ABBEY") == score_guess("babes", "abbey")

    def test_excess_guess_letters_are_absent(self):
        """A letter guessed more often than the secret holds it is not PRESENT every time."""
        # allow has two Ls; lolly has three, one of them exact.
        assert score_guess("lolly", "allow") == (P, P, C, A, A)

    def test_duplicate_in_guess_single_in_secret(self):
        """Only the leftmost unmatched copy claims a single secret letter."""
        # speed has two Es; one is matched exactly at position 2.
        assert score_guess("geese", "speed") == (A, P, C, P, A)

    def test_left_to_right_tie_break(self):
        """The first misplaced A claims the only A in the secret."""
        assert score_guess("llama", "allow") == (P, C, P, A, A)

    def test_exact_match_beats_earlier_misplaced_copy(self):
        """An exact match later in the word keeps its letter from an earlier copy."""
        # crane has one E, at the end; the leading E of erase must be ABSENT.
        assert score_guess("erase", "crane") == (A, C, C, A, C)

    def test_repeated_letters_in_secret_both_present(self):
        """Two misplaced copies each find their own copy in the secret."""
        assert score_guess("kayak", "llama") == (A, P, A, P, A)

    def test_pure(self):
        """Scoring the same pair twice gives the same pattern."""
        assert score_guess("babes", "abbey") == score_guess("babes", "abbey")

    def test_returns_tuple(self):
        """Patterns are immutable tuples of Feedback."""
        pattern = score_guess("crane", "abbey")
        assert isinstance(pattern, tuple)
        assert all(isinstance(f, Feedback) for f in pattern)

    @pytest.mark.parametrize("guess, secret", [("abbe", "abbey"), ("abbeys", "abbey")])
    def test_length_mismatch(self, guess, secret):
        """Words of different lengths are rejected."""
        with pytest.raises(ValueError):
            score_guess(guess, secret)


@pytest.fixture(scope="module")
def words():
    bank = load_word_bank()
    return list(bank.candidates[:60]) + ["abbey", "babes", "lolly", "geese", "llama"]


class TestConservation:
    """CORRECT + PRESENT marks for a letter never exceed its count in the secret."""

    def test_marks_never_exceed_secret_letters(self, words):
        for guess, secret in product(words, repeat=2):
            pattern = score_guess(guess, secret)
            secret_counts = Counter(secret)
            marked = Counter(
                letter for letter, f in zip(guess, pattern) if f is not A
            )
            for letter, count in marked.items():
                assert count <= secret_counts[letter], (guess, secret, pattern)

    def test_correct_exactly_where_letters_match(self, words):
        for guess, secret in product(words, repeat=2):
            pattern = score_guess(guess, secret)
            for i, f in enumerate(pattern):
                assert (f is C) == (guess[i] == secret[i])


class TestPatternHelpers:
    """Tests for pattern_code and is_solved."""

    def test_pattern_code(self):
        """Codes follow the g / y / i result string."""
        assert pattern_code((P, P, C, P, A)) == "yygyi"
        assert pattern_code((C,) * 5) == "ggggg"
        assert pattern_code(score_guess("babes", "abbey")) == "yyggi"

    def test_feedback_code(self):
        assert Feedback.CORRECT.code == "g"
        assert Feedback.PRESENT.code == "y"
        assert Feedback.ABSENT.code == "i"

    def test_is_solved(self):
        assert is_solved((C,) * 5)
        assert not is_solved((C, C, C, C, P))
        assert not is_solved(())
