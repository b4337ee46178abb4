"""
Feedback scoring and parsing.

Feedback is five colors, one per guess position:
    GREY   (0) letter absent, or more copies guessed than the answer has
    YELLOW (1) letter present elsewhere
    GREEN  (2) letter in the right position

The user types feedback as a code string such as "01020".
"""

from typing import Sequence, Tuple

import numpy as np
from numba import jit

from .config import WORD_LENGTH
from .histogram import compute_histogram
from .words import check_word, word_to_chars


GREY = 0
YELLOW = 1
GREEN = 2

TILES = "⬛🟨🟩"
ALL_GREEN = (GREEN,) * WORD_LENGTH


class InvalidInputError(Exception):
    """User-supplied guess or feedback text could not be parsed."""


# ============================================================================
# NUMBA-ACCELERATED SCORING
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(answer: np.ndarray, guess: np.ndarray) -> np.ndarray:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        answer: shape (5,) array of letter codes
        guess: shape (5,) array of letter codes

    Returns:
        shape (5,) int8 array of colors
    """
    feedback = np.zeros(5, dtype=np.int8)
    remaining = compute_histogram(answer)

    # First pass: mark greens
    for i in range(5):
        if answer[i] == guess[i]:
            feedback[i] = GREEN
            remaining[answer[i]] -= 1

    # Second pass: mark yellows, consuming what the greens left over
    for i in range(5):
        if answer[i] != guess[i]:
            c = guess[i]
            if remaining[c] > 0:
                feedback[i] = YELLOW
                remaining[c] -= 1

    return feedback


def score(answer: str, guess: str) -> Tuple[int, ...]:
    """Feedback a player sees when guessing `guess` against hidden `answer`."""
    return tuple(int(c) for c in compute_feedback(word_to_chars(answer), word_to_chars(guess)))


def check_feedback(feedback: Sequence[int]) -> np.ndarray:
    """Validate a feedback sequence and return it as an int8 array."""
    if len(feedback) != WORD_LENGTH:
        raise ValueError(f"Expected {WORD_LENGTH} feedback colors, got {len(feedback)}")
    for c in feedback:
        if (not isinstance(c, (int, np.integer)) or isinstance(c, (bool, np.bool_))
                or c not in (GREY, YELLOW, GREEN)):
            raise ValueError(f"Invalid feedback color {c!r}")
    return np.array(feedback, dtype=np.int8)


def is_solved(feedback: Sequence[int]) -> bool:
    return tuple(int(c) for c in feedback) == ALL_GREEN


def is_possible(guess: str, feedback: Sequence[int]) -> bool:
    """
    Whether some answer could produce `feedback` for `guess`.

    Copies of a letter that are not green turn yellow left to right until the
    answer runs out, so a yellow never follows a grey of the same letter.
    """
    greyed = set()
    for letter, c in zip(guess, feedback):
        if c == GREY:
            greyed.add(letter)
        elif c == YELLOW and letter in greyed:
            return False
    return True


# ============================================================================
# USER INPUT
# ============================================================================

def parse_guess(text: str) -> str:
    """Parse a typed guess; raises InvalidInputError if it is not a 5-letter word."""
    word = text.strip().lower()
    try:
        return check_word(word)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


def parse_feedback(text: str) -> Tuple[int, ...]:
    """Parse a feedback code string like "01020" (0 grey, 1 yellow, 2 green)."""
    text = text.strip()
    if len(text) != WORD_LENGTH:
        raise InvalidInputError(f"Feedback must be {WORD_LENGTH} digits, got {text!r}")
    codes = {'0': GREY, '1': YELLOW, '2': GREEN}
    try:
        return tuple(codes[ch] for ch in text)
    except KeyError as e:
        raise InvalidInputError(f"Feedback digits must be 0, 1 or 2, got {text!r}") from e


def feedback_to_string(feedback: Sequence[int]) -> str:
    return "".join(str(int(c)) for c in feedback)


def feedback_to_tiles(feedback: Sequence[int]) -> str:
    return "".join(TILES[int(c)] for c in feedback)
