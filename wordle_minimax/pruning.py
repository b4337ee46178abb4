"""
Candidate filtering.

A candidate is consistent with (guess, feedback) when scoring the guess
against it would reproduce exactly that feedback. The check never calls the
scorer: it replays the feedback against a copy of the candidate's
precomputed histogram.
"""

from typing import Iterator, List, Sequence

import numpy as np
from numba import jit

from .feedback import GREY, YELLOW, GREEN, check_feedback, is_possible
from .histogram import compute_histograms
from .words import check_word, word_to_chars, words_to_chars


# ============================================================================
# NUMBA-ACCELERATED FILTERING
# ============================================================================

@jit(nopython=True, cache=True)
def _consistent(word: np.ndarray, hist: np.ndarray, guess: np.ndarray,
                feedback: np.ndarray, scratch: np.ndarray) -> bool:
    """Consistency check using `scratch` as the working copy of `hist`."""
    for k in range(26):
        scratch[k] = hist[k]

    # First, filter green squares; greens and yellows both use up a letter
    for i in range(5):
        r = feedback[i]
        g = guess[i]
        if r == GREEN:
            if word[i] != g:
                return False
            scratch[g] -= 1
        elif r == YELLOW:
            scratch[g] -= 1

    # Then yellow and grey squares
    for i in range(5):
        r = feedback[i]
        if r == GREEN:
            continue
        g = guess[i]
        # A match here would have been green
        if word[i] == g:
            return False
        left = scratch[g]
        # Yellow needs a copy of the letter the greens/yellows have not used up
        if r == YELLOW and left < 0:
            return False
        # Grey means every copy is already accounted for
        if r == GREY and left > 0:
            return False

    return True


@jit(nopython=True, cache=True)
def count_consistent(chars: np.ndarray, histos: np.ndarray, start: int, stop: int,
                     guess: np.ndarray, feedback: np.ndarray, scratch: np.ndarray) -> int:
    """Number of consistent words among rows start..stop-1."""
    n = 0
    for i in range(start, stop):
        if _consistent(chars[i], histos[i], guess, feedback, scratch):
            n += 1
    return n


@jit(nopython=True, cache=True)
def consistent_mask(chars: np.ndarray, histos: np.ndarray,
                    guess: np.ndarray, feedback: np.ndarray) -> np.ndarray:
    n = chars.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    scratch = np.empty(26, dtype=np.int8)
    for i in range(n):
        mask[i] = _consistent(chars[i], histos[i], guess, feedback, scratch)
    return mask


# ============================================================================
# PYTHON API
# ============================================================================

def is_consistent(candidate: str, candidate_histogram: np.ndarray,
                  guess: str, feedback: Sequence[int]) -> bool:
    """True if score(candidate, guess) would equal `feedback`."""
    word_chars = word_to_chars(candidate)
    guess_chars = word_to_chars(guess)
    fb = check_feedback(feedback)
    if not is_possible(guess, fb):
        return False
    return bool(_consistent(word_chars, candidate_histogram, guess_chars, fb,
                            np.empty(26, dtype=np.int8)))


def iter_consistent(candidates: Sequence[str], histos: np.ndarray,
                    guess: str, feedback: Sequence[int]) -> Iterator[str]:
    """
    Lazily yield the candidates consistent with (guess, feedback), in order.

    `histos[i]` must be the histogram of `candidates[i]`.
    """
    guess_chars = word_to_chars(guess)
    fb = check_feedback(feedback)
    scratch = np.empty(26, dtype=np.int8)
    if not is_possible(guess, fb):
        return
    for word, hist in zip(candidates, histos):
        if _consistent(word_to_chars(word), hist, guess_chars, fb, scratch):
            yield word


def prune(candidates: Sequence[str], guess: str, feedback: Sequence[int]) -> List[str]:
    """Candidates still possible after seeing `feedback` for `guess`."""
    check_word(guess)
    fb = check_feedback(feedback)
    if not candidates or not is_possible(guess, fb):
        return []
    chars = words_to_chars(candidates)
    mask = consistent_mask(chars, compute_histograms(chars), word_to_chars(guess), fb)
    return [w for w, keep in zip(candidates, mask) if keep]
