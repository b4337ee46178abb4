"""
Letter histograms.

A histogram is a shape (26,) int8 array. A letter absent from the word holds
-1; a letter occurring k times holds k. Scanning left to right, the first
occurrence of a letter adds 2 (turning the -1 sentinel into +1) and every
repeat adds 1, so the sign alone tells "never present" apart from "present
but used up" once the filter starts decrementing.
"""

import numpy as np
from numba import jit, prange

from .config import ALPHABET_SIZE
from .words import word_to_chars


ABSENT = -1


@jit(nopython=True, cache=True)
def compute_histogram(word: np.ndarray) -> np.ndarray:
    hist = np.empty(26, dtype=np.int8)
    hist[:] = -1
    for i in range(5):
        c = word[i]
        if hist[c] > 0:
            hist[c] += 1
        else:
            hist[c] += 2
    return hist


@jit(nopython=True, parallel=True, cache=True)
def compute_histograms(chars: np.ndarray) -> np.ndarray:
    """Histograms for a shape (n, 5) array of words, one row per word."""
    n = chars.shape[0]
    result = np.empty((n, 26), dtype=np.int8)
    for i in prange(n):
        result[i] = compute_histogram(chars[i])
    return result


def letter_histogram(word: str) -> np.ndarray:
    """Histogram of a single word given as a string."""
    return compute_histogram(word_to_chars(word))


def letter_counts(hist: np.ndarray) -> dict:
    """Decode a histogram into {letter: count} for the letters present."""
    if hist.shape != (ALPHABET_SIZE,):
        raise ValueError(f"Expected a histogram of shape ({ALPHABET_SIZE},), got {hist.shape}")
    return {chr(ord('a') + i): int(v) for i, v in enumerate(hist) if v != ABSENT}
