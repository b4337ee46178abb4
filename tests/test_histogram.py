import numpy as np
import pytest

from wordle_minimax.histogram import (
    ABSENT, compute_histograms, letter_counts, letter_histogram,
)
from wordle_minimax.words import words_to_chars

from .conftest import ANSWERS


def code(letter):
    return ord(letter) - ord('a')


@pytest.mark.parametrize("word,counts", [
    ("crane", {'c': 1, 'r': 1, 'a': 1, 'n': 1, 'e': 1}),
    ("sassy", {'s': 3, 'a': 1, 'y': 1}),
    ("eerie", {'e': 3, 'r': 1, 'i': 1}),
    ("level", {'l': 2, 'e': 2, 'v': 1}),
])
def test_histogram_counts(word, counts):
    assert letter_counts(letter_histogram(word)) == counts


def test_absent_letters_hold_sentinel():
    hist = letter_histogram("crane")
    assert hist.shape == (26,)
    assert hist[code('z')] == ABSENT
    assert hist[code('c')] == 1
    assert sum(1 for v in hist if v == ABSENT) == 21


def test_batch_matches_single():
    histos = compute_histograms(words_to_chars(ANSWERS))
    assert histos.shape == (len(ANSWERS), 26)
    for word, row in zip(ANSWERS, histos):
        np.testing.assert_array_equal(row, letter_histogram(word))


def test_empty_batch():
    assert compute_histograms(words_to_chars([])).shape == (0, 26)


@pytest.mark.parametrize("word", ["sola", "solars", "SOLAR", "so-ar"])
def test_rejects_malformed_words(word):
    with pytest.raises(ValueError):
        letter_histogram(word)


def test_letter_counts_rejects_bad_shape():
    with pytest.raises(ValueError):
        letter_counts(np.zeros(5, dtype=np.int8))
