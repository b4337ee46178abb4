"""
Word corpora
============

Wordle uses TWO word lists:
- Answers: words that can be the hidden secret
- Allowed guesses: extra words accepted as guesses but never secrets

Both are loaded once, validated, and then handed to the engine explicitly.
Inside the engine words travel as arrays of letter codes (0-25 for a-z).
"""

import os
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .config import WORD_LENGTH, DEFAULT_WORDS_DIR, ANSWERS_FILE, GUESSES_FILE


def check_word(word: str) -> str:
    """Raise ValueError unless `word` is exactly 5 lowercase ASCII letters."""
    if not isinstance(word, str) or len(word) != WORD_LENGTH:
        raise ValueError(f"Expected a {WORD_LENGTH}-letter word, got {word!r}")
    if not (word.isascii() and word.isalpha() and word.islower()):
        raise ValueError(f"Expected lowercase ASCII letters, got {word!r}")
    return word


def word_to_chars(word: str) -> np.ndarray:
    """Convert a word to a shape (5,) array of letter codes."""
    check_word(word)
    return np.frombuffer(word.encode("ascii"), dtype=np.uint8).astype(np.int8) - ord('a')


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to a shape (n, 5) array of letter codes."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int8)
    for i, w in enumerate(words):
        arr[i] = word_to_chars(w)
    return arr


class WordList:
    """An ordered, immutable list of words together with their letter codes."""

    def __init__(self, words: Iterable[str]):
        self.words = tuple(words)
        self.chars = words_to_chars(self.words)
        self._index = {w: i for i, w in enumerate(self.words)}

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def __contains__(self, word):
        return word in self._index

    def index(self, word: str) -> int:
        return self._index[word]

    def __repr__(self):
        return f"WordList({len(self.words)} words)"


class Corpus:
    """
    The two fixed word lists plus the derived guess list.

    The guess list is guesses + answers (answers not already present appended
    in order); it is the pool of allowed guesses for the selector.
    """

    def __init__(self, answers: Sequence[str], guesses: Optional[Sequence[str]] = None):
        answers = list(answers)
        guesses = list(guesses or [])
        _check_unique(answers, "answer")
        _check_unique(guesses, "guess")

        self.answers = WordList(answers)
        seen = set(guesses)
        self.guess_list = WordList(guesses + [w for w in answers if w not in seen])

    @classmethod
    def from_files(cls, answers_path: str, guesses_path: str, verbose: bool = False) -> "Corpus":
        answers = load_words(answers_path)
        guesses = load_words(guesses_path)
        if verbose:
            print(f"  Answers: {len(answers)} words (possible secrets)")
            print(f"  Guesses: {len(guesses)} words (valid guesses)")
        return cls(answers, guesses)

    @classmethod
    def from_dir(cls, words_dir: str = DEFAULT_WORDS_DIR, verbose: bool = False) -> "Corpus":
        return cls.from_files(os.path.join(words_dir, ANSWERS_FILE),
                              os.path.join(words_dir, GUESSES_FILE), verbose=verbose)

    def __repr__(self):
        return f"Corpus(answers={len(self.answers)}, guess_list={len(self.guess_list)})"


def _check_unique(words: List[str], kind: str):
    seen = set()
    for w in words:
        check_word(w)
        if w in seen:
            raise ValueError(f"Duplicate {kind} word: {w!r}")
        seen.add(w)


def load_words(filepath: str) -> List[str]:
    """Load a word list from file, one word per line."""
    with open(filepath, 'r', encoding='utf-8') as f:
        words = [line.strip().lower() for line in f if line.strip()]
    if not words:
        raise ValueError(f"No words loaded from {filepath}")
    try:
        _check_unique(words, "word")
    except ValueError as e:
        raise ValueError(f"{filepath}: {e}") from e
    return words
