"""
Solver defaults.

Everything here can be overridden per call (keyword arguments) or from the
command line.
"""

import os


WORD_LENGTH = 5
ALPHABET_SIZE = 26

# Precomputed on the canonical 2315/12972 corpus; recomputing it takes minutes.
OPENING_GUESS = "salet"
OPENING_WORST_CASE = 168
CANONICAL_ANSWERS = 2315
CANONICAL_GUESS_LIST = 12972

# Number of words shown in the remaining-candidates line
PREVIEW_WORDS = 7

# Simulation guard: a correct engine never gets close to this
MAX_ROUNDS = 20

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_WORDS_DIR = os.environ.get("WORDLE_WORDS_DIR", os.path.join(_BASE_DIR, "words"))
ANSWERS_FILE = "answers.txt"
GUESSES_FILE = "allowed_guesses.txt"
