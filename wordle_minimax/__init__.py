"""
Wordle / Dordle Minimax Solver
==============================

Picks, at every turn, the guess that minimizes the worst-case number of
remaining candidate answers, on one board or several boards at once.

Canonical corpus reference: opening with SALET leaves at most 168 candidates.
"""

__version__ = "1.0.0"

from .board import Board
from .feedback import GREY, YELLOW, GREEN, InvalidInputError, score, parse_feedback, parse_guess
from .histogram import letter_histogram
from .pruning import is_consistent, iter_consistent, prune
from .selector import best_guess
from .simulate import SimulationResult, play, simulate, print_results
from .words import Corpus, WordList, load_words
