import io

import pytest
from rich.console import Console

from wordle_minimax.words import Corpus


ANSWERS = [
    "solar", "taser", "cling", "crane", "trace", "react", "cater", "caret",
    "crate", "spill", "skill", "still", "stall", "shall", "tally", "total",
    "allot", "alloy", "atoll", "level",
]

GUESSES = ["salet", "roate", "lints", "bumpy", "stoal"]

# No two words share a letter, so a guess only ever says "this one" or "not this one"
DISJOINT = ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]


@pytest.fixture
def answers():
    return list(ANSWERS)


@pytest.fixture
def corpus():
    return Corpus(ANSWERS, GUESSES)


@pytest.fixture
def disjoint_corpus():
    return Corpus(DISJOINT)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, highlight=False)
