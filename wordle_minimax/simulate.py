"""
Simulation harness.

Auto-plays the solver against every secret (single board) or every
unordered combination of distinct secrets (multi-board) and collects the
number of rounds each game takes. Run this after any change to the
selector's scoring or tie-break rules.
"""

import itertools
import random
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .board import new_boards
from .config import OPENING_GUESS, MAX_ROUNDS
from .feedback import score
from .selector import best_guess
from .words import Corpus, check_word


Case = Tuple[str, ...]


@dataclass
class SimulationResult:
    rounds: Dict[Case, int] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def total(self) -> int:
        return len(self.rounds)

    @property
    def total_rounds(self) -> int:
        return sum(self.rounds.values())

    @property
    def average(self) -> float:
        return self.total_rounds / self.total if self.rounds else 0.0

    @property
    def worst(self) -> int:
        return max(self.rounds.values(), default=0)

    @property
    def distribution(self) -> Dict[int, int]:
        """Number of cases per round count, from 1 to the worst case."""
        counts = Counter(self.rounds.values())
        return {n: counts.get(n, 0) for n in range(1, self.worst + 1)}


def play(corpus: Corpus, secrets: Sequence[str], opening: Optional[str] = OPENING_GUESS,
         n_threads: Optional[int] = None, max_rounds: int = MAX_ROUNDS,
         verbose: bool = False) -> Tuple[int, List[str]]:
    """
    Solve one game with one board per secret.

    Args:
        corpus: word lists (boards start from corpus.answers)
        secrets: the hidden answer of each board
        opening: fixed first guess (None: ask the selector)
        n_threads: worker-pool bound passed to the selector
        max_rounds: guard against a runaway game
        verbose: print each turn

    Returns:
        (num_rounds, list_of_guesses)
    """
    for s in secrets:
        if s not in corpus.answers:
            raise ValueError(f"Answer '{s}' not in answer list")
    if opening is not None:
        check_word(opening)

    boards = new_boards(corpus.answers, len(secrets))
    guesses = []

    while True:
        if not guesses and opening is not None:
            guess = opening
        else:
            guess, _ = best_guess(boards, corpus.guess_list, n_threads)
            if guess is None:
                raise RuntimeError(f"No guess available for {secrets} - bug in solver")
        guesses.append(guess)

        for board, secret in zip(boards, secrets):
            if board.active:
                board.apply(guess, score(secret, guess))

        if verbose:
            state = ", ".join(str(len(b)) if b.active else "solved" for b in boards)
            print(f"  Turn {len(guesses)}: {guess} ({state})")

        if all(b.solved for b in boards):
            return len(guesses), guesses
        if len(guesses) >= max_rounds:
            raise RuntimeError(f"No solution for {secrets} after {max_rounds} rounds - bug in solver")


def all_cases(answers: Sequence[str], n_boards: int = 1) -> Iterable[Case]:
    """Every secret for one board, every unordered set of distinct secrets otherwise."""
    return itertools.combinations(answers, n_boards)


def simulate(corpus: Corpus, n_boards: int = 1, cases: Optional[Iterable[Case]] = None,
             opening: Optional[str] = OPENING_GUESS, n_threads: Optional[int] = None,
             sample: Optional[int] = None, seed: int = 42,
             verbose: bool = True) -> SimulationResult:
    """
    Play every case and collect round counts.

    Args:
        corpus: word lists
        n_boards: boards per game
        cases: explicit cases (default: all of them)
        opening: fixed first guess
        n_threads: worker-pool bound passed to the selector
        sample: play only this many randomly chosen cases
        seed: random seed for sampling
        verbose: print one line per case plus periodic progress
    """
    if cases is None:
        cases = all_cases(corpus.answers.words, n_boards)
    cases = list(cases)
    if sample is not None and sample < len(cases):
        cases = random.Random(seed).sample(cases, sample)

    result = SimulationResult()
    start = time.time()
    for i, case in enumerate(cases):
        if verbose and i % 500 == 0 and i:
            elapsed = time.time() - start
            print(f"[{i}/{len(cases)}] {i / elapsed:.1f} games/s, avg={result.average:.4f}")

        n, _ = play(corpus, case, opening=opening, n_threads=n_threads)
        result.rounds[tuple(case)] = n
        if verbose:
            print(f"{' x '.join(case)}: {n}")

    result.elapsed = time.time() - start
    return result


def print_results(result: SimulationResult):
    """Pretty print simulation results."""
    print("\n" + "=" * 50)
    print("SIMULATION RESULTS")
    print("=" * 50)
    print(f"Games played: {result.total}")
    print(f"Average {result.average:.4f} rounds, worst {result.worst} rounds")
    if result.elapsed > 0:
        print(f"Time: {result.elapsed:.1f}s ({result.total / result.elapsed:.1f} games/sec)")
    print("\nDistribution:")
    for n, count in result.distribution.items():
        pct = 100 * count / result.total
        bar = "█" * int(pct / 2)
        print(f"  {n} rounds: {count:5d} ({pct:5.2f}%) {bar}")
    print("=" * 50)
