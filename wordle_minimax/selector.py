"""
Minimax guess selection
=======================

For every allowed guess t and every word a that could still be the secret
(on any active board), apply the feedback score(a, t) to each active board
and add up the candidates left. The worst case of t is the maximum of that
sum over all a; the best guess minimizes the worst case.

Ties go to a guess that is itself a remaining candidate (it could win on
the spot), then to the earliest guess in the guess list.

Guesses are scored in parallel (numba prange). Each guess writes only its
own slot of the result array, and the final reduction scans that array in
guess-list order, so the answer does not depend on the thread count.
"""

import time
from contextlib import contextmanager
from typing import Optional, Sequence, Tuple, Union

import numba
import numpy as np
from numba import jit, prange

from .board import Board, stack_boards, union_candidates
from .feedback import compute_feedback
from .pruning import count_consistent
from .words import WordList, words_to_chars


# ============================================================================
# NUMBA-ACCELERATED SCORING
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def worst_case_scores(guess_chars: np.ndarray, secret_chars: np.ndarray,
                      cand_chars: np.ndarray, cand_histos: np.ndarray,
                      bounds: np.ndarray) -> np.ndarray:
    """
    Worst-case remaining candidates for every guess.

    Args:
        guess_chars: shape (n_guesses, 5) guesses to evaluate
        secret_chars: shape (n_secrets, 5) words the adversary may pick
        cand_chars: shape (n, 5) candidates of all boards, stacked
        cand_histos: shape (n, 26) their histograms
        bounds: board k owns rows bounds[k]:bounds[k+1]

    Returns:
        shape (n_guesses,) worst-case counts
    """
    n_guesses = guess_chars.shape[0]
    n_secrets = secret_chars.shape[0]
    n_boards = bounds.shape[0] - 1
    result = np.zeros(n_guesses, dtype=np.int64)

    for g in prange(n_guesses):
        guess = guess_chars[g]
        scratch = np.empty(26, dtype=np.int8)
        worst = 0
        for s in range(n_secrets):
            feedback = compute_feedback(secret_chars[s], guess)
            total = 0
            for b in range(n_boards):
                total += count_consistent(cand_chars, cand_histos, bounds[b], bounds[b + 1],
                                          guess, feedback, scratch)
            if total > worst:
                worst = total
        result[g] = worst

    return result


def pick_best(scores: np.ndarray, is_candidate: np.ndarray) -> int:
    """
    Index of the best guess: lowest score, candidates first, earliest wins.

    Scores are doubled and candidates get one knocked off, so a candidate
    beats a non-candidate with the same score but never a lower one.
    """
    keys = scores * 2 - is_candidate.astype(np.int64)
    return int(np.argmin(keys))


@contextmanager
def worker_threads(n_threads: Optional[int]):
    """Bound numba's worker pool to `n_threads` inside the block."""
    if not n_threads:
        yield
        return
    previous = numba.get_num_threads()
    numba.set_num_threads(min(n_threads, numba.config.NUMBA_NUM_THREADS))
    try:
        yield
    finally:
        numba.set_num_threads(previous)


# ============================================================================
# PYTHON API
# ============================================================================

BoardLike = Union[Board, Sequence[str]]


def _as_board(board: BoardLike) -> Board:
    return board if isinstance(board, Board) else Board(board)


def score_guesses(boards: Sequence[BoardLike], guess_list: Union[WordList, Sequence[str]],
                  n_threads: Optional[int] = None) -> np.ndarray:
    """Worst-case count of every guess in `guess_list`, in list order."""
    boards = [_as_board(b) for b in boards]
    guess_chars = guess_list.chars if isinstance(guess_list, WordList) else words_to_chars(guess_list)
    secrets = union_candidates(boards)
    cand_chars, cand_histos, bounds = stack_boards(boards)
    with worker_threads(n_threads):
        return worst_case_scores(guess_chars, words_to_chars(secrets), cand_chars, cand_histos, bounds)


def best_guess(boards: Sequence[BoardLike], guess_list: Union[WordList, Sequence[str]],
               n_threads: Optional[int] = None,
               verbose: bool = False) -> Tuple[Optional[str], int]:
    """
    Find the guess minimizing the worst-case number of remaining candidates.

    Args:
        boards: one or more boards (or plain candidate lists); solved boards
            are left out
        guess_list: allowed guesses, in tie-break order
        n_threads: bound on the worker pool (default: numba's setting)
        verbose: print timing

    Returns:
        (guess, worst_case_count), or (None, 0) when no move remains
    """
    boards = [_as_board(b) for b in boards]
    active = [b for b in boards if b.active]
    if not active or any(len(b) == 0 for b in active) or len(guess_list) == 0:
        return None, 0

    t0 = time.time()
    scores = score_guesses(active, guess_list, n_threads)
    secrets = set(union_candidates(active))
    is_candidate = np.array([w in secrets for w in guess_list], dtype=np.bool_)
    best = pick_best(scores, is_candidate)

    if verbose:
        n_secrets = len(secrets)
        print(f"Scored {len(guess_list)} guesses against {n_secrets} secrets "
              f"in {time.time() - t0:.2f}s")

    return guess_list[best], int(scores[best])
