"""Board state: the candidate answers still possible on one board."""

from typing import List, Optional, Sequence

import numpy as np

from .config import PREVIEW_WORDS
from .feedback import check_feedback, is_possible, is_solved
from .histogram import compute_histograms
from .pruning import consistent_mask
from .words import WordList, word_to_chars, words_to_chars


class Board:
    """
    Mutable set of remaining candidate answers.

    Starts as the full answer list and only ever shrinks as feedback is
    applied; `reset` restores the full list. Letter codes and histograms of
    the current candidates are cached for the selector.
    """

    def __init__(self, answers: Sequence[str]):
        if isinstance(answers, WordList):
            self._initial = list(answers.words)
            self._initial_chars = answers.chars
        else:
            self._initial = list(answers)
            self._initial_chars = words_to_chars(self._initial)
        self._initial_histos = compute_histograms(self._initial_chars)
        self.reset()

    def reset(self):
        self.candidates: List[str] = list(self._initial)
        self.chars = self._initial_chars
        self.histos = self._initial_histos
        self.solved = False
        self.solution: Optional[str] = None

    def __len__(self):
        return len(self.candidates)

    def __contains__(self, word):
        return word in self.candidates

    @property
    def active(self) -> bool:
        """Whether this board still counts towards the worst case."""
        return not self.solved

    def apply(self, guess: str, feedback: Sequence[int]) -> List[str]:
        """Prune with the feedback seen for `guess`; returns the new candidates."""
        guess_chars = word_to_chars(guess)
        fb = check_feedback(feedback)
        if self.solved:
            return self.candidates
        if is_possible(guess, fb):
            mask = consistent_mask(self.chars, self.histos, guess_chars, fb)
        else:
            mask = np.zeros(len(self.candidates), dtype=np.bool_)
        self.candidates = [w for w, keep in zip(self.candidates, mask) if keep]
        self.chars = self.chars[mask]
        self.histos = self.histos[mask]
        # All green only keeps the guess itself, and only if it was a candidate
        if is_solved(fb) and self.candidates:
            self.mark_solved(guess)
        return self.candidates

    def mark_solved(self, answer: str):
        word_chars = word_to_chars(answer)
        self.candidates = [answer]
        self.chars = word_chars.reshape(1, -1)
        self.histos = compute_histograms(self.chars)
        self.solved = True
        self.solution = answer

    def preview(self, n: int = PREVIEW_WORDS) -> str:
        """One-line summary such as '12 candidate answers remain: a, b, ...'."""
        count = len(self.candidates)
        shown = ", ".join(self.candidates[:n])
        more = "" if count <= n else ", ..."
        return f"{count} candidate answers remain: {shown}{more}"

    def __repr__(self):
        state = f"solved={self.solution!r}" if self.solved else f"{len(self.candidates)} candidates"
        return f"Board({state})"


def new_boards(answers: Sequence[str], n_boards: int) -> List[Board]:
    if n_boards < 1:
        raise ValueError(f"Need at least one board, got {n_boards}")
    return [Board(answers) for _ in range(n_boards)]


def union_candidates(boards: Sequence[Board]) -> List[str]:
    """Candidates of all active boards, deduplicated, first occurrence order."""
    seen = set()
    result = []
    for board in boards:
        if not board.active:
            continue
        for w in board.candidates:
            if w not in seen:
                seen.add(w)
                result.append(w)
    return result


def stack_boards(boards: Sequence[Board]):
    """
    Concatenate active boards' codes and histograms.

    Returns (chars, histos, bounds) where board k owns rows
    bounds[k]:bounds[k+1].
    """
    active = [b for b in boards if b.active]
    bounds = np.zeros(len(active) + 1, dtype=np.int64)
    for k, b in enumerate(active):
        bounds[k + 1] = bounds[k] + len(b)
    if active:
        chars = np.concatenate([b.chars for b in active])
        histos = np.concatenate([b.histos for b in active])
    else:
        chars = np.zeros((0, 5), dtype=np.int8)
        histos = np.zeros((0, 26), dtype=np.int8)
    return chars, histos, bounds
