"""
Interactive solver.

Commands:
    g <guess> <fb> [<fb> ...]   apply feedback for a guess (one code per board)
    gb <fb> [<fb> ...]          apply feedback for the last suggested guess,
                                then suggest the next one
    b                           suggest the best guess
    p                           print all remaining candidates
    r                           reset all boards
    fs                          simulate every game
    x                           quit

Feedback codes use 0 for grey, 1 for yellow, 2 for green, e.g. "01020".
"""

import argparse
import os
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from . import config
from .board import Board, new_boards
from .feedback import InvalidInputError, is_possible, parse_feedback, parse_guess
from .selector import best_guess
from .simulate import simulate, print_results
from .words import Corpus


FEEDBACK_HELP = "       result is 0 for grey, 1 for yellow, 2 for green"

# Grey, yellow, green tiles
TILE_STYLES = ("bold white on grey37", "bold white on yellow3", "bold white on green4")


def render_feedback(guess: str, feedback: Sequence[int]) -> Text:
    """The guess as colored letter tiles."""
    text = Text()
    for letter, c in zip(guess.upper(), feedback):
        text.append(f" {letter} ", style=TILE_STYLES[int(c)])
    return text


def board_label(k: int, n_boards: int) -> str:
    if n_boards == 1:
        return ""
    if n_boards == 2:
        return ("left: ", "right: ")[k]
    return f"board {k + 1}: "


class Session:
    """REPL state: the boards plus the last suggested guess."""

    def __init__(self, corpus: Corpus, n_boards: int = 1, n_threads: Optional[int] = None,
                 opening: str = config.OPENING_GUESS,
                 opening_worst_case: Optional[int] = config.OPENING_WORST_CASE,
                 console: Optional[Console] = None):
        self.corpus = corpus
        self.n_boards = n_boards
        self.n_threads = n_threads
        self.opening = opening
        self.opening_worst_case = opening_worst_case
        self.console = console or Console(highlight=False)
        self.boards: List[Board] = new_boards(corpus.answers, n_boards)
        self.prev_best: Optional[str] = opening
        self._opening_choice: Optional[Tuple[Optional[str], int]] = None

    def reset(self):
        for board in self.boards:
            board.reset()
        self.prev_best = self.opening

    def print_remaining(self):
        for k, board in enumerate(self.boards):
            label = board_label(k, self.n_boards)
            if board.solved:
                self.console.print(f"{label}solved: {board.solution}", markup=False)
            else:
                self.console.print(f"{label}{board.preview()}", markup=False)

    def print_best_guess(self) -> Optional[str]:
        if self.at_start():
            guess, worst = self.opening_choice()
        else:
            guess, worst = best_guess(self.boards, self.corpus.guess_list, self.n_threads)
        self.console.print(f"Best guess: '{guess or ''}' with worst case {worst} candidates",
                           markup=False)
        return guess

    def is_canonical(self) -> bool:
        """Whether the loaded corpus has the sizes the opening was precomputed on."""
        return (len(self.corpus.answers) == config.CANONICAL_ANSWERS
                and len(self.corpus.guess_list) == config.CANONICAL_GUESS_LIST
                and self.opening in self.corpus.guess_list)

    def opening_choice(self) -> Tuple[Optional[str], int]:
        """Best guess for fresh boards, computed at most once per session."""
        if self._opening_choice is None:
            if self.n_boards == 1 and self.opening_worst_case is not None and self.is_canonical():
                # Precomputed, takes a long time.
                self._opening_choice = (self.opening, self.opening_worst_case)
            else:
                self._opening_choice = best_guess(self.boards, self.corpus.guess_list,
                                                  self.n_threads)
        return self._opening_choice

    def at_start(self) -> bool:
        return all(len(b) == len(self.corpus.answers) and b.active for b in self.boards)

    def apply(self, guess: str, codes: Sequence[str]):
        """Parse every feedback code first so a bad one leaves all boards untouched."""
        if len(codes) != self.n_boards:
            raise InvalidInputError(f"Expected {self.n_boards} feedback codes, got {len(codes)}")
        guess = parse_guess(guess)
        feedbacks = [parse_feedback(code) for code in codes]
        for code, fb in zip(codes, feedbacks):
            if not is_possible(guess, fb):
                raise InvalidInputError(f"No answer gives {code} for {guess}")
        for board, fb in zip(self.boards, feedbacks):
            if board.active:
                self.console.print(render_feedback(guess, fb))
            board.apply(guess, fb)

    def usage(self, cmd: str):
        codes = " ".join(["result"] if self.n_boards == 1
                         else [f"result{k + 1}" for k in range(self.n_boards)])
        if cmd == "g":
            self.console.print(f"Usage: g guess {codes}", markup=False)
        else:
            self.console.print(f"Usage: gb {codes}", markup=False)
        self.console.print(FEEDBACK_HELP, markup=False)

    def handle(self, line: str) -> bool:
        """Run one command line; returns False when the session should end."""
        words = line.split()
        if not words:
            return True
        cmd, args = words[0], words[1:]

        if cmd == "x":
            return False
        elif cmd == "g":
            try:
                if not args:
                    raise InvalidInputError("Missing guess")
                self.apply(args[0], args[1:])
            except InvalidInputError:
                self.usage(cmd)
        elif cmd == "gb":
            try:
                if self.prev_best is None:
                    raise InvalidInputError("No previous best guess")
                self.apply(self.prev_best, args)
            except InvalidInputError:
                self.usage(cmd)
            else:
                self.prev_best = self.print_best_guess()
        elif cmd == "b":
            self.prev_best = self.print_best_guess()
        elif cmd == "p":
            for k, board in enumerate(self.boards):
                self.console.print(f"{board_label(k, self.n_boards)}{', '.join(board.candidates)}",
                                   markup=False)
        elif cmd == "r":
            self.reset()
        elif cmd == "fs":
            result = simulate(self.corpus, self.n_boards, opening=self.opening,
                              n_threads=self.n_threads)
            print_results(result)
        else:
            self.console.print(f"No command '{cmd}'", markup=False)
        return True

    def run(self):
        self.console.print(f"Best guess: '{self.opening}'", markup=False)
        while True:
            self.print_remaining()
            try:
                line = self.console.input("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle(line):
                break


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordle-minimax",
        description="Minimax solver for Wordle (one board) and Dordle (two boards).")
    parser.add_argument("--boards", type=int, default=1,
                        help="number of simultaneous boards (default: 1)")
    parser.add_argument("--words-dir", default=config.DEFAULT_WORDS_DIR,
                        help="directory holding answers.txt and allowed_guesses.txt")
    parser.add_argument("--answers", help="answer list (overrides --words-dir)")
    parser.add_argument("--guesses", help="allowed guess list (overrides --words-dir)")
    parser.add_argument("--threads", type=int, default=None,
                        help="worker threads for guess scoring (default: all cores)")
    parser.add_argument("--opening", default=config.OPENING_GUESS,
                        help=f"fixed first guess (default: {config.OPENING_GUESS})")
    parser.add_argument("--simulate", action="store_true",
                        help="play every game and report statistics, then exit")
    parser.add_argument("--sample", type=int, default=None,
                        help="with --simulate, play only this many random games")
    parser.add_argument("--seed", type=int, default=42,
                        help="random seed for --sample (default: 42)")
    parser.add_argument("--quiet", action="store_true",
                        help="with --simulate, skip the per-game lines")
    args = parser.parse_args(argv)
    if args.boards < 1:
        parser.error("--boards must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    answers_path = args.answers or os.path.join(args.words_dir, config.ANSWERS_FILE)
    guesses_path = args.guesses or os.path.join(args.words_dir, config.GUESSES_FILE)
    print("Loading word lists...")
    try:
        corpus = Corpus.from_files(answers_path, guesses_path, verbose=True)
    except (OSError, ValueError) as e:
        print(f"Could not load word lists: {e}", file=sys.stderr)
        return 1

    if args.simulate:
        result = simulate(corpus, args.boards, opening=args.opening, n_threads=args.threads,
                          sample=args.sample, seed=args.seed, verbose=not args.quiet)
        print_results(result)
        return 0

    # Only the single-board opening is precomputed, and only for the default opening
    worst = config.OPENING_WORST_CASE if args.opening == config.OPENING_GUESS else None
    Session(corpus, args.boards, args.threads, opening=args.opening,
            opening_worst_case=worst).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
