"""Debug script for tracing solver behavior on one game."""

import sys

from wordle_minimax.board import new_boards
from wordle_minimax.config import OPENING_GUESS, MAX_ROUNDS
from wordle_minimax.feedback import score, feedback_to_tiles
from wordle_minimax.selector import best_guess
from wordle_minimax.words import Corpus


def trace_solve(corpus, secrets, opening=OPENING_GUESS):
    boards = new_boards(corpus.answers, len(secrets))

    print(f"\n=== Tracing solve for: {' x '.join(secrets)} ===\n")

    for i in range(MAX_ROUNDS):
        for k, board in enumerate(boards):
            if board.active:
                print(f"Turn {i+1}, board {k+1}: {board.preview(10)}")

        if i == 0:
            guess, worst = opening, None
        else:
            guess, worst = best_guess(boards, corpus.guess_list, verbose=True)
        print(f"  Guess: {guess} (worst case {worst})")

        for board, secret in zip(boards, secrets):
            if not board.active:
                continue
            fb = score(secret, guess)
            print(f"    {secret}: {feedback_to_tiles(fb)}")
            board.apply(guess, fb)
            # Check the answer survived the pruning
            if secret not in board:
                print(f"  ERROR: {secret} not in remaining candidates!")
                return None

        if all(b.solved for b in boards):
            print(f"\n✓ Solved in {i+1} guesses!")
            return i + 1

    print(f"\n✗ Failed to solve in {MAX_ROUNDS} guesses")
    return MAX_ROUNDS + 1


if __name__ == "__main__":
    corpus = Corpus.from_dir(verbose=True)
    # One game per argument; "caret,still" traces a two-board game
    for arg in sys.argv[1:] or ["jazzy"]:
        trace_solve(corpus, arg.split(","))
