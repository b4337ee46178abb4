import itertools
from collections import Counter

import pytest

from wordle_minimax.config import MAX_ROUNDS
from wordle_minimax.simulate import SimulationResult, all_cases, play, simulate, print_results

from .conftest import ANSWERS, DISJOINT


def check_stats(result):
    rounds = list(result.rounds.values())
    assert result.total == len(rounds)
    assert result.average == pytest.approx(sum(rounds) / len(rounds))
    assert result.worst == max(rounds)
    counts = Counter(rounds)
    assert result.distribution == {n: counts.get(n, 0) for n in range(1, max(rounds) + 1)}
    assert sum(result.distribution.values()) == result.total


def test_single_board_every_answer(corpus):
    result = simulate(corpus, 1, opening="salet", verbose=False)
    assert set(result.rounds) == {(a,) for a in ANSWERS}
    assert all(2 <= n <= MAX_ROUNDS for n in result.rounds.values())
    check_stats(result)


def test_play_returns_guesses(corpus):
    n, guesses = play(corpus, ["level"], opening="salet")
    assert n == len(guesses)
    assert guesses[0] == "salet"
    assert guesses[-1] == "level"


def test_opening_is_the_answer(corpus):
    assert play(corpus, ["crane"], opening="crane") == (1, ["crane"])


def test_play_without_opening(corpus):
    n, guesses = play(corpus, ["trace"], opening=None)
    assert guesses[-1] == "trace"
    assert guesses[0] in corpus.guess_list


def test_play_rejects_unknown_answer(corpus):
    with pytest.raises(ValueError):
        play(corpus, ["zzzzz"])


def test_two_boards_every_pair(disjoint_corpus):
    result = simulate(disjoint_corpus, 2, opening="abcde", verbose=False)
    assert set(result.rounds) == set(itertools.combinations(DISJOINT, 2))
    # two different answers always take at least two guesses
    assert all(2 <= n <= len(DISJOINT) for n in result.rounds.values())
    check_stats(result)


def test_two_board_game_solves_both(corpus):
    n, guesses = play(corpus, ["caret", "still"], opening="salet")
    assert "caret" in guesses and "still" in guesses
    assert guesses[-1] in ("caret", "still")


def test_sample(corpus):
    result = simulate(corpus, 1, opening="salet", sample=5, seed=1, verbose=False)
    assert result.total == 5
    again = simulate(corpus, 1, opening="salet", sample=5, seed=1, verbose=False)
    assert result.rounds == again.rounds


def test_all_cases():
    assert list(all_cases(["a", "b", "c"], 1)) == [("a",), ("b",), ("c",)]
    assert list(all_cases(["a", "b", "c"], 2)) == [("a", "b"), ("a", "c"), ("b", "c")]


def test_print_results(capsys):
    result = SimulationResult(rounds={("crane",): 2, ("trace",): 3, ("level",): 3}, elapsed=1.0)
    print_results(result)
    out = capsys.readouterr().out
    assert "Average 2.6667 rounds, worst 3 rounds" in out
    assert "1 rounds:     0" in out
    assert "3 rounds:     2" in out
