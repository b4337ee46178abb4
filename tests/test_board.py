import pytest

from wordle_minimax.board import Board, new_boards, stack_boards, union_candidates
from wordle_minimax.feedback import GREEN, GREY, YELLOW, score
from wordle_minimax.pruning import prune
from wordle_minimax.words import WordList

from .conftest import ANSWERS


def test_apply_matches_prune():
    board = Board(ANSWERS)
    fb = score("caret", "salet")
    assert board.apply("salet", fb) == prune(ANSWERS, "salet", fb)
    assert board.chars.shape == (len(board), 5)
    assert board.histos.shape == (len(board), 26)

    fb2 = score("caret", "crane")
    expected = prune(prune(ANSWERS, "salet", fb), "crane", fb2)
    assert board.apply("crane", fb2) == expected
    assert "caret" in board


def test_board_only_shrinks_and_resets():
    board = Board(WordList(ANSWERS))
    sizes = [len(board)]
    for guess in ["salet", "cling", "total"]:
        board.apply(guess, score("shall", guess))
        sizes.append(len(board))
    assert sizes == sorted(sizes, reverse=True)
    assert set(board.candidates) <= set(ANSWERS)

    board.reset()
    assert board.candidates == ANSWERS
    assert not board.solved


def test_all_green_solves_board():
    board = Board(ANSWERS)
    board.apply("trace", (GREEN,) * 5)
    assert board.solved
    assert not board.active
    assert board.solution == "trace"
    assert board.candidates == ["trace"]
    # further feedback is ignored once solved
    board.apply("crane", score("trace", "crane"))
    assert board.candidates == ["trace"]


def test_apply_rejects_malformed_input():
    board = Board(ANSWERS)
    with pytest.raises(ValueError):
        board.apply("cran", (0, 0, 0, 0, 0))
    with pytest.raises(ValueError):
        board.apply("crane", (0, 0, 0))
    assert board.candidates == ANSWERS


def test_preview():
    board = Board(ANSWERS)
    assert board.preview() == (f"{len(ANSWERS)} candidate answers remain: "
                               "solar, taser, cling, crane, trace, react, cater, ...")
    small = Board(["crane", "trace"])
    assert small.preview() == "2 candidate answers remain: crane, trace"


def test_union_skips_solved_boards():
    left, right, done = Board(["crane", "trace"]), Board(["trace", "level"]), Board(["solar"])
    done.apply("solar", (GREEN,) * 5)
    assert union_candidates([left, right, done]) == ["crane", "trace", "level"]

    chars, histos, bounds = stack_boards([left, done, right])
    assert list(bounds) == [0, 2, 4]
    assert chars.shape == (4, 5)
    assert histos.shape == (4, 26)


def test_new_boards():
    boards = new_boards(ANSWERS, 2)
    assert len(boards) == 2 and boards[0] is not boards[1]
    with pytest.raises(ValueError):
        new_boards(ANSWERS, 0)


def test_all_green_for_a_non_candidate_empties_board():
    board = Board(["crane", "trace"])
    assert board.apply("salet", (GREEN,) * 5) == []
    assert not board.solved
    assert set(board.candidates) <= {"crane", "trace"}
    assert board.chars.shape == (0, 5)


def test_impossible_feedback_empties_board():
    # yellow a after a grey a: no answer scores "aaxyw" like that
    board = Board(["zzazz", "abcde"])
    assert board.apply("aaxyw", (GREY, YELLOW, GREY, GREY, GREY)) == []
