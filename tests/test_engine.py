"""Tests for the turn controller."""

from typing import List

import pytest

from tictactoe.engine import GameEngine, TurnState
from tictactoe.game import Outcome, Piece


def _replay(human_first: bool, human_moves: List[int]) -> GameEngine:
    engine = GameEngine.new(human_first=human_first)
    for idx in human_moves:
        while engine.state is TurnState.COMPUTER_TURN:
            engine.play_computer()
        engine.play_human(idx)
    while engine.state is TurnState.COMPUTER_TURN:
        engine.play_computer()
    return engine


def _finished_games(human_first: bool) -> List[GameEngine]:
    finished: List[GameEngine] = []
    pending: List[List[int]] = [[]]
    while pending:
        moves = pending.pop()
        engine = _replay(human_first, moves)
        if engine.state is TurnState.GAME_OVER:
            finished.append(engine)
            continue
        for idx in engine.board.empty_cells():
            pending.append(moves + [idx])
    return finished


def test_human_first_holds_x():
    engine = GameEngine.new(human_first=True)
    assert engine.human is Piece.X
    assert engine.computer is Piece.O
    assert engine.state is TurnState.HUMAN_TURN


def test_computer_first_holds_x():
    engine = GameEngine.new(human_first=False)
    assert engine.human is Piece.O
    assert engine.computer is Piece.X
    assert engine.state is TurnState.COMPUTER_TURN


def test_computer_opens_in_center():
    engine = GameEngine.new(human_first=False)
    assert engine.play_computer() == 4
    assert engine.board.cells[4] is Piece.X
    assert engine.state is TurnState.HUMAN_TURN


def test_turns_alternate():
    engine = GameEngine.new(human_first=True)
    engine.play_human(0)
    assert engine.state is TurnState.COMPUTER_TURN
    engine.play_computer()
    assert engine.state is TurnState.HUMAN_TURN
    assert engine.history == [(Piece.X, 0), (Piece.O, 4)]


def test_out_of_turn_moves_are_rejected():
    engine = GameEngine.new(human_first=True)
    with pytest.raises(ValueError):
        engine.play_computer()
    engine.play_human(0)
    with pytest.raises(ValueError):
        engine.play_human(1)


def test_illegal_human_move_leaves_board_untouched():
    engine = GameEngine.new(human_first=False)
    engine.play_computer()
    with pytest.raises(ValueError):
        engine.play_human(4)
    assert engine.history == [(Piece.X, 4)]
    assert engine.state is TurnState.HUMAN_TURN


def test_game_from_corner_opening_ends_in_tie():
    engine = _replay(True, [0, 1, 6, 5, 7])
    assert engine.history == [
        (Piece.X, 0),
        (Piece.O, 4),
        (Piece.X, 1),
        (Piece.O, 2),
        (Piece.X, 6),
        (Piece.O, 3),
        (Piece.X, 5),
        (Piece.O, 8),
        (Piece.X, 7),
    ]
    assert engine.state is TurnState.GAME_OVER
    assert engine.outcome is Outcome.TIE


def test_opposite_corner_fork_beats_the_heuristic():
    engine = _replay(True, [0, 8, 6, 7])
    assert engine.history == [
        (Piece.X, 0),
        (Piece.O, 4),
        (Piece.X, 8),
        (Piece.O, 2),
        (Piece.X, 6),
        (Piece.O, 3),
        (Piece.X, 7),
    ]
    assert engine.outcome is Outcome.X_WINS
    assert engine.state is TurnState.GAME_OVER


def test_no_moves_accepted_after_game_over():
    engine = _replay(True, [0, 8, 6, 7])
    with pytest.raises(ValueError):
        engine.play_human(1)
    with pytest.raises(ValueError):
        engine.play_computer()


@pytest.mark.parametrize("human_first", [True, False])
def test_every_game_terminates_within_nine_moves(human_first):
    games = _finished_games(human_first)
    assert games
    for engine in games:
        assert engine.outcome.is_terminal
        assert len(engine.history) <= 9
        pieces = [piece for piece, _ in engine.history]
        assert pieces[0] is Piece.X
        assert all(a is not b for a, b in zip(pieces, pieces[1:]))
        assert len({idx for _, idx in engine.history}) == len(engine.history)
