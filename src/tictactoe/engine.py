"""Turn controller tying the board, the human and the heuristic opponent together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .ai import HeuristicAI
from .game import Board, Outcome, Piece

logger = logging.getLogger(__name__)


class TurnState(Enum):
    HUMAN_TURN = "human"
    COMPUTER_TURN = "computer"
    GAME_OVER = "over"


@dataclass
class GameEngine:
    """One game between a human and the computer.

    X always moves first, so the human holds X exactly when they asked to
    move first. After every placement the outcome is re-evaluated; the turn
    flips while it is undecided and the engine settles in ``GAME_OVER``
    otherwise.
    """

    human: Piece
    board: Board = field(default_factory=Board)
    turn: Piece = Piece.X
    history: List[Tuple[Piece, int]] = field(default_factory=list)
    ai: HeuristicAI = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.ai = HeuristicAI(player=self.computer)

    @classmethod
    def new(cls, human_first: bool) -> "GameEngine":
        human = Piece.X if human_first else Piece.O
        logger.info("New game: human plays %s", human.value)
        return cls(human=human)

    @property
    def computer(self) -> Piece:
        return self.human.opponent()

    @property
    def outcome(self) -> Outcome:
        return self.board.outcome()

    @property
    def state(self) -> TurnState:
        if self.outcome.is_terminal:
            return TurnState.GAME_OVER
        return TurnState.HUMAN_TURN if self.turn is self.human else TurnState.COMPUTER_TURN

    def is_legal(self, idx: int) -> bool:
        return self.board.is_legal(idx)

    def play_human(self, idx: int) -> None:
        if self.state is not TurnState.HUMAN_TURN:
            raise ValueError("It is not the human player's turn")
        self._place(self.human, idx)

    def play_computer(self) -> int:
        if self.state is not TurnState.COMPUTER_TURN:
            raise ValueError("It is not the computer player's turn")
        idx = self.ai.choose(self.board)
        self._place(self.computer, idx)
        return idx

    # ---- helpers ----

    def _place(self, piece: Piece, idx: int) -> None:
        self.board.place(piece, idx)
        self.history.append((piece, idx))
        logger.debug("%s -> %d", piece.value, idx)

        outcome = self.outcome
        if outcome.is_terminal:
            logger.info("Game over after %d moves: %s", len(self.history), outcome.name)
            return
        self.turn = self.turn.opponent()
