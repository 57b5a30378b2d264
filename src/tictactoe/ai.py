"""Depth-1 heuristic opponent: win, else block, else take the best free square."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .game import Board, Outcome, Piece

logger = logging.getLogger(__name__)

# Center, then corners, then edges. Order matters for the quality of play.
POSITIONAL_PREFERENCE: Tuple[int, ...] = (4, 0, 2, 6, 8, 1, 3, 5, 7)


@dataclass
class HeuristicAI:
    """Computer player with a fixed three-tier move policy.

    Each tier scans the squares in ascending order and only falls through
    to the next tier when nothing matched:

      1. a square that wins the game for ``player`` right now
      2. a square that would win it for the opponent (taken to block it)
      3. the first free square in ``POSITIONAL_PREFERENCE``
    """

    player: Piece

    @property
    def opponent(self) -> Piece:
        return self.player.opponent()

    # ---- public API ----

    def choose(self, board: Board) -> int:
        if board.outcome().is_terminal:
            raise ValueError("Game already finished")
        if not board.empty_cells():
            raise ValueError("No valid moves available")

        move = self._winning_square(board, self.player)
        if move is not None:
            logger.debug("%s wins at %d", self.player.value, move)
            return move

        move = self._winning_square(board, self.opponent)
        if move is not None:
            logger.debug(
                "%s blocks %s at %d", self.player.value, self.opponent.value, move
            )
            return move

        move = self._preferred_square(board)
        logger.debug("%s takes preferred square %d", self.player.value, move)
        return move

    # ---- tiers ----

    def _winning_square(self, board: Board, piece: Piece) -> Optional[int]:
        target = Outcome.win_for(piece)
        scratch = board.copy()
        for idx in scratch.empty_cells():
            scratch.cells[idx] = piece
            won = scratch.outcome() is target
            scratch.cells[idx] = None
            if won:
                return idx
        return None

    def _preferred_square(self, board: Board) -> int:
        for idx in POSITIONAL_PREFERENCE:
            if board.is_legal(idx):
                return idx
        raise ValueError("No valid moves available")
