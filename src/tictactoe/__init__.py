"""Tic-Tac-Toe package exposing game rules, the heuristic opponent, and the console game."""

from .ai import HeuristicAI
from .console import Console, play
from .engine import GameEngine, TurnState
from .game import WINNING_LINES, Board, Outcome, Piece, evaluate, opponent

__all__ = [
    "Board",
    "Console",
    "GameEngine",
    "HeuristicAI",
    "Outcome",
    "Piece",
    "TurnState",
    "WINNING_LINES",
    "evaluate",
    "opponent",
    "play",
]
