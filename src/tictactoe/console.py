"""Text-console front end: prompts, board display and the game loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, Callable, Optional

from pydantic import Field, TypeAdapter, ValidationError

from .engine import GameEngine, TurnState
from .game import NUM_SQUARES, Board, Outcome, Piece

logger = logging.getLogger(__name__)

INSTRUCTIONS = """\
Welcome to the ultimate man-machine showdown: Tic-Tac-Toe.
--where human brain is pit against silicon processor

Make your move known by entering a number, 0-8. The number
corresponds to the desired board position, as illustrated:

0 | 1 | 2
---------
3 | 4 | 5
---------
6 | 7 | 8

Prepare yourself, human. The battle is about to begin.
"""


@dataclass
class Console:
    """Line-oriented I/O; swap ``read``/``write`` to script a game in tests."""

    read: Callable[[str], str] = input
    write: Callable[[str], None] = print

    # ---- prompts ----

    def ask_yes_no(self, question: str) -> bool:
        while True:
            answer = self.read(f"{question} (y/n): ").strip()
            if answer == "y":
                return True
            if answer == "n":
                return False

    def ask_number(self, question: str, high: int, low: int = 0) -> int:
        adapter = TypeAdapter(Annotated[int, Field(ge=low, le=high)])
        while True:
            raw = self.read(f"{question} ({low} - {high}): ").strip()
            try:
                return adapter.validate_python(raw)
            except ValidationError:
                logger.debug("Rejected number input %r", raw)

    # ---- game narrative ----

    def instructions(self) -> None:
        self.write(INSTRUCTIONS)

    def human_piece(self) -> Piece:
        if self.ask_yes_no("Do you require the first move?"):
            self.write("\nThen take the first move. You will need it.")
            return Piece.X
        self.write("\nYour bravery will be your undoing... I will go first.")
        return Piece.O

    def human_move(self, board: Board) -> int:
        move = self.ask_number("Where will you move?", NUM_SQUARES - 1)
        while not board.is_legal(move):
            self.write("\nThat square is already occupied, foolish human.")
            move = self.ask_number("Where will you move?", NUM_SQUARES - 1)
        self.write("Fine...")
        return move

    def display_board(self, board: Board) -> None:
        self.write(board.render())

    def announce(self, outcome: Outcome, computer: Piece, human: Piece) -> None:
        winner = outcome.winner
        if winner is computer:
            self.write(f"{winner.value}'s won!")
        elif winner is human:
            self.write(f"{winner.value}'s won!")
            self.write("No, no! It cannot be! Somehow you tricked me, human.")
            self.write("But never again! I, the computer, so swear it!")
        else:
            self.write("It's a tie.")
            self.write("You were most lucky, human, and somehow managed to tie me.")
            self.write("Celebrate... for this is the best you will ever achieve.")


def play(
    console: Console,
    human_first: Optional[bool] = None,
    show_instructions: bool = True,
) -> Outcome:
    """Run one full game on ``console`` and return its outcome."""
    if show_instructions:
        console.instructions()

    if human_first is None:
        human = console.human_piece()
    else:
        human = Piece.X if human_first else Piece.O
    engine = GameEngine.new(human_first=human is Piece.X)

    console.display_board(engine.board)
    while engine.state is not TurnState.GAME_OVER:
        if engine.state is TurnState.HUMAN_TURN:
            engine.play_human(console.human_move(engine.board))
        else:
            move = engine.play_computer()
            console.write(f"I shall take square number {move}")
        console.display_board(engine.board)

    outcome = engine.outcome
    console.announce(outcome, engine.computer, engine.human)
    return outcome
