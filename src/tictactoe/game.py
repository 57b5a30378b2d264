"""Core rules for classic 3x3 Tic-Tac-Toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

NUM_SQUARES = 9

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Piece(str, Enum):
    """A player's mark."""

    X = "X"
    O = "O"

    def opponent(self) -> "Piece":
        return Piece.O if self is Piece.X else Piece.X


def opponent(piece: Piece) -> Piece:
    return piece.opponent()


class Outcome(Enum):
    X_WINS = "X"
    O_WINS = "O"
    TIE = "tie"
    UNDECIDED = "undecided"

    @classmethod
    def win_for(cls, piece: Piece) -> "Outcome":
        return cls.X_WINS if piece is Piece.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Piece]:
        if self is Outcome.X_WINS:
            return Piece.X
        if self is Outcome.O_WINS:
            return Piece.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.UNDECIDED


Cell = Optional[Piece]  # None is an empty square


def evaluate(cells: Sequence[Cell]) -> Outcome:
    """Return the outcome for ``cells`` without touching them.

    Lines are scanned rows first, then columns, then diagonals; the first
    uniformly occupied line decides the winner.
    """
    for a, b, c in WINNING_LINES:
        v = cells[a]
        if v is not None and v == cells[b] == cells[c]:
            return Outcome.win_for(v)
    if all(cell is not None for cell in cells):
        return Outcome.TIE
    return Outcome.UNDECIDED


# ---------- Board ----------


@dataclass
class Board:
    cells: List[Cell] = field(default_factory=lambda: [None] * NUM_SQUARES)

    def __post_init__(self) -> None:
        if len(self.cells) != NUM_SQUARES:
            raise ValueError(f"A board has exactly {NUM_SQUARES} cells")

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """Build a board from nine characters of ``X``, ``O`` and ``.``/space."""
        marks = layout.replace("\n", "").replace("|", "")
        if len(marks) != NUM_SQUARES:
            raise ValueError(f"Expected {NUM_SQUARES} cells, got {len(marks)}")
        cells: List[Cell] = []
        for ch in marks:
            if ch in (".", " ", "_"):
                cells.append(None)
            else:
                cells.append(Piece(ch.upper()))
        return cls(cells=cells)

    def is_legal(self, idx: int) -> bool:
        return 0 <= idx < NUM_SQUARES and self.cells[idx] is None

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c is None]

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def outcome(self) -> Outcome:
        return evaluate(self.cells)

    def place(self, piece: Piece, idx: int) -> None:
        if not 0 <= idx < NUM_SQUARES:
            raise ValueError(f"Cell index {idx} is out of range")
        if self.outcome().is_terminal:
            raise ValueError("Board already resolved")
        if self.cells[idx] is not None:
            raise ValueError("Cell already occupied")
        self.cells[idx] = piece

    def copy(self) -> "Board":
        return Board(cells=self.cells.copy())

    def render(self) -> str:
        """Draw the board as a tab-indented grid with separators."""
        marks = [c.value if c is not None else " " for c in self.cells]
        rows = [" | ".join(marks[i : i + 3]) for i in range(0, NUM_SQUARES, 3)]
        lines: List[str] = []
        for row in rows:
            lines.append(f"\t{row}")
            lines.append("\t---------")
        return "\n" + "\n".join(lines) + "\n"
