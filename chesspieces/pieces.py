# =========================== file: pieces.py ============================
"""ChessPiece: colour, square and direction of a single piece, with the
validation rules shared by every piece type."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import ascii_letters

BOARD_LENGTH: int = 8
DEFAULT_COLOR: str = "BLACK"
OFF_BOARD: int = -1


class ChessPieceType(Enum):
    PIECE = "Piece"
    PAWN = "Pawn"
    ROOK = "Rook"


def is_alphabetic(text: str) -> bool:
    """Return True if every character of *text* is an ASCII letter.

    The empty string passes: it has no character that breaks the rule.
    """
    return all(c in ascii_letters for c in text)


def normalize_color(color: str) -> str:
    """Uppercase *color*, or fall back to ``DEFAULT_COLOR`` if it is not
    purely alphabetic."""
    return color.upper() if is_alphabetic(color) else DEFAULT_COLOR


def in_bounds(index: int) -> bool:
    return 0 <= index < BOARD_LENGTH


@dataclass
class Placement:
    """Row/column pair of a piece. Any out-of-range coordinate clears
    both to ``OFF_BOARD``. Setting one coordinate alone can leave the
    pair half set, e.g. ``(4, -1)``, which still counts as off the board."""

    row: int = OFF_BOARD
    column: int = OFF_BOARD

    def __post_init__(self) -> None:
        self.place(self.row, self.column)

    def place(self, row: int, column: int) -> None:
        if in_bounds(row) and in_bounds(column):
            self.row = row
            self.column = column
        else:
            self.clear()

    def set_row(self, row: int) -> None:
        if in_bounds(row):
            self.row = row
        else:
            self.clear()

    def set_column(self, column: int) -> None:
        if in_bounds(column):
            self.column = column
        else:
            self.clear()

    def clear(self) -> None:
        self.row = OFF_BOARD
        self.column = OFF_BOARD

    @property
    def on_board(self) -> bool:
        return self.row != OFF_BOARD and self.column != OFF_BOARD


class ChessPiece:
    type: ChessPieceType = ChessPieceType.PIECE

    def __init__(
        self,
        color: str = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
    ) -> None:
        # invalid colours are replaced here but rejected by set_color
        self._color = normalize_color(color)
        self._placement = Placement(row, column)
        self._moving_up = moving_up

    # colour -----------------------------------------------------------
    def get_color(self) -> str:
        return self._color

    def set_color(self, color: str) -> bool:
        """Store *color* uppercased. Returns False and keeps the current
        colour if it contains anything but letters."""
        if not is_alphabetic(color):
            return False
        self._color = color.upper()
        return True

    # position ---------------------------------------------------------
    def get_row(self) -> int:
        return self._placement.row

    def get_column(self) -> int:
        return self._placement.column

    def set_row(self, row: int) -> None:
        """Move to *row*, keeping the column. An out-of-range row takes
        the piece off the board."""
        self._placement.set_row(row)

    def set_column(self, column: int) -> None:
        """Move to *column*, keeping the row. An out-of-range column takes
        the piece off the board."""
        self._placement.set_column(column)

    def set_position(self, row: int, column: int) -> None:
        self._placement.place(row, column)

    def is_on_board(self) -> bool:
        return self._placement.on_board

    # direction --------------------------------------------------------
    def is_moving_up(self) -> bool:
        return self._moving_up

    def set_moving_up(self, moving_up: bool) -> None:
        self._moving_up = moving_up

    # output -----------------------------------------------------------
    def display(self) -> None:
        print(self)

    def _repr_fields(self) -> str:
        return (
            f"color={self._color!r}, row={self.get_row()}, "
            f"column={self.get_column()}, moving_up={self._moving_up}"
        )

    def __str__(self) -> str:
        if not self.is_on_board():
            return f"{self._color} piece is not on the board"
        direction = "UP" if self._moving_up else "DOWN"
        return (
            f"{self._color} piece at ({self.get_row()},{self.get_column()}) "
            f"is moving {direction}"
        )

    def __repr__(self) -> str:
        return f"{self.type.value}({self._repr_fields()})"
