from chesspieces.pieces import (
    BOARD_LENGTH,
    DEFAULT_COLOR,
    OFF_BOARD,
    ChessPiece,
    ChessPieceType,
    Placement,
    in_bounds,
    is_alphabetic,
    normalize_color,
)
from chesspieces.pawn import Pawn
from chesspieces.rook import DEFAULT_CASTLE_MOVES, Rook

__all__ = [
    "BOARD_LENGTH",
    "DEFAULT_CASTLE_MOVES",
    "DEFAULT_COLOR",
    "OFF_BOARD",
    "ChessPiece",
    "ChessPieceType",
    "Pawn",
    "Placement",
    "Rook",
    "in_bounds",
    "is_alphabetic",
    "normalize_color",
]
