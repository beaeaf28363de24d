from __future__ import annotations

from chesspieces.pieces import DEFAULT_COLOR, OFF_BOARD, ChessPiece, ChessPieceType

DEFAULT_CASTLE_MOVES: int = 3


class Rook(ChessPiece):
    type = ChessPieceType.ROOK

    def __init__(
        self,
        color: str = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
        castle_moves: int = DEFAULT_CASTLE_MOVES,
    ) -> None:
        super().__init__(color, row, column, moving_up)
        self._castle_moves_left = max(0, castle_moves)

    def get_castle_moves_left(self) -> int:
        return self._castle_moves_left

    def can_castle(self, other: ChessPiece) -> bool:
        """Return True if this rook may castle with *other*.

        Requires castle moves left, matching colours, both pieces on the
        board, the same row and columns at most one apart. A piece on the
        same square (including the rook itself) passes the distance check.
        """
        if self._castle_moves_left <= 0:
            return False
        if self.get_color() != other.get_color():
            return False
        if not (self.is_on_board() and other.is_on_board()):
            return False
        if self.get_row() != other.get_row():
            return False
        return abs(self.get_column() - other.get_column()) <= 1

    def _repr_fields(self) -> str:
        return f"{super()._repr_fields()}, castle_moves_left={self._castle_moves_left}"
