from __future__ import annotations

from chesspieces.pieces import (
    BOARD_LENGTH,
    DEFAULT_COLOR,
    OFF_BOARD,
    ChessPiece,
    ChessPieceType,
)


class Pawn(ChessPiece):
    type = ChessPieceType.PAWN

    def __init__(
        self,
        color: str = DEFAULT_COLOR,
        row: int = OFF_BOARD,
        column: int = OFF_BOARD,
        moving_up: bool = False,
        double_jumpable: bool = False,
    ) -> None:
        super().__init__(color, row, column, moving_up)
        self._double_jumpable = double_jumpable

    def can_double_jump(self) -> bool:
        return self._double_jumpable

    def toggle_double_jump(self) -> None:
        self._double_jumpable = not self._double_jumpable

    def can_promote(self) -> bool:
        """True once the pawn stands on the last row in its direction of
        travel. Off-board pawns (row -1) never qualify."""
        if self.is_moving_up():
            return self.get_row() == BOARD_LENGTH - 1
        return self.get_row() == 0

    def _repr_fields(self) -> str:
        return f"{super()._repr_fields()}, double_jumpable={self._double_jumpable}"
