from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar

from chesspieces import DEFAULT_CASTLE_MOVES, OFF_BOARD, ChessPiece, Pawn, Rook

T = TypeVar("T")

PIECE_KINDS = ("piece", "pawn", "rook")


def parse_square(text: str) -> Tuple[int, int]:
    """Parse ``"row,col"`` into a tuple. Blank input means off the board."""
    text = text.strip()
    if not text:
        return OFF_BOARD, OFF_BOARD
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"cannot parse square: {text}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"cannot parse square: {text}") from None


def parse_castle_moves(text: str) -> int:
    text = text.strip()
    if not text:
        return DEFAULT_CASTLE_MOVES
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"cannot parse castle moves: {text}") from None


def parse_yes_no(text: str) -> bool:
    return text.strip().lower().startswith("y")


def build_piece(
    kind: str,
    color: str,
    square: Tuple[int, int],
    moving_up: bool,
    extra: Optional[int | bool] = None,
) -> ChessPiece:
    row, column = square
    if kind == "piece":
        return ChessPiece(color, row, column, moving_up)
    if kind == "pawn":
        return Pawn(color, row, column, moving_up, bool(extra))
    if kind == "rook":
        castle_moves = DEFAULT_CASTLE_MOVES if extra is None else int(extra)
        return Rook(color, row, column, moving_up, castle_moves)
    raise ValueError(f"unknown piece type: {kind}")


def ask(prompt: str, parse: Callable[[str], T]) -> T:
    while True:
        try:
            return parse(input(prompt))
        except ValueError as exc:
            print(exc)


def main() -> None:
    kind = input("Piece type (piece/pawn/rook)? ").strip().lower()
    while kind not in PIECE_KINDS:
        print(f"Unknown piece type '{kind}'")
        kind = input("Piece type (piece/pawn/rook)? ").strip().lower()
    color = input("Color? ").strip()
    square = ask("Square (row,col or blank for off-board)? ", parse_square)
    moving_up = parse_yes_no(input("Moving up (y/n)? "))

    extra: Optional[int | bool] = None
    if kind == "pawn":
        extra = parse_yes_no(input("Double jump (y/n)? "))
    elif kind == "rook":
        extra = ask("Castle moves? ", parse_castle_moves)

    piece = build_piece(kind, color, square, moving_up, extra)
    piece.display()

    if isinstance(piece, Pawn):
        print(f"Can promote: {piece.can_promote()}")
    elif isinstance(piece, Rook):
        partner_color = input("Partner color (blank for same)? ").strip()
        partner_square = ask("Partner square (row,col)? ", parse_square)
        partner = ChessPiece(partner_color or piece.get_color(), *partner_square)
        print(f"Can castle: {piece.can_castle(partner)}")


if __name__ == "__main__":
    main()
