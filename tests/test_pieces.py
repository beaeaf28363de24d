import os
import sys
from string import ascii_letters

from hypothesis import given, strategies as st

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from chesspieces import (
    BOARD_LENGTH,
    ChessPiece,
    Placement,
    in_bounds,
    is_alphabetic,
    normalize_color,
)

letters = st.text(alphabet=ascii_letters)
on_board = st.integers(min_value=0, max_value=BOARD_LENGTH - 1)
off_board = st.one_of(st.integers(max_value=-1), st.integers(min_value=BOARD_LENGTH))


def test_default_piece():
    piece = ChessPiece()
    assert piece.get_color() == "BLACK"
    assert (piece.get_row(), piece.get_column()) == (-1, -1)
    assert not piece.is_moving_up()
    assert not piece.is_on_board()


def test_constructor_normalizes_color_and_keeps_square():
    piece = ChessPiece("white", 2, 4, True)
    assert piece.get_color() == "WHITE"
    assert (piece.get_row(), piece.get_column()) == (2, 4)
    assert piece.is_moving_up()


def test_empty_color_is_alphabetic():
    assert is_alphabetic("")
    assert ChessPiece("").get_color() == ""


def test_non_ascii_letters_are_rejected():
    assert not is_alphabetic("blé")
    assert normalize_color("blé") == "BLACK"


@given(letters)
def test_alphabetic_color_is_uppercased(color):
    assert ChessPiece(color).get_color() == color.upper()


@given(st.text(min_size=1).filter(lambda s: not is_alphabetic(s)))
def test_non_alphabetic_color_falls_back_to_black(color):
    assert ChessPiece(color, 0, 0).get_color() == "BLACK"


@given(st.one_of(
    st.tuples(off_board, st.integers()),
    st.tuples(st.integers(), off_board),
))
def test_any_out_of_range_coordinate_clears_both(square):
    row, column = square
    piece = ChessPiece("WHITE", row, column)
    assert (piece.get_row(), piece.get_column()) == (-1, -1)


@given(on_board, on_board)
def test_in_range_square_is_kept(row, column):
    piece = ChessPiece("WHITE", row, column)
    assert (piece.get_row(), piece.get_column()) == (row, column)
    assert in_bounds(row) and in_bounds(column)


def test_set_color():
    piece = ChessPiece("white", 1, 1)
    assert piece.set_color("abc123") is False
    assert piece.get_color() == "WHITE"
    assert piece.set_color("abc") is True
    assert piece.get_color() == "ABC"


def test_set_row_and_column_in_range_update_one_coordinate():
    piece = ChessPiece("WHITE", 3, 3)
    piece.set_row(5)
    assert (piece.get_row(), piece.get_column()) == (5, 3)
    piece.set_column(0)
    assert (piece.get_row(), piece.get_column()) == (5, 0)


def test_set_row_out_of_range_clears_column():
    piece = ChessPiece("WHITE", 3, 6)
    piece.set_row(BOARD_LENGTH)
    assert (piece.get_row(), piece.get_column()) == (-1, -1)


def test_set_column_out_of_range_clears_row():
    piece = ChessPiece("WHITE", 3, 6)
    piece.set_column(-2)
    assert (piece.get_row(), piece.get_column()) == (-1, -1)


def test_off_board_piece_placed_one_coordinate_at_a_time(capsys):
    piece = ChessPiece("WHITE")
    piece.set_row(4)
    assert (piece.get_row(), piece.get_column()) == (4, -1)
    assert not piece.is_on_board()
    piece.display()
    assert capsys.readouterr().out == "WHITE piece is not on the board\n"

    piece.set_column(7)
    assert (piece.get_row(), piece.get_column()) == (4, 7)
    assert piece.is_on_board()


def test_set_position_places_piece_in_one_step():
    piece = ChessPiece("WHITE")
    piece.set_position(4, 7)
    assert (piece.get_row(), piece.get_column()) == (4, 7)
    piece.set_position(4, 8)
    assert (piece.get_row(), piece.get_column()) == (-1, -1)


def test_invalid_row_clears_half_set_placement():
    placement = Placement()
    placement.set_column(3)
    assert (placement.row, placement.column) == (-1, 3)
    placement.set_row(BOARD_LENGTH)
    assert (placement.row, placement.column) == (-1, -1)


def test_placement_keeps_coordinates_together():
    placement = Placement(2, 9)
    assert (placement.row, placement.column) == (-1, -1)
    placement.place(0, 7)
    assert placement.on_board
    placement.clear()
    assert not placement.on_board


def test_set_moving_up():
    piece = ChessPiece()
    piece.set_moving_up(True)
    assert piece.is_moving_up()
    piece.set_moving_up(False)
    assert not piece.is_moving_up()


def test_display_on_board(capsys):
    ChessPiece("BLACK", 2, 4, True).display()
    assert capsys.readouterr().out == "BLACK piece at (2,4) is moving UP\n"


def test_display_moving_down(capsys):
    ChessPiece("white", 0, 7).display()
    assert capsys.readouterr().out == "WHITE piece at (0,7) is moving DOWN\n"


def test_display_off_board(capsys):
    ChessPiece("WHITE", -1, 3).display()
    assert capsys.readouterr().out == "WHITE piece is not on the board\n"


def test_repr():
    assert repr(ChessPiece("red", 1, 2)) == (
        "Piece(color='RED', row=1, column=2, moving_up=False)"
    )
