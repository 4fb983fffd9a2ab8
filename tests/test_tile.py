import pytest

from pincerhex.core import (
    EDGE1,
    EDGE2,
    INVALID,
    SWAP_SENTINEL,
    Colour,
    InvalidColError,
    InvalidColourError,
    InvalidRowError,
    Move,
    PieceState,
    Tile,
)


def test_parse_corner_notation() -> None:
    assert Tile.parse("a1") == Tile.regular(0, 0)
    assert Tile.parse("j10") == Tile.regular(9, 9)
    assert str(Tile.regular(9, 9)) == "j10"


def test_parse_rejects_bad_row() -> None:
    with pytest.raises(InvalidRowError):
        Tile.parse("")
    with pytest.raises(InvalidRowError):
        Tile.parse("A1")


def test_parse_rejects_bad_col() -> None:
    for text in ("a", "ax", "a1x", "a-1"):
        with pytest.raises(InvalidColError) as excinfo:
            Tile.parse(text)
        assert str(excinfo.value) == "invalid col"


def test_regular_tiles_sort_before_sentinels() -> None:
    tiles = sorted([INVALID, EDGE2, Tile.regular(4, 4), EDGE1, Tile.regular(0, 7)])
    assert tiles == [Tile.regular(0, 7), Tile.regular(4, 4), EDGE1, EDGE2, INVALID]


def test_edge_coordinate_depends_on_colour() -> None:
    tile = Tile.regular(2, 5)
    assert tile.edge(Colour.BLACK) == 2
    assert tile.edge(Colour.WHITE) == 5
    with pytest.raises(RuntimeError):
        EDGE1.edge(Colour.BLACK)


def test_neighbour_of_sentinel_is_invalid() -> None:
    assert EDGE2.neighbour(0, 1) == INVALID
    assert Tile.regular(1, 1).neighbour(-1, 1) == Tile.regular(0, 2)


def test_to_index_bounds() -> None:
    assert Tile.regular(1, 2).to_index(4) == 6
    assert Tile.regular(4, 0).to_index(4) is None
    assert Tile.regular(0, -1).to_index(4) is None
    assert EDGE1.to_index(4) is None


def test_colour_helpers() -> None:
    assert Colour.parse("w") == Colour.WHITE
    assert Colour.parse("Black") == Colour.BLACK
    assert Colour.BLACK.opponent() == Colour.WHITE
    assert f"{Colour.WHITE}" == "White"
    with pytest.raises(InvalidColourError):
        Colour.parse("red")


def test_piece_state_chars() -> None:
    assert PieceState.from_char("W") == PieceState.WHITE
    assert PieceState.BLACK.to_char() == "B"
    assert PieceState.EMPTY.colour is None
    assert PieceState.of(Colour.WHITE).colour == Colour.WHITE
    with pytest.raises(ValueError):
        PieceState.from_char("x")


def test_move_packing() -> None:
    assert Move.swap().pack() == SWAP_SENTINEL
    assert Move(Tile.regular(3, 4)).pack() == 0x0304
    assert Move.unpack(0x0907) == Move(Tile.regular(9, 7))
    assert Move.unpack(SWAP_SENTINEL).is_swap
    assert str(Move.swap()) == "swap"
    assert str(Move(Tile.regular(1, 2))) == "b3"


def test_notation_round_trip_on_ten_board() -> None:
    for row in range(10):
        for col in range(10):
            tile = Tile.regular(row, col)
            assert Tile.parse(str(tile)) == tile
    assert Colour.WHITE.opponent().opponent() == Colour.WHITE
