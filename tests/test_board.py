import numpy as np
import pytest

from pincerhex.core import Board, NotInRangeError, PieceState, Tile


def test_empty_board_compressed() -> None:
    assert Board(4).get_compressed() == "....|....|....|....|"


def test_board_size_limits() -> None:
    with pytest.raises(ValueError):
        Board(0)
    with pytest.raises(ValueError):
        Board(128)


def test_pretty_output() -> None:
    board = Board(4)
    for row, col in [(0, 0), (1, 1), (2, 2), (3, 3)]:
        board.set_tile(Tile.regular(row, col), PieceState.BLACK)
    for row, col in [(1, 2), (3, 0), (3, 2)]:
        board.set_tile(Tile.regular(row, col), PieceState.WHITE)

    expected = "B . . . \n . B W . \n  . . B . \n   W . W B \n------------------"
    assert board.get_pretty() == expected
    assert str(board) == expected
    assert board.get_compressed() == "B...|.BW.|..B.|W.WB|"


def test_from_compressed_round_trip() -> None:
    board = Board.from_compressed("B..|.W.|..B|")
    assert board.size == 3
    assert board.get(1, 1) == PieceState.WHITE
    assert board.get_compressed() == "B..|.W.|..B|"
    with pytest.raises(ValueError):
        Board.from_compressed("B..|.W|")


def test_set_tile_out_of_range() -> None:
    board = Board(3)
    with pytest.raises(NotInRangeError):
        board.set_tile(Tile.regular(3, 0), PieceState.BLACK)
    assert board.get(3, 0) is None
    assert board.get(-1, 0) is None


def test_corner_neighbours() -> None:
    board = Board(3)
    board.set_tile(Tile.regular(0, 1), PieceState.WHITE)
    neighbours = board.neighbours(Tile.regular(0, 0))
    assert len(neighbours) == 6
    assert neighbours[0] == (Tile.regular(0, 1), PieceState.WHITE)
    assert neighbours[1] == (Tile.regular(1, 0), PieceState.EMPTY)
    assert neighbours[2:] == (None, None, None, None)


def test_iteration_orders() -> None:
    board = Board(3)
    forward = [tile for tile, _ in board]
    backward = [tile for tile, _ in board.iter_reversed()]
    assert forward[0] == Tile.regular(0, 0)
    assert backward[0] == Tile.regular(2, 2)
    assert backward == list(reversed(forward))


def test_swap_pieces_mirrors_and_recolours() -> None:
    board = Board(3)
    board.set_tile(Tile.regular(0, 1), PieceState.BLACK)
    board.set_tile(Tile.regular(2, 0), PieceState.WHITE)
    board.swap_pieces()

    assert board.get(1, 0) == PieceState.WHITE
    assert board.get(0, 2) == PieceState.BLACK
    assert board.stone_count() == 2
    assert board.cells.dtype == np.int8


def test_empty_tiles_and_copy() -> None:
    board = Board(2)
    board.set_tile(Tile.regular(0, 0), PieceState.BLACK)
    clone = board.copy()
    clone.set_tile(Tile.regular(1, 1), PieceState.WHITE)

    assert board.empty_tiles() == [Tile.regular(0, 1), Tile.regular(1, 0), Tile.regular(1, 1)]
    assert board != clone
    assert board.index_to_tile(4).is_regular is False


def test_compressed_round_trip_random_boards() -> None:
    rng = np.random.default_rng(3)
    for size in (1, 2, 5, 11):
        for _ in range(5):
            board = Board(size)
            board.cells = rng.integers(0, 3, size * size).astype(np.int8)
            assert Board.from_compressed(board.get_compressed()) == board
