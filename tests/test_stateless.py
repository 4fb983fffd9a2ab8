from pincerhex.bot import compute_move, pack_tile, unpack_player_move
from pincerhex.core import SWAP_SENTINEL, Board, Colour, PieceState, Tile


def compressed_with(size, black=(), white=()) -> str:
    board = Board(size)
    for row, col in black:
        board.set_tile(Tile.regular(row, col), PieceState.BLACK)
    for row, col in white:
        board.set_tile(Tile.regular(row, col), PieceState.WHITE)
    return board.get_compressed()


def test_pack_and_unpack() -> None:
    assert pack_tile(3, 4) == 0x0304
    assert unpack_player_move(0x0907) == (9, 7)


def test_opening_lands_near_a_corner() -> None:
    for seed in range(10):
        packed = compute_move(compressed_with(10), Colour.BLACK, Colour.BLACK, 0, 0, seed)
        row, col = unpack_player_move(packed)
        near_origin = row < 4 and col < 4
        near_far_corner = row >= 6 and col >= 6
        assert near_origin or near_far_corner


def test_central_opening_is_swapped() -> None:
    board = compressed_with(10, black=[(4, 4)])
    packed = compute_move(board, Colour.WHITE, Colour.BLACK, pack_tile(4, 4), 1, 7)
    assert packed == SWAP_SENTINEL


def test_corner_opening_is_answered() -> None:
    board = compressed_with(10, black=[(0, 0)])
    packed = compute_move(board, Colour.WHITE, Colour.BLACK, pack_tile(0, 0), 1, 7)
    assert packed != SWAP_SENTINEL
    row, col = unpack_player_move(packed)
    assert (row, col) != (0, 0)
    assert 0 <= row < 10 and 0 <= col < 10


def test_same_seed_same_move() -> None:
    board = compressed_with(6, black=[(2, 2), (3, 3)], white=[(2, 3)])
    first = compute_move(board, Colour.WHITE, Colour.BLACK, pack_tile(3, 3), 2, 11)
    second = compute_move(board, Colour.WHITE, Colour.BLACK, pack_tile(3, 3), 2, 11)
    assert first == second
    row, col = unpack_player_move(first)
    assert Board.from_compressed(board).get(row, col) == PieceState.EMPTY
