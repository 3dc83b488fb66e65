import numpy as np
import pytest

from gamehub.game_basics import ERASE, Move, Player, PlayerType
from gamehub.variants import VARIANTS, build_match

WORDS = frozenset({"CAT", "DOG", "SUN"})
STARTS_POPULATED = {"sliding"}


def _board(key: str):
    board, _ = build_match(key, rng=np.random.default_rng(0), words=WORDS, quiet=True)
    return board


@pytest.mark.parametrize("key", sorted(set(VARIANTS) - STARTS_POPULATED))
def test_fresh_board_is_empty(key: str):
    b = _board(key)
    assert b.get_move_count() == 0
    m = b.get_board_matrix()
    for r in range(b.get_rows()):
        for c in range(b.get_columns()):
            assert m[r, c] == b.empty_marker


def test_sliding_board_starts_with_tokens():
    b = _board("sliding")
    assert b.get_move_count() == 0
    assert list(b.get_board_matrix()[0]) == ["O", "X", "O", "X"]
    assert list(b.get_board_matrix()[3]) == ["X", "O", "X", "O"]


@pytest.mark.parametrize("key", sorted(VARIANTS))
def test_out_of_range_moves_rejected(key: str):
    b = _board(key)
    before = b.get_board_matrix()
    for row, col in [(-1, 0), (0, -1), (b.get_rows(), 0), (0, b.get_columns()), (99, 99)]:
        assert b.update_board(Move(row, col, "X")) is False
    assert np.array_equal(before, b.get_board_matrix())
    assert b.get_move_count() == 0


@pytest.mark.parametrize("key", sorted(VARIANTS))
def test_matrix_snapshot_is_read_only(key: str):
    b = _board(key)
    m = b.get_board_matrix()
    with pytest.raises(ValueError):
        m[0, 0] = "Z"


@pytest.mark.parametrize("key", sorted(VARIANTS))
def test_fresh_board_is_not_over(key: str):
    b = _board(key)
    for symbol in ("X", "O"):
        p = Player("P", symbol, PlayerType.HUMAN)
        assert not b.game_is_over(p)


@pytest.mark.parametrize("key", ["classic", "five", "word", "memory"])
def test_occupied_target_rejected_twice(key: str):
    b = _board(key)
    symbol = "C" if key == "word" else "X"
    row, col = b.empty_cells()[0]
    assert b.update_board(Move(row, col, symbol))
    snapshot = b.get_board_matrix()
    again = Move(row, col, "O")
    assert b.update_board(again) is False
    assert b.update_board(again) is False
    assert np.array_equal(snapshot, b.get_board_matrix())
    assert b.get_move_count() == 1


@pytest.mark.parametrize("key", sorted(VARIANTS))
def test_erase_of_empty_cell_rejected(key: str):
    b = _board(key)
    row, col = b.empty_cells()[0]
    assert b.update_board(Move(row, col, ERASE)) is False
    assert b.get_move_count() == 0


@pytest.mark.parametrize("key", ["inverse", "infinity", "ultimate", "connect4", "pyramid", "diamond"])
def test_erase_rejected_where_unsupported(key: str):
    b = _board(key)
    row, col = b.empty_cells()[0]
    assert b.update_board(Move(row, col, "X"))
    assert b.update_board(Move(row, col, ERASE)) is False
    assert b.get_move_count() == 1


def test_erase_undoes_placement():
    b = _board("classic")
    assert b.update_board(Move(1, 1, "X"))
    assert b.update_board(Move(1, 1, ERASE))
    assert b.get_move_count() == 0
    assert b.get_cell(1, 1) == "."
    # Nothing left to erase
    assert b.update_board(Move(1, 1, ERASE)) is False


def test_get_cell_out_of_range_raises():
    b = _board("classic")
    with pytest.raises(IndexError):
        b.get_cell(3, 0)


@pytest.mark.parametrize("key", sorted(VARIANTS))
def test_empty_marker_is_not_a_placement(key: str):
    b = _board(key)
    row, col = b.empty_cells()[0]
    before = b.get_board_matrix()
    for _ in range(3):
        assert b.update_board(Move(row, col, b.empty_marker)) is False
    assert b.get_move_count() == 0
    assert np.array_equal(before, b.get_board_matrix())
