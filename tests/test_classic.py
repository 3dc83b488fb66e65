import numpy as np

from gamehub.game_basics import Move, Player, PlayerType
from gamehub.variants.classic import ClassicBoard, MemoryUI

X = Player("Xena", "X", PlayerType.HUMAN)
O = Player("Otto", "O", PlayerType.HUMAN)


def _play(board, moves):
    for r, c, s in moves:
        assert board.update_board(Move(r, c, s))


def test_top_row_wins_after_five_moves():
    b = ClassicBoard()
    _play(b, [(0, 0, "X"), (1, 0, "O"), (0, 1, "X"), (1, 1, "O"), (0, 2, "X")])
    assert b.is_win(X)
    assert not b.is_win(O)
    assert b.get_move_count() == 5
    assert b.game_is_over(X)


def test_occupied_cell_rejected_without_change():
    b = ClassicBoard()
    _play(b, [(0, 0, "X")])
    before = b.get_board_matrix()
    assert b.update_board(Move(0, 0, "O")) is False
    assert np.array_equal(before, b.get_board_matrix())
    assert b.get_move_count() == 1


def test_full_board_without_line_is_draw_for_both():
    b = ClassicBoard()
    # X O X / X O O / O X X
    _play(b, [
        (0, 0, "X"), (0, 1, "O"), (0, 2, "X"),
        (1, 1, "O"), (1, 0, "X"), (1, 2, "O"),
        (2, 1, "X"), (2, 0, "O"), (2, 2, "X"),
    ])
    for p in (X, O):
        assert b.is_draw(p)
        assert not b.is_win(p)
        assert not b.is_lose(p)


def test_out_of_range_row_rejected():
    b = ClassicBoard()
    assert b.update_board(Move(5, 0, "X")) is False
    assert b.get_move_count() == 0
    assert all(v == "." for v in b.get_board_matrix().flat)


def test_diagonals_win():
    b = ClassicBoard()
    _play(b, [(0, 2, "O"), (1, 1, "O"), (2, 0, "O")])
    assert b.is_win(O)
    assert not b.is_win(X)


def test_memory_ui_hides_marks():
    ui = MemoryUI(quiet=True)
    b = ClassicBoard()
    _play(b, [(0, 0, "X"), (2, 2, "O")])
    text = ui.render(b.get_board_matrix())
    assert "X" not in text and "O" not in text
    assert text.count("#") == 2
