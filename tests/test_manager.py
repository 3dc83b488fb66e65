import numpy as np
import pytest

from gamehub.game_basics import LineBoard, Move, Player, PlayerType
from gamehub.manager import GameManager, Outcome, resolve_outcome
from gamehub.ui import ConsoleUI, ScriptedInput
from gamehub.variants.classic import ClassicBoard, ClassicUI
from gamehub.variants.inverse import InverseBoard, InverseUI
from gamehub.variants.sliding import SlidingBoard, SlidingUI


def _humans(ui):
    return ui.build_players(["Ann", "Bob"], [PlayerType.HUMAN, PlayerType.HUMAN])


def test_scripted_match_ends_with_win(capsys):
    ui = ClassicUI(ScriptedInput(["0 0", "1 0", "0 1", "1 1", "0 2"]))
    board = ClassicBoard()
    result = GameManager(board, _humans(ui), ui).run()
    assert result.outcome is Outcome.WIN
    assert result.winner.get_name() == "Ann"
    assert result.turns == 5
    assert "Ann wins!" in capsys.readouterr().out


def test_rejected_move_does_not_pass_turn(capsys):
    # Bob first tries Ann's cell, then a free one
    ui = ClassicUI(ScriptedInput(["0 0", "0 0", "1 1"]))
    board = ClassicBoard()
    manager = GameManager(board, _humans(ui), ui)
    assert manager.play_turn() is None
    assert manager.current_player_index == 1
    assert manager.play_turn() is None
    assert manager.current_player_index == 0
    assert manager.rejected == 1
    assert board.get_cell(1, 1) == "O"
    assert "Invalid move, try again." in capsys.readouterr().out


def test_malformed_input_reprompts_in_ui(capsys):
    source = ScriptedInput(["hello", "7 7", "1", "2 2"])
    ui = ClassicUI(source)
    board = ClassicBoard()
    manager = GameManager(board, _humans(ui), ui)
    manager.play_turn()
    out = capsys.readouterr().out
    assert "Invalid input!" in out
    assert "Out of range." in out
    assert board.get_cell(2, 2) == "X"
    assert len(source.prompts) == 4
    assert manager.rejected == 0


class _WinAndDrawBoard(LineBoard):
    """Reports a draw on every full board, even one holding a line."""

    def __init__(self):
        super().__init__(3, 3)

    def is_draw(self, player):
        return self.is_full()


def test_win_takes_precedence_over_draw():
    board = _WinAndDrawBoard()
    # X O X / O X O / O X X  -> X owns the main diagonal on a full board
    moves = [(0, 0, "X"), (0, 1, "O"), (0, 2, "X"), (1, 0, "O"), (1, 1, "X"),
             (1, 2, "O"), (2, 0, "O"), (2, 1, "X"), (2, 2, "X")]
    for r, c, s in moves:
        assert board.update_board(Move(r, c, s))
    x = Player("X", "X", PlayerType.HUMAN)
    assert board.is_draw(x) and board.is_win(x)
    assert resolve_outcome(board, x) is Outcome.WIN


def test_inverse_match_reports_loss(capsys):
    # Ann confirms a move that completes her own row
    ui = InverseUI(ScriptedInput(["0 0", "1 1", "0 1", "2 2", "0 2", "y"]))
    result = GameManager(InverseBoard(), _humans(ui), ui).run()
    assert result.outcome is Outcome.LOSE
    assert result.loser.get_name() == "Ann"
    assert result.winner.get_name() == "Bob"
    out = capsys.readouterr().out
    assert "Warning" in out
    assert "Ann loses! Bob wins!" in out


def test_inverse_confirmation_declined_asks_again():
    source = ScriptedInput(["0 0", "1 1", "0 1", "2 2", "0 2", "n", "2 0"])
    ui = InverseUI(source, quiet=True)
    board = InverseBoard()
    manager = GameManager(board, _humans(ui), ui)
    for _ in range(5):
        assert manager.play_turn() is None
    assert board.get_cell(0, 2) == "."
    assert board.get_cell(2, 0) == "X"
    assert source.remaining == 0


def test_max_turns_stops_unfinished_match():
    rng = np.random.default_rng(1)
    ui = SlidingUI(ScriptedInput([]), rng, quiet=True)
    players = ui.build_players(["A", "B"], [PlayerType.COMPUTER, PlayerType.COMPUTER])
    result = GameManager(SlidingBoard(), players, ui).run(max_turns=0)
    assert result.outcome is Outcome.UNFINISHED
    assert result.turns == 0
    assert result.winner is None


def test_computer_match_completes():
    rng = np.random.default_rng(42)
    ui = ConsoleUI(ScriptedInput([]), rng, quiet=True)
    players = ui.build_players(["A", "B"], [PlayerType.COMPUTER, PlayerType.COMPUTER])
    board = ClassicBoard()
    result = GameManager(board, players, ui).run()
    assert result.outcome in (Outcome.WIN, Outcome.DRAW)
    assert result.rejected == 0
    assert result.turns == board.get_move_count()


def test_manager_requires_two_players():
    ui = ClassicUI(ScriptedInput([]))
    with pytest.raises(ValueError):
        GameManager(ClassicBoard(), [Player("solo", "X", PlayerType.HUMAN)], ui)


def test_player_cannot_join_two_boards():
    p = Player("A", "X", PlayerType.HUMAN)
    p.attach(ClassicBoard())
    with pytest.raises(ValueError):
        p.attach(ClassicBoard())
