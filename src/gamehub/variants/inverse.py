"""
Inverse (misère) X-O: completing three of your own marks in a row loses.
Teaching notes:
- is_win for a player means the *opponent* owns a line; is_lose means the player does.
- The computer prefers cells that complete nothing for itself (see tactics.safe_cells).
- A human about to complete their own line is warned and asked to confirm.
"""
from __future__ import annotations

from typing import Sequence

from ..game_basics import Board, Move, Player, opponent_symbol
from ..tactics import safe_cells, would_complete_line
from ..ui import ConsoleUI


class InverseBoard(Board[str]):
    supports_erase = False

    def __init__(self, symbols: Sequence[str] = ("X", "O"), empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)
        self.symbols = tuple(symbols)

    def accepts(self, move: Move[str]) -> bool:
        return move.symbol in self.symbols

    def is_win(self, player: Player[str]) -> bool:
        return self.has_line(opponent_symbol(self.symbols, player.get_symbol()))

    def is_lose(self, player: Player[str]) -> bool:
        return self.has_line(player.get_symbol())

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and not any(self.has_line(s) for s in self.symbols)


class InverseUI(ConsoleUI):
    title = "Inverse X-O: whoever completes three in a row loses"

    def computer_move(self, player: Player) -> Move:
        board = self.board_of(player)
        options = safe_cells(board, player.get_symbol()) or board.empty_cells()
        row, col = self.pick(options)
        return Move(row, col, player.get_symbol())

    def human_move(self, player: Player) -> Move:
        board = self.board_of(player)
        symbol = player.get_symbol()
        while True:
            row, col = self.read_coordinates(player)
            if not board.is_empty(row, col):
                print("That cell is already taken. Try again.")
                continue
            if would_complete_line(board, symbol, (row, col)):
                print(f"Warning: ({row}, {col}) completes three {symbol}s in a row and you will lose!")
                if not self.ask_yes_no("Make this move anyway? (y/n): "):
                    print("Choose a different move.")
                    continue
            return Move(row, col, symbol)
