"""
Four-in-a-row on a 6x7 board with gravity.
Teaching notes:
- A cell is playable only on the bottom row or directly above an occupied cell, so the
  board itself enforces gravity.
- Humans only choose a column; the UI finds the landing row.
"""
from __future__ import annotations

from typing import Optional

from ..game_basics import LineBoard, Move, Player
from ..ui import ConsoleUI, parse_ints


class ConnectFourBoard(LineBoard):
    supports_erase = False
    win_length = 4

    def __init__(self, empty_marker: str = ".") -> None:
        super().__init__(6, 7, empty_marker)

    def is_playable(self, row: int, col: int) -> bool:
        return row == self.rows - 1 or not self.is_empty(row + 1, col)

    def drop_row(self, col: int) -> Optional[int]:
        for r in reversed(range(self.rows)):
            if self.is_empty(r, col):
                return r
        return None


class ConnectFourUI(ConsoleUI):
    title = "Four-in-a-row"
    n_slots = 4

    def human_move(self, player: Player) -> Move:
        board = self.board_of(player)
        last = board.get_columns() - 1
        while True:
            raw = self.ask(f"{player.get_name()} ({player.get_symbol()}), choose a column (0-{last}): ")
            try:
                (col,) = parse_ints(raw, 1)
            except ValueError:
                print("Invalid input! Please enter a column number.")
                continue
            if not 0 <= col <= last:
                print("Out of range. Try again.")
                continue
            row = board.drop_row(col)
            if row is None:
                print(f"Column {col} is full. Try again.")
                continue
            return Move(row, col, player.get_symbol())
