"""
Diamond X-O: a 13-cell diamond cut from a 5x5 grid.
Teaching notes:
- A cell belongs to the diamond when its Manhattan distance from the centre is at most 2.
- To win, a player needs both a line of three and a line of four, lying in different
  directions. They may share a mark.
"""
from __future__ import annotations

from typing import Sequence, Set

from ..game_basics import Board, Player
from ..ui import ConsoleUI


def in_diamond(row: int, col: int, size: int = 5) -> bool:
    centre = size // 2
    return abs(row - centre) + abs(col - centre) <= centre


class DiamondBoard(Board[str]):
    supports_erase = False

    def __init__(self, symbols: Sequence[str] = ("X", "O"), empty_marker: str = ".") -> None:
        super().__init__(5, 5, empty_marker)
        self.symbols = tuple(symbols)
        self.cell_count = sum(
            1 for r in range(self.rows) for c in range(self.columns) if self.in_shape(r, c)
        )

    def in_shape(self, row: int, col: int) -> bool:
        return in_diamond(row, col, self.rows)

    def line_directions(self, symbol: str, length: int) -> Set[int]:
        return {
            line.direction
            for line in self.lines(length)
            if all(v == symbol for v in self.line_values(line.cells))
        }

    def symbol_wins(self, symbol: str) -> bool:
        threes = self.line_directions(symbol, 3)
        fours = self.line_directions(symbol, 4)
        return any(d3 != d4 for d3 in threes for d4 in fours)

    def is_win(self, player: Player[str]) -> bool:
        return self.symbol_wins(player.get_symbol())

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        return self.n_moves >= self.cell_count and not any(self.symbol_wins(s) for s in self.symbols)


class DiamondUI(ConsoleUI):
    title = "Diamond X-O: make a three and a four in different directions"

    def render_cell(self, value, row: int, col: int) -> str:
        return str(value) if in_diamond(row, col) else " "
