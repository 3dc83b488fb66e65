"""
Ultimate X-O: a 9x9 board made of nine 3x3 sub-boards, won on the 3x3 meta-board.
Teaching notes:
- Winning a line inside a sub-board claims that sub-board on the meta-board; filling it
  without a line marks it 'D'. Decided sub-boards are closed to further play.
- A player wins with a line of claimed sub-boards and loses when the opponent has one.
- The match is drawn once every sub-board is decided and neither side owns a meta-line.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..game_basics import Board, Coord, Move, Player, line_windows, opponent_symbol
from ..ui import ConsoleUI

TRIPLES: List[Sequence[Coord]] = [line.cells for line in line_windows(3, 3, 3)]


def line_owner(grid: np.ndarray, empty_marker, ignore=()) -> Optional[str]:
    """Symbol holding a complete line of a 3x3 grid, if any."""
    for cells in TRIPLES:
        first = grid[cells[0]]
        if first == empty_marker or first in ignore:
            continue
        if all(grid[cell] == first for cell in cells):
            return first
    return None


class UltimateBoard(Board[str]):
    supports_erase = False
    draw_marker = "D"

    def __init__(self, symbols: Sequence[str] = ("X", "O"), empty_marker: str = ".") -> None:
        super().__init__(9, 9, empty_marker)
        self.symbols = tuple(symbols)
        self.meta = np.full((3, 3), empty_marker, dtype=object)

    def sub_board(self, br: int, bc: int) -> np.ndarray:
        return self.board[br * 3:br * 3 + 3, bc * 3:bc * 3 + 3]

    def is_playable(self, row: int, col: int) -> bool:
        return self.meta[row // 3, col // 3] == self.empty_marker

    def accepts(self, move: Move[str]) -> bool:
        return move.symbol in self.symbols

    def after_place(self, move: Move[str]) -> None:
        br, bc = move.row // 3, move.col // 3
        sub = self.sub_board(br, bc)
        winner = line_owner(sub, self.empty_marker)
        if winner is not None:
            self.meta[br, bc] = winner
        elif not (sub == self.empty_marker).any():
            self.meta[br, bc] = self.draw_marker

    def get_meta_matrix(self) -> np.ndarray:
        snapshot = self.meta.copy()
        snapshot.flags.writeable = False
        return snapshot

    def meta_winner(self) -> Optional[str]:
        return line_owner(self.meta, self.empty_marker, ignore=(self.draw_marker,))

    def is_win(self, player: Player[str]) -> bool:
        return self.meta_winner() == player.get_symbol()

    def is_lose(self, player: Player[str]) -> bool:
        return self.meta_winner() == opponent_symbol(self.symbols, player.get_symbol())

    def is_draw(self, player: Player[str]) -> bool:
        decided = not (self.meta == self.empty_marker).any()
        return decided and self.meta_winner() is None


class UltimateUI(ConsoleUI):
    title = "Ultimate X-O: win three sub-boards in a row"
    n_slots = 1

    def render(self, matrix) -> str:
        grid = np.asarray(matrix, dtype=object)

        def row_text(values) -> str:
            blocks = [" ".join(str(v) for v in values[i:i + 3]) for i in range(0, len(values), 3)]
            return " | ".join(blocks)

        out = ["   " + row_text(list(range(grid.shape[1])))]
        for r in range(grid.shape[0]):
            if r and r % 3 == 0:
                out.append("   " + "-+-".join(["-" * 5] * 3))
            out.append(f"{r:>2} " + row_text(list(grid[r])))
        return "\n".join(out)
