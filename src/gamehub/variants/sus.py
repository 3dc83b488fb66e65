"""
SUS: players place 'S' or 'U'; each S-U-S line a placement completes scores for the mover.
Teaching notes:
- Only lines through the placed cell are scored, so a sequence is counted once, by the
  player whose placement completed it.
- The game ends when the board is full; the higher score wins, equal scores draw.
"""
from __future__ import annotations

from typing import Dict, Sequence

from ..game_basics import Board, Move, Player, opponent_symbol
from ..ui import ConsoleUI

SEQUENCE = "SUS"


class SUSBoard(Board[str]):
    supports_erase = False

    def __init__(self, symbols: Sequence[str] = ("S", "U"), empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)
        self.symbols = tuple(symbols)
        self.scores: Dict[str, int] = {s: 0 for s in self.symbols}

    def accepts(self, move: Move[str]) -> bool:
        return isinstance(move.symbol, str) and move.symbol.upper() in self.symbols

    def normalize(self, symbol: str) -> str:
        return symbol.upper()

    def after_place(self, move: Move[str]) -> None:
        cell = (move.row, move.col)
        mover = self.normalize(move.symbol)
        for line in self.lines(len(SEQUENCE)):
            if cell in line.cells and "".join(self.line_values(line.cells)) == SEQUENCE:
                self.scores[mover] += 1

    def score(self, symbol: str) -> int:
        return self.scores.get(symbol, 0)

    def _margin(self, player: Player[str]) -> int:
        mine = player.get_symbol()
        return self.score(mine) - self.score(opponent_symbol(self.symbols, mine))

    def is_win(self, player: Player[str]) -> bool:
        return self.is_full() and self._margin(player) > 0

    def is_lose(self, player: Player[str]) -> bool:
        return self.is_full() and self._margin(player) < 0

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and self._margin(player) == 0


class SUSUI(ConsoleUI):
    title = "SUS: build S-U-S sequences to score"
    player_symbols = ("S", "U")
