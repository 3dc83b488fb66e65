"""
5x5 X-O: play 24 moves, then count three-in-a-rows.
Teaching notes:
- Every row, column and diagonal of the grid is scanned as one maximal line; a run of L
  equal marks (L >= 3) scores L - 2, so XXXX counts as two overlapping threes.
- Scores are recomputed from the grid on every query, so asking twice never double counts.
- After 24 moves (one cell left empty) the higher score wins, equal scores draw.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from ..game_basics import Board, Coord, Move, Player, count_runs, maximal_lines, opponent_symbol
from ..ui import ConsoleUI


class FiveBoard(Board[str]):
    final_move = 24
    run_length = 3

    def __init__(self, symbols: Sequence[str] = ("X", "O"), empty_marker: str = ".") -> None:
        super().__init__(5, 5, empty_marker)
        self.symbols = tuple(symbols)
        self._scan_lines: List[List[Coord]] = [
            line for line in maximal_lines(self.rows, self.columns) if len(line) >= self.run_length
        ]

    def score(self, symbol: str) -> int:
        return sum(
            count_runs(self.line_values(line), symbol, self.run_length) for line in self._scan_lines
        )

    def scores(self) -> Dict[str, int]:
        return {s: self.score(s) for s in self.symbols}

    def finished(self) -> bool:
        return self.n_moves >= self.final_move

    def _margin(self, player: Player[str]) -> int:
        mine = player.get_symbol()
        return self.score(mine) - self.score(opponent_symbol(self.symbols, mine))

    def is_win(self, player: Player[str]) -> bool:
        return self.finished() and self._margin(player) > 0

    def is_lose(self, player: Player[str]) -> bool:
        return self.finished() and self._margin(player) < 0

    def is_draw(self, player: Player[str]) -> bool:
        return self.finished() and self._margin(player) == 0


class FiveUI(ConsoleUI):
    title = "5x5 X-O: the most three-in-a-rows after 24 moves wins"
    n_slots = 5

    def score_line(self, board: FiveBoard) -> str:
        return "Scores: " + ", ".join(f"{s}={n}" for s, n in board.scores().items())

    def get_move(self, player: Player) -> Move:
        self.show(self.score_line(self.board_of(player)))
        return super().get_move(player)
