"""
Obstacles X-O on a 6x6 grid: four in a row wins, and every move drops two obstacles.
Teaching notes:
- After each accepted placement two random empty cells become '#'. Obstacles belong to
  nobody and can never be overwritten.
- Only lines through the last placed mark can be new, so the win check starts there.
- Random cells come from the numpy Generator the board was built with.
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..game_basics import DIRECTIONS, Board, Coord, Move, Player
from ..ui import ConsoleUI


class ObstacleBoard(Board[str]):
    supports_erase = False
    obstacle_symbol = "#"
    obstacles_per_move = 2
    win_length = 4

    def __init__(self, rng: Optional[np.random.Generator] = None, empty_marker: str = ".") -> None:
        super().__init__(6, 6, empty_marker)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.fillable: List[Coord] = [(r, c) for r in range(self.rows) for c in range(self.columns)]
        self.last_move: Optional[Coord] = None

    def accepts(self, move: Move[str]) -> bool:
        return move.symbol != self.obstacle_symbol

    def after_place(self, move: Move[str]) -> None:
        self.fillable.remove((move.row, move.col))
        self.last_move = (move.row, move.col)
        self.spawn_obstacles()

    def spawn_obstacles(self) -> List[Coord]:
        placed = []
        for _ in range(self.obstacles_per_move):
            if not self.fillable:
                break
            r, c = self.fillable.pop(int(self.rng.integers(len(self.fillable))))
            self.board[r, c] = self.obstacle_symbol
            placed.append((r, c))
        return placed

    def run_length(self, row: int, col: int, dr: int, dc: int, symbol: str) -> int:
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.board[r, c] == symbol:
            count += 1
            r, c = r + dr, c + dc
        return count

    def is_win(self, player: Player[str]) -> bool:
        if self.last_move is None:
            return False
        r, c = self.last_move
        symbol = player.get_symbol()
        if self.board[r, c] != symbol:
            return False
        return any(
            1 + self.run_length(r, c, dr, dc, symbol) + self.run_length(r, c, -dr, -dc, symbol)
            >= self.win_length
            for dr, dc in DIRECTIONS
        )

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and not self.is_win(player)


class ObstacleUI(ConsoleUI):
    title = "Obstacles X-O: four in a row on a 6x6 board, watch out for '#'"
