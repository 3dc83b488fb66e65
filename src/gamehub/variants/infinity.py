"""
Infinity X-O: the oldest mark on the board vanishes every third placement.
Teaching notes:
- Placements are remembered oldest first; after placements 4, 7, 10, ... the oldest
  surviving mark is removed before anyone checks for a win.
- Only accepted placements are remembered, so a rejected move never shifts the queue.
- The match is drawn once nine placements were made without a line.
"""
from __future__ import annotations

from collections import deque
from typing import Deque

from ..game_basics import Coord, LineBoard, Move, Player
from ..ui import ConsoleUI


class InfinityBoard(LineBoard):
    supports_erase = False
    expiry_interval = 3
    placement_limit = 9

    def __init__(self, empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)
        self.history: Deque[Coord] = deque()
        self.placements = 0

    def after_place(self, move: Move[str]) -> None:
        self.history.append((move.row, move.col))
        self.placements += 1
        if self.placements > 1 and (self.placements - 1) % self.expiry_interval == 0:
            r, c = self.history.popleft()
            self.board[r, c] = self.empty_marker
            self.n_moves -= 1

    def is_draw(self, player: Player[str]) -> bool:
        return self.placements >= self.placement_limit and not self.is_win(player)


class InfinityUI(ConsoleUI):
    title = "Infinity X-O: every third move the oldest mark disappears"
