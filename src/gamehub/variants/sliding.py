"""
Sliding X-O on a 4x4 board: four tokens each, slide one step per turn, three in a row wins.
Teaching notes:
- The board starts populated: top row O X O X, bottom row X O X O.
- A move names the destination (row, col) and the source (from_row, from_col); the
  source must hold the mover's token and be orthogonally adjacent to the empty target.
- The slide is validated in full before anything changes, so a rejected move leaves the
  board exactly as it was.
- A player left without a legal slide ends the match in a draw.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..game_basics import Board, Coord, Move, Player, opponent_symbol
from ..ui import ConsoleUI

STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
Slide = Tuple[Coord, Coord]


class SlidingBoard(Board[str]):
    supports_erase = False
    win_length = 3

    def __init__(self, symbols: Sequence[str] = ("X", "O"), empty_marker: str = ".") -> None:
        super().__init__(4, 4, empty_marker)
        self.symbols = tuple(symbols)
        x, o = self.symbols
        last = self.rows - 1
        for c in range(self.columns):
            self.board[0, c] = o if c % 2 == 0 else x
            self.board[last, c] = x if c % 2 == 0 else o

    def accepts(self, move: Move[str]) -> bool:
        if not move.is_slide:
            return False
        fr, fc = move.from_row, move.from_col
        if not self.in_bounds(fr, fc) or self.board[fr, fc] != move.symbol:
            return False
        return abs(fr - move.row) + abs(fc - move.col) == 1

    def after_place(self, move: Move[str]) -> None:
        self.board[move.from_row, move.from_col] = self.empty_marker

    def legal_slides(self, symbol: str) -> List[Slide]:
        slides = []
        for r in range(self.rows):
            for c in range(self.columns):
                if self.board[r, c] != symbol:
                    continue
                for dr, dc in STEPS:
                    tr, tc = r + dr, c + dc
                    if self.in_bounds(tr, tc) and self.is_empty(tr, tc):
                        slides.append(((r, c), (tr, tc)))
        return slides

    def is_win(self, player: Player[str]) -> bool:
        return self.has_line(player.get_symbol(), self.win_length)

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        if self.is_win(player):
            return False
        return not self.legal_slides(opponent_symbol(self.symbols, player.get_symbol()))


class SlidingUI(ConsoleUI):
    title = "Sliding X-O: slide your tokens to make three in a row"
    n_slots = 4

    def human_move(self, player: Player) -> Move:
        name = player.get_name()
        fr, fc = self.read_coordinates(player, f"{name}, enter the row and column of the token to move: ")
        tr, tc = self.read_coordinates(player, f"{name}, enter the row and column to move it to: ")
        return Move(tr, tc, player.get_symbol(), fr, fc)

    def computer_move(self, player: Player) -> Move:
        board = self.board_of(player)
        (fr, fc), (tr, tc) = self.pick(board.legal_slides(player.get_symbol()))
        return Move(tr, tc, player.get_symbol(), fr, fc)
