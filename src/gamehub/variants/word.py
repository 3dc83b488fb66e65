"""
Word X-O: both players place letters; the first to spell a dictionary word wins.
Teaching notes:
- Any three filled cells in a row, column or diagonal count, read forwards or backwards.
- Letters are stored uppercase and the word list is uppercase too.
- Both players share the '-' symbol; what they place is the letter carried by the Move.
"""
from __future__ import annotations

import string
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from ..dictionary import load_words
from ..game_basics import Board, Move, Player
from ..ui import ConsoleUI

LETTERS = string.ascii_uppercase


def is_letter(symbol) -> bool:
    return isinstance(symbol, str) and len(symbol) == 1 and symbol.upper() in LETTERS


class WordBoard(Board[str]):
    def __init__(self, words: FrozenSet[str], empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)
        self.words = words

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "WordBoard":
        return cls(load_words(path))

    def accepts(self, move: Move[str]) -> bool:
        return is_letter(move.symbol)

    def normalize(self, symbol: str) -> str:
        return symbol.upper()

    def formed_words(self) -> List[str]:
        found = []
        for line in self.lines(3):
            values = self.line_values(line.cells)
            if self.empty_marker in values:
                continue
            word = "".join(values)
            if word in self.words or word[::-1] in self.words:
                found.append(word)
        return found

    def is_win(self, player: Player[str]) -> bool:
        return bool(self.formed_words())

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and not self.is_win(player)


class WordUI(ConsoleUI):
    title = "Word X-O: spell a three-letter word to win"
    player_symbols = ("-", "-")

    def read_letter(self, player: Player) -> str:
        while True:
            raw = self.ask(f"{player.get_name()}, enter a letter (A-Z): ")
            if is_letter(raw):
                return raw.upper()
            print("Invalid letter! Please enter a single letter A-Z.")

    def human_move(self, player: Player) -> Move:
        row, col = self.read_coordinates(player)
        return Move(row, col, self.read_letter(player))

    def computer_move(self, player: Player) -> Move:
        row, col = self.pick(self.board_of(player).empty_cells())
        return Move(row, col, self.pick(LETTERS))
