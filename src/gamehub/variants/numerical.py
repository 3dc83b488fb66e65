"""
Numerical X-O: one player owns the odd digits, the other the even ones; a full line
summing to 15 wins.
Teaching notes:
- Each digit can be placed once. The board enforces whose digits may be played from the
  move count: the first mover plays odd, the second even.
- The UI offers only the mover's digits that are still off the board, derived from the
  board itself so a rejected move never uses up a number.
"""
from __future__ import annotations

from typing import Dict, List, Set, Tuple

from ..game_basics import Board, Move, Player
from ..ui import ConsoleUI, parse_ints

ODD = ("1", "3", "5", "7", "9")
EVEN = ("2", "4", "6", "8")
TARGET = 15


class NumericalBoard(Board[str]):
    supports_erase = False

    def __init__(self, empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)

    def used_numbers(self) -> Set[str]:
        return {str(v) for v in self.board.flat if v != self.empty_marker}

    def allowed_numbers(self) -> Tuple[str, ...]:
        return ODD if self.n_moves % 2 == 0 else EVEN

    def accepts(self, move: Move[str]) -> bool:
        symbol = str(move.symbol)
        return symbol in self.allowed_numbers() and symbol not in self.used_numbers()

    def normalize(self, symbol) -> str:
        return str(symbol)

    def is_win(self, player: Player[str]) -> bool:
        for line in self.lines(3):
            values = self.line_values(line.cells)
            if self.empty_marker in values:
                continue
            if sum(int(v) for v in values) == TARGET:
                return True
        return False

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and not self.is_win(player)


class NumericalUI(ConsoleUI):
    title = "Numerical X-O: make a full line that sums to 15"
    player_symbols = ("O", "X")
    number_sets: Dict[str, Tuple[str, ...]] = {"O": ODD, "X": EVEN}

    def available_numbers(self, player: Player) -> List[str]:
        used = self.board_of(player).used_numbers()
        return [n for n in self.number_sets[player.get_symbol()] if n not in used]

    def read_number(self, player: Player) -> str:
        options = self.available_numbers(player)
        while True:
            raw = self.ask(f"{player.get_name()}, choose a number from {' '.join(options)}: ")
            try:
                (value,) = parse_ints(raw, 1)
            except ValueError:
                print("Invalid input! Please enter a single number.")
                continue
            if str(value) in options:
                return str(value)
            print("That number is not available. Try again.")

    def human_move(self, player: Player) -> Move:
        row, col = self.read_coordinates(player)
        return Move(row, col, self.read_number(player))

    def computer_move(self, player: Player) -> Move:
        row, col = self.pick(self.board_of(player).empty_cells())
        return Move(row, col, self.pick(self.available_numbers(player)))
