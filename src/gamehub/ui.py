"""
User-interface contract and the default console implementation.
Teaching notes:
- The UI is the only component that talks to the outside world. It turns human input (or a
  random choice, for computer players) into a Move; it never writes to the board.
- Input comes from an injected source with a single read(prompt) method, so tests can script
  a whole match without a terminal.
- Randomness comes from the numpy Generator the UI is built with; seed it to replay a match.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, TypeVar

import numpy as np

from .game_basics import Board, Coord, Move, Player, PlayerType

T = TypeVar("T")


class InputSource(Protocol):
    def read(self, prompt: str) -> str:
        ...


class ConsoleInput:
    """Blocking reads from stdin."""

    def read(self, prompt: str) -> str:
        return input(prompt)


class ScriptedInput:
    """Replays a fixed list of answers; raises EOFError once they run out."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self.prompts: List[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError(f"Scripted input exhausted at prompt {prompt!r}")
        return self._lines.popleft()

    @property
    def remaining(self) -> int:
        return len(self._lines)


def parse_ints(raw: str, count: int) -> Tuple[int, ...]:
    tokens = raw.replace(",", " ").split()
    if len(tokens) != count:
        raise ValueError(f"expected {count} numbers, got {len(tokens)}")
    return tuple(int(t) for t in tokens)


class UI(ABC):
    """Interaction policy for one variant: prompts, player construction, moves, rendering."""

    title = "Game Hub"
    n_slots = 3
    player_symbols: Tuple[str, str] = ("X", "O")
    empty_marker = "."
    cell_width = 3

    def __init__(
        self,
        input_source: Optional[InputSource] = None,
        rng: Optional[np.random.Generator] = None,
        title: Optional[str] = None,
        n_slots: Optional[int] = None,
        quiet: bool = False,
    ) -> None:
        if title is not None:
            self.title = title
        if n_slots is not None:
            self.n_slots = n_slots
        self.input = input_source if input_source is not None else ConsoleInput()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.quiet = quiet

    # ---- prompting -------------------------------------------------------
    def ask(self, prompt: str) -> str:
        return self.input.read(prompt).strip()

    def ask_yes_no(self, prompt: str) -> bool:
        return self.ask(prompt).lower() in ("y", "yes")

    def get_player_name(self, label: str) -> str:
        name = self.ask(f"Enter {label} name: ")
        return name or label

    def get_player_type_choice(self, label: str) -> PlayerType:
        while True:
            raw = self.ask(f"Choose {label} type:\n1. Human\n2. Computer\n").lower()
            if raw in ("1", "human", "h"):
                return PlayerType.HUMAN
            if raw in ("2", "computer", "c"):
                return PlayerType.COMPUTER
            print("Invalid choice. Please enter 1 or 2.")

    # ---- players ---------------------------------------------------------
    def setup_players(self) -> List[Player]:
        names: List[str] = []
        types: List[PlayerType] = []
        for i in range(2):
            label = f"Player {i + 1}"
            names.append(self.get_player_name(label))
            types.append(self.get_player_type_choice(label))
        return self.build_players(names, types)

    def build_players(self, names: Sequence[str], types: Sequence[PlayerType]) -> List[Player]:
        return [
            self.create_player(name, symbol, kind)
            for name, symbol, kind in zip(names, self.player_symbols, types)
        ]

    def create_player(self, name: str, symbol: str, type: PlayerType) -> Player:
        self.show(f"Creating {type.value} player: {name} ({symbol})")
        return Player(name, symbol, type)

    # ---- moves -----------------------------------------------------------
    @abstractmethod
    def get_move(self, player: Player) -> Move:
        ...

    @staticmethod
    def board_of(player: Player) -> Board:
        board = player.get_board_ptr()
        if board is None:
            raise ValueError(f"{player!r} is not attached to a board")
        return board

    def pick(self, options: Sequence[T]) -> T:
        if not options:
            raise RuntimeError("No legal options left to choose from")
        return options[int(self.rng.integers(len(options)))]

    # ---- rendering -------------------------------------------------------
    def render_cell(self, value, row: int, col: int) -> str:
        return str(value)

    def render(self, matrix) -> str:
        grid = np.asarray(matrix, dtype=object)
        rows, cols = grid.shape
        w = self.cell_width
        header = "    " + "".join(f"{c:^{w + 1}}" for c in range(cols))
        sep = "   " + "-" * ((w + 1) * cols + 1)
        out = [header, sep]
        for r in range(rows):
            cells = "|".join(f"{self.render_cell(grid[r, c], r, c):^{w}}" for c in range(cols))
            out.append(f"{r:>2} |{cells}|")
            out.append(sep)
        return "\n".join(out)

    def show(self, text: str) -> None:
        if not self.quiet:
            print(text)

    def display_board_matrix(self, matrix) -> None:
        self.show(self.render(matrix))

    def announce(self, message: str) -> None:
        self.show(message)


class ConsoleUI(UI):
    """Default interaction: humans type "row col", computers pick a random empty cell."""

    def get_move(self, player: Player) -> Move:
        if player.is_computer:
            return self.computer_move(player)
        return self.human_move(player)

    def human_move(self, player: Player) -> Move:
        row, col = self.read_coordinates(player)
        return Move(row, col, player.get_symbol())

    def computer_move(self, player: Player) -> Move:
        row, col = self.pick(self.board_of(player).empty_cells())
        return Move(row, col, player.get_symbol())

    def coordinates_prompt(self, player: Player, board: Board) -> str:
        return (
            f"{player.get_name()} ({player.get_symbol()}), enter your move "
            f"row (0-{board.get_rows() - 1}) and column (0-{board.get_columns() - 1}): "
        )

    def read_coordinates(self, player: Player, prompt: Optional[str] = None) -> Coord:
        board = self.board_of(player)
        prompt = prompt or self.coordinates_prompt(player, board)
        while True:
            try:
                row, col = parse_ints(self.ask(prompt), 2)
            except ValueError:
                print("Invalid input! Please enter two numbers.")
                continue
            if not board.in_bounds(row, col):
                print("Out of range. Try again.")
                continue
            return row, col
