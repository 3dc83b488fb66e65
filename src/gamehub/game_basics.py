"""
Game basics: moves, players, and the abstract board every variant specialises.
Teaching notes:
- A board is a rows x columns numpy object grid; cells hold a symbol or the empty marker.
- update_board() is the only method that writes to the grid. It never raises for a bad
  move, it returns False and leaves the board untouched.
- Lines are precomputed windows of cells in four directions, so win checks are just
  "are all cells in this window equal to my symbol".
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Callable, Dict, Generic, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

import numpy as np

Cell = TypeVar("Cell")
Coord = Tuple[int, int]

# Erase/undo mark: a Move carrying it clears an occupied cell.
ERASE = ""

# (dr, dc) per direction: horizontal, vertical, main diagonal, anti diagonal
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class PlayerType(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class Move(Generic[Cell]):
    """A single placement. from_row/from_col name the source token for sliding moves."""
    row: int
    col: int
    symbol: Cell
    from_row: Optional[int] = None
    from_col: Optional[int] = None

    @property
    def is_erase(self) -> bool:
        return self.symbol == ERASE

    @property
    def is_slide(self) -> bool:
        return self.from_row is not None and self.from_col is not None


class Player(Generic[Cell]):
    """Identity record plus a borrowed reference to the board it plays on."""

    def __init__(self, name: str, symbol: Cell, type: PlayerType) -> None:
        self._name = name
        self._symbol = symbol
        self._type = type
        self._board: Optional["Board[Cell]"] = None

    def attach(self, board: "Board[Cell]") -> None:
        if self._board is not None and self._board is not board:
            raise ValueError(f"Player {self._name!r} is already attached to another board")
        self._board = board

    def get_name(self) -> str:
        return self._name

    def get_symbol(self) -> Cell:
        return self._symbol

    def get_type(self) -> PlayerType:
        return self._type

    def get_board_ptr(self) -> Optional["Board[Cell]"]:
        return self._board

    @property
    def is_computer(self) -> bool:
        return self._type is PlayerType.COMPUTER

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {self._symbol!r}, {self._type.value})"


class Line(NamedTuple):
    cells: Tuple[Coord, ...]
    direction: int


def line_windows(
    rows: int,
    columns: int,
    length: int,
    playable: Optional[Callable[[int, int], bool]] = None,
) -> List[Line]:
    """All straight windows of `length` cells, every cell inside the grid and playable."""
    windows: List[Line] = []
    for r in range(rows):
        for c in range(columns):
            for d, (dr, dc) in enumerate(DIRECTIONS):
                cells = tuple((r + k * dr, c + k * dc) for k in range(length))
                if all(0 <= rr < rows and 0 <= cc < columns for rr, cc in cells):
                    if playable is None or all(playable(rr, cc) for rr, cc in cells):
                        windows.append(Line(cells, d))
    return windows


def maximal_lines(rows: int, columns: int) -> List[List[Coord]]:
    """Every full row, column and diagonal of the grid (diagonals of any length)."""
    lines: List[List[Coord]] = [[(r, c) for c in range(columns)] for r in range(rows)]
    lines += [[(r, c) for r in range(rows)] for c in range(columns)]
    for start in range(-(rows - 1), columns):
        lines.append([(r, r + start) for r in range(rows) if 0 <= r + start < columns])
    for total in range(rows + columns - 1):
        lines.append([(r, total - r) for r in range(rows) if 0 <= total - r < columns])
    return lines


def count_runs(values: Sequence, symbol, length: int = 3) -> int:
    """Score runs of `symbol`: a run of L >= length consecutive cells counts L - length + 1."""
    score = 0
    for value, group in groupby(values):
        if value != symbol:
            continue
        run = sum(1 for _ in group)
        if run >= length:
            score += run - length + 1
    return score


class Board(ABC, Generic[Cell]):
    """Grid state plus the terminal-state queries of one rule set.

    Subclasses implement is_win/is_lose/is_draw and may customise placement through
    is_playable() (shape masks, gravity, closed regions), accepts() (symbol rules) and
    after_place() (bookkeeping such as meta-boards or obstacle injection).
    """

    supports_erase = True

    def __init__(self, rows: int, columns: int, empty_marker: Cell = ".") -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.empty_marker = empty_marker
        self.n_moves = 0
        self.board = np.full((rows, columns), empty_marker, dtype=object)
        self._lines: Dict[int, List[Line]] = {}

    # ---- accessors -------------------------------------------------------
    def get_rows(self) -> int:
        return self.rows

    def get_columns(self) -> int:
        return self.columns

    def get_move_count(self) -> int:
        return self.n_moves

    def get_cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.columns} board")
        return self.board[row, col]

    def get_board_matrix(self) -> np.ndarray:
        snapshot = self.board.copy()
        snapshot.flags.writeable = False
        return snapshot

    # ---- geometry --------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def in_shape(self, row: int, col: int) -> bool:
        """Static shape mask; masked-out cells never take part in play or lines."""
        return True

    def is_playable(self, row: int, col: int) -> bool:
        """Whether a placement may target this cell right now (ignoring occupancy)."""
        return self.in_shape(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        return self.board[row, col] == self.empty_marker

    def empty_cells(self) -> List[Coord]:
        return [
            (r, c)
            for r in range(self.rows)
            for c in range(self.columns)
            if self.is_playable(r, c) and self.is_empty(r, c)
        ]

    def is_full(self) -> bool:
        return not any(
            self.is_empty(r, c)
            for r in range(self.rows)
            for c in range(self.columns)
            if self.in_shape(r, c)
        )

    def lines(self, length: int) -> List[Line]:
        if length not in self._lines:
            self._lines[length] = line_windows(self.rows, self.columns, length, self.in_shape)
        return self._lines[length]

    def line_values(self, cells: Sequence[Coord]) -> List[Cell]:
        rs, cs = zip(*cells)
        return list(self.board[list(rs), list(cs)])

    def has_line(self, symbol: Cell, length: int = 3) -> bool:
        if symbol == self.empty_marker:
            return False
        return any(all(v == symbol for v in self.line_values(line.cells)) for line in self.lines(length))

    # ---- mutation --------------------------------------------------------
    def accepts(self, move: Move[Cell]) -> bool:
        """Variant-specific placement rule, checked after bounds and occupancy."""
        return True

    def normalize(self, symbol: Cell) -> Cell:
        return symbol

    def after_place(self, move: Move[Cell]) -> None:
        """Bookkeeping hook run after a successful placement."""

    def update_board(self, move: Move[Cell]) -> bool:
        r, c = move.row, move.col
        if not self.in_bounds(r, c) or not self.in_shape(r, c):
            return False
        if move.is_erase:
            if not self.supports_erase or self.is_empty(r, c):
                return False
            self.board[r, c] = self.empty_marker
            self.n_moves -= 1
            return True
        if move.symbol == self.empty_marker:
            return False
        if not self.is_playable(r, c) or not self.is_empty(r, c):
            return False
        if not self.accepts(move):
            return False
        self.board[r, c] = self.normalize(move.symbol)
        self.n_moves += 1
        self.after_place(move)
        return True

    # ---- terminal queries ------------------------------------------------
    @abstractmethod
    def is_win(self, player: Player[Cell]) -> bool:
        ...

    @abstractmethod
    def is_lose(self, player: Player[Cell]) -> bool:
        ...

    @abstractmethod
    def is_draw(self, player: Player[Cell]) -> bool:
        ...

    def game_is_over(self, player: Player[Cell]) -> bool:
        return self.is_win(player) or self.is_lose(player) or self.is_draw(player)


class LineBoard(Board[str]):
    """Rectangular board won by the first complete line of `win_length` equal marks.

    Lose is never reported on its own: losing means the opponent completed a line.
    """

    win_length = 3

    def is_win(self, player: Player[str]) -> bool:
        return self.has_line(player.get_symbol(), self.win_length)

    def is_lose(self, player: Player[str]) -> bool:
        return False

    def is_draw(self, player: Player[str]) -> bool:
        return self.is_full() and not self.is_win(player)


def opponent_symbol(symbols: Sequence[Cell], symbol: Cell) -> Cell:
    """The other entry of a two-symbol pair."""
    first, second = symbols
    return second if symbol == first else first
