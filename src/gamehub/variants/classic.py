"""
Classic 3x3 X-O, plus the memory variant that plays the same rules blind.
Teaching notes:
- Everything classic needs is already in LineBoard: three equal marks in a row win,
  a full board without a line is a draw.
- Memory X-O changes only what the UI shows; the board and its rules are untouched.
"""
from __future__ import annotations

from ..game_basics import LineBoard
from ..ui import ConsoleUI


class ClassicBoard(LineBoard):
    def __init__(self, empty_marker: str = ".") -> None:
        super().__init__(3, 3, empty_marker)


class ClassicUI(ConsoleUI):
    title = "Welcome to FCAI X-O Game"


class MemoryUI(ClassicUI):
    """Occupied cells are drawn as '#' so players must remember who holds what."""

    title = "Memory X-O: marks are hidden once placed"
    hidden_marker = "#"

    def render_cell(self, value, row: int, col: int) -> str:
        return str(value) if value == self.empty_marker else self.hidden_marker
