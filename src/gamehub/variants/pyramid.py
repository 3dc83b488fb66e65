"""
Pyramid X-O: nine cells stacked 1-3-5 inside a 3x5 grid.
Teaching notes:
- Row r holds the columns within r steps of the centre column.
- The winning lines are exactly the straight triples that stay inside the pyramid: the
  middle row, the centre column, three windows on the base and the two edges.
"""
from __future__ import annotations

from ..game_basics import LineBoard, Move, Player
from ..ui import ConsoleUI


def in_pyramid(row: int, col: int, columns: int = 5) -> bool:
    return abs(col - columns // 2) <= row


class PyramidBoard(LineBoard):
    supports_erase = False

    def __init__(self, empty_marker: str = ".") -> None:
        super().__init__(3, 5, empty_marker)

    def in_shape(self, row: int, col: int) -> bool:
        return in_pyramid(row, col, self.columns)


class PyramidUI(ConsoleUI):
    title = "Pyramid X-O"

    def render_cell(self, value, row: int, col: int) -> str:
        return str(value) if in_pyramid(row, col) else " "

    def human_move(self, player: Player) -> Move:
        board = self.board_of(player)
        while True:
            row, col = self.read_coordinates(player)
            if board.in_shape(row, col):
                return Move(row, col, player.get_symbol())
            print("Invalid move! That cell is not part of the pyramid.")
