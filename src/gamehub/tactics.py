"""
Line tactics: which empty cells would complete a line for a symbol.
Teaching notes:
- In misère play completing a line loses, so a "safe" cell is one that completes nothing.
- Checks run on a copy of the board matrix; the board itself is never touched.
"""
from typing import List

import numpy as np

from .game_basics import Board, Coord


def would_complete_line(board: Board, symbol: str, cell: Coord, length: int = 3) -> bool:
    r, c = cell
    if not board.is_empty(r, c):
        return False
    grid = np.array(board.get_board_matrix(), dtype=object)
    grid[r, c] = symbol
    for line in board.lines(length):
        if cell not in line.cells:
            continue
        if all(grid[rr, cc] == symbol for rr, cc in line.cells):
            return True
    return False


def completing_cells(board: Board, symbol: str, length: int = 3) -> List[Coord]:
    return [cell for cell in board.empty_cells() if would_complete_line(board, symbol, cell, length)]


def safe_cells(board: Board, symbol: str, length: int = 3) -> List[Coord]:
    return [cell for cell in board.empty_cells() if not would_complete_line(board, symbol, cell, length)]
