"""
Registry of every rule variant: one board class and one UI class per key.
Teaching notes:
- A variant is just a (Board, UI) pair; GameManager drives all of them the same way.
- build_match() wires a board and a UI to the same random Generator, so one seed replays
  both the computer's choices and any random board events.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from ..game_basics import Board
from ..ui import UI, InputSource
from .classic import ClassicBoard, ClassicUI, MemoryUI
from .connect4 import ConnectFourBoard, ConnectFourUI
from .diamond import DiamondBoard, DiamondUI
from .five import FiveBoard, FiveUI
from .infinity import InfinityBoard, InfinityUI
from .inverse import InverseBoard, InverseUI
from .numerical import NumericalBoard, NumericalUI
from .obstacles import ObstacleBoard, ObstacleUI
from .pyramid import PyramidBoard, PyramidUI
from .sliding import SlidingBoard, SlidingUI
from .sus import SUSBoard, SUSUI
from .ultimate import UltimateBoard, UltimateUI
from .word import WordBoard, WordUI

BoardFactory = Callable[[np.random.Generator, Optional[FrozenSet[str]]], Board]


@dataclass(frozen=True)
class VariantSpec:
    key: str
    name: str
    make_board: BoardFactory
    ui_class: type


def _word_board(rng: np.random.Generator, words: Optional[FrozenSet[str]]) -> Board:
    return WordBoard(words) if words is not None else WordBoard.from_file()


_SPECS: List[VariantSpec] = [
    VariantSpec("classic", "Classic X-O", lambda rng, words: ClassicBoard(), ClassicUI),
    VariantSpec("pyramid", "Pyramid X-O", lambda rng, words: PyramidBoard(), PyramidUI),
    VariantSpec("connect4", "Four-in-a-row", lambda rng, words: ConnectFourBoard(), ConnectFourUI),
    VariantSpec("five", "5x5 X-O", lambda rng, words: FiveBoard(), FiveUI),
    VariantSpec("word", "Word X-O", _word_board, WordUI),
    VariantSpec("numerical", "Numerical X-O", lambda rng, words: NumericalBoard(), NumericalUI),
    VariantSpec("inverse", "Inverse X-O", lambda rng, words: InverseBoard(), InverseUI),
    VariantSpec("infinity", "Infinity X-O", lambda rng, words: InfinityBoard(), InfinityUI),
    VariantSpec("ultimate", "Ultimate X-O", lambda rng, words: UltimateBoard(), UltimateUI),
    VariantSpec("sus", "SUS", lambda rng, words: SUSBoard(), SUSUI),
    VariantSpec("obstacles", "Obstacles X-O", lambda rng, words: ObstacleBoard(rng), ObstacleUI),
    VariantSpec("diamond", "Diamond X-O", lambda rng, words: DiamondBoard(), DiamondUI),
    VariantSpec("memory", "Memory X-O", lambda rng, words: ClassicBoard(), MemoryUI),
    VariantSpec("sliding", "Sliding X-O", lambda rng, words: SlidingBoard(), SlidingUI),
]

VARIANTS: Dict[str, VariantSpec] = {spec.key: spec for spec in _SPECS}


def get_variant(key: str) -> VariantSpec:
    try:
        return VARIANTS[key]
    except KeyError:
        raise KeyError(f"Unknown variant {key!r}; choose from {', '.join(VARIANTS)}") from None


def build_match(
    key: str,
    input_source: Optional[InputSource] = None,
    rng: Optional[np.random.Generator] = None,
    words: Optional[FrozenSet[str]] = None,
    quiet: bool = False,
) -> Tuple[Board, UI]:
    """Fresh board and UI for one match of the given variant."""
    spec = get_variant(key)
    rng = rng if rng is not None else np.random.default_rng()
    board = spec.make_board(rng, words)
    ui = spec.ui_class(input_source, rng, quiet=quiet)
    ui.empty_marker = board.empty_marker
    return board, ui


def menu_text() -> str:
    lines = ["Choose a game:"]
    lines += [f"{i}. {spec.name}" for i, spec in enumerate(_SPECS, start=1)]
    return "\n".join(lines) + "\n"


def variant_from_choice(choice: str) -> Optional[str]:
    """Map a menu answer (number or key) to a variant key."""
    choice = choice.strip().lower()
    if choice in VARIANTS:
        return choice
    if choice.isdigit() and 1 <= int(choice) <= len(_SPECS):
        return _SPECS[int(choice) - 1].key
    return None


__all__ = [
    "VARIANTS",
    "VariantSpec",
    "build_match",
    "get_variant",
    "menu_text",
    "variant_from_choice",
]
