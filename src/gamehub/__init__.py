"""gamehub package.

A teaching framework for two-player grid games: a generic board/UI/turn-loop core,
fourteen rule variants, a CLI, and computer-vs-computer simulations.

Convenience imports are exposed for common workflows.
"""

from .game_basics import Board, Move, Player, PlayerType
from .manager import GameManager, MatchResult, Outcome
from .simulate import SimulationArgs, run_simulation
from .ui import UI, ConsoleUI, ScriptedInput
from .variants import VARIANTS, build_match

__all__ = [
    "Board",
    "Move",
    "Player",
    "PlayerType",
    "UI",
    "ConsoleUI",
    "ScriptedInput",
    "GameManager",
    "MatchResult",
    "Outcome",
    "VARIANTS",
    "build_match",
    "SimulationArgs",
    "run_simulation",
]
