"""
GameManager: the turn loop that drives one match of any variant to its end.
Teaching notes:
- Each turn: ask the UI for the current player's move, let the board validate and apply it,
  render, then ask the board whether the game is over for that player.
- A rejected move is simply asked for again from the same player; the turn only passes
  after the board accepted a move.
- Outcomes are resolved in a fixed order (win, then lose, then draw) for every variant.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .game_basics import Board, Player
from .ui import UI


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    UNFINISHED = "unfinished"


@dataclass
class MatchResult:
    outcome: Outcome
    player: Player  # the player who made the final move
    opponent: Player
    turns: int
    rejected: int = 0

    @property
    def winner(self) -> Optional[Player]:
        if self.outcome is Outcome.WIN:
            return self.player
        if self.outcome is Outcome.LOSE:
            return self.opponent
        return None

    @property
    def loser(self) -> Optional[Player]:
        if self.outcome is Outcome.WIN:
            return self.opponent
        if self.outcome is Outcome.LOSE:
            return self.player
        return None


def resolve_outcome(board: Board, player: Player) -> Optional[Outcome]:
    if board.is_win(player):
        return Outcome.WIN
    if board.is_lose(player):
        return Outcome.LOSE
    if board.is_draw(player):
        return Outcome.DRAW
    return None


class GameManager:
    def __init__(self, board: Board, players: Sequence[Player], ui: UI) -> None:
        if len(players) != 2:
            raise ValueError(f"A match needs exactly two players, got {len(players)}")
        self.board = board
        self.players: List[Player] = list(players)
        self.ui = ui
        self.current_player_index = 0
        self.turns = 0
        self.rejected = 0
        for p in self.players:
            p.attach(board)
        ui.empty_marker = board.empty_marker

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def other_player(self) -> Player:
        return self.players[1 - self.current_player_index]

    def play_turn(self) -> Optional[MatchResult]:
        """Play one accepted move; return the result if it ended the match."""
        player = self.current_player
        while True:
            move = self.ui.get_move(player)
            if self.board.update_board(move):
                break
            self.rejected += 1
            logging.debug("Rejected move %s from %s", move, player.get_name())
            if not player.is_computer:
                self.ui.announce("Invalid move, try again.")
        self.turns += 1
        self.ui.display_board_matrix(self.board.get_board_matrix())
        if self.board.game_is_over(player):
            outcome = resolve_outcome(self.board, player)
            if outcome is not None:
                return MatchResult(outcome, player, self.other_player, self.turns, self.rejected)
        self.current_player_index = 1 - self.current_player_index
        return None

    def announce_result(self, result: MatchResult) -> None:
        name = result.player.get_name()
        if result.outcome is Outcome.WIN:
            self.ui.announce(f"{name} wins!")
        elif result.outcome is Outcome.LOSE:
            self.ui.announce(f"{name} loses! {result.opponent.get_name()} wins!")
        elif result.outcome is Outcome.DRAW:
            self.ui.announce("Draw!")
        else:
            self.ui.announce(f"Match stopped after {result.turns} turns without a result.")

    def run(self, max_turns: Optional[int] = None) -> MatchResult:
        self.ui.display_board_matrix(self.board.get_board_matrix())
        result: Optional[MatchResult] = None
        while result is None:
            if max_turns is not None and self.turns >= max_turns:
                result = MatchResult(
                    Outcome.UNFINISHED, self.other_player, self.current_player, self.turns, self.rejected
                )
                break
            result = self.play_turn()
        logging.debug(
            "Match over: %s by %s after %d turns (%d rejected moves)",
            result.outcome.value,
            result.player.get_name(),
            result.turns,
            result.rejected,
        )
        self.announce_result(result)
        return result
