"""Challenge the computer to a best-of-N series of Stone, Paper, Scissors."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .art import MOVE_ART, VS, side_by_side
from .banner import BannerRunner
from .console import LONG_DELAY, MEDIUM_DELAY, Console, InputReader
from .exceptions import GameError
from .moves import ComputerPlayer, Move, resolve
from .series import SeriesConfig, SeriesState

logger = logging.getLogger("stone_paper_scissors.game")


class Phase(str, Enum):
    SETUP = "setup"
    ROUND_IN_PROGRESS = "round_in_progress"
    SERIES_COMPLETE = "series_complete"
    ABORTED = "aborted"


class Presenter:
    def __init__(self, console: Console):
        self.console = console

    def show_round(self, player: Move, computer: Move) -> None:
        for line in side_by_side(MOVE_ART[player], VS, MOVE_ART[computer]):
            self.console.write(line + "\n")
            self.console.pause()

    def show_score(self, line: str) -> None:
        console = self.console
        console.write("\n")
        console.pause()
        console.write(line)
        console.pause()
        console.write("\n")
        console.pause()

    def show_suspense(self) -> None:
        console = self.console
        console.write("\n")
        console.pause(MEDIUM_DELAY)
        for dots in (".", "..", "..."):
            console.write(dots + "\n")
            console.pause(LONG_DELAY)
        console.write("\n")
        console.pause(MEDIUM_DELAY)


class SeriesController:
    """Drives one series from setup to the final banner.

    Errors from input or from the banner utility propagate to the caller;
    ``phase`` is left at ABORTED when setup input is rejected.
    """

    def __init__(
        self,
        reader: InputReader,
        presenter: Presenter,
        computer: ComputerPlayer,
        banner: Optional[BannerRunner] = None,
    ):
        self.reader = reader
        self.presenter = presenter
        self.computer = computer
        self.banner = banner
        self.phase = Phase.SETUP
        self.config: Optional[SeriesConfig] = None
        self.state: Optional[SeriesState] = None

    def setup(self) -> SeriesConfig:
        try:
            name = self.reader.read_player_name()
            best_of = self.reader.read_best_of()
        except GameError:
            self.phase = Phase.ABORTED
            raise
        self.config = SeriesConfig(player_name=name, best_of=best_of)
        self.state = SeriesState.start(self.config)
        self.phase = Phase.ROUND_IN_PROGRESS
        logger.debug("Series of %d for %r, %d wins needed",
                     best_of, name, self.config.wins_needed)
        return self.config

    def play_round(self) -> None:
        if self.phase is not Phase.ROUND_IN_PROGRESS:
            raise RuntimeError(f"Cannot play a round during {self.phase.value}")
        player_move = self.reader.read_player_move()
        computer_move = self.computer.next_move()
        outcome = resolve(player_move, computer_move)
        self.state.record(outcome)
        logger.debug("Round %d: %s vs %s -> %s", self.state.rounds_played,
                     player_move.value, computer_move.value, outcome.value)

        self.presenter.show_round(player_move, computer_move)
        if self.state.is_over:
            self.phase = Phase.SERIES_COMPLETE
        else:
            self.presenter.show_score(self.state.score_line(self.config.player_name))

    def finish(self) -> str:
        if self.phase is not Phase.SERIES_COMPLETE:
            raise RuntimeError(f"Cannot finish a series during {self.phase.value}")
        self.presenter.show_suspense()
        message = self.state.final_message(self.config.player_name)
        if self.banner is not None:
            self.presenter.console.stdout.flush()
            self.banner.show(message)
        return message

    def run(self) -> SeriesState:
        self.setup()
        while self.phase is Phase.ROUND_IN_PROGRESS:
            self.play_round()
        self.finish()
        return self.state
