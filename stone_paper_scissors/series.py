"""Best-of-N series bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .moves import RoundOutcome

MAX_PLAYER_NAME = 19


class SeriesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_name: str = Field(default="", max_length=MAX_PLAYER_NAME)
    best_of: int

    @field_validator("best_of")
    @classmethod
    def _positive_odd(cls, value: int) -> int:
        if value % 2 == 0 or value < 0:
            raise ValueError("Only positive odd integers are valid")
        return value

    @property
    def wins_needed(self) -> int:
        return (self.best_of + 1) // 2


@dataclass
class SeriesState:
    wins_needed: int
    player_wins: int = 0
    computer_wins: int = 0
    rounds_played: int = 0

    @classmethod
    def start(cls, config: SeriesConfig) -> "SeriesState":
        return cls(wins_needed=config.wins_needed)

    @property
    def is_over(self) -> bool:
        return self.wins_needed in (self.player_wins, self.computer_wins)

    @property
    def player_won(self) -> bool:
        return self.player_wins == self.wins_needed

    def record(self, outcome: RoundOutcome) -> None:
        if self.is_over:
            raise RuntimeError("Series is already decided")
        self.rounds_played += 1
        if outcome is RoundOutcome.PLAYER_WIN:
            self.player_wins += 1
        elif outcome is RoundOutcome.COMPUTER_WIN:
            self.computer_wins += 1

    def score_line(self, player_name: str) -> str:
        return f"{player_name} : {self.player_wins} | Computer : {self.computer_wins}"

    def final_message(self, player_name: str) -> str:
        winner = player_name if self.player_won else "Computer"
        return (
            f"{player_name}  :  {self.player_wins}        |        "
            f"Computer  :  {self.computer_wins}\n{winner}   wins !"
        )
