"""Moves, round resolution and the computer's choice."""
from __future__ import annotations

import random
import time
from enum import Enum
from typing import Optional, Sequence


class Move(str, Enum):
    STONE = "stone"
    PAPER = "paper"
    SCISSORS = "scissors"


class RoundOutcome(str, Enum):
    PLAYER_WIN = "player_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"


MOVES: Sequence[Move] = (Move.STONE, Move.PAPER, Move.SCISSORS)
BEATS = {
    Move.STONE: Move.SCISSORS,
    Move.PAPER: Move.STONE,
    Move.SCISSORS: Move.PAPER,
}


def parse_move(text: str) -> Optional[Move]:
    """Return the move named by ``text`` (any letter case), or None."""
    try:
        return Move(text.lower())
    except ValueError:
        return None


def resolve(player: Move, computer: Move) -> RoundOutcome:
    if player == computer:
        return RoundOutcome.TIE
    if BEATS[player] == computer:
        return RoundOutcome.PLAYER_WIN
    return RoundOutcome.COMPUTER_WIN


class ComputerPlayer:
    """Picks uniformly among the three moves.

    Without an explicit ``rng`` or ``seed`` the generator is seeded from the
    clock, so separate runs play different sequences.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is None:
            rng = random.Random(time.time_ns() if seed is None else seed)
        self.rng = rng

    def next_move(self) -> Move:
        return self.rng.choice(MOVES)
