"""Prompting the player for a name, a series length and moves."""
from __future__ import annotations

import io
import logging
import re
import sys
import time
from typing import Callable, Optional, TextIO

from .exceptions import ExhaustedRetries, InputError, InputErrorReason
from .moves import Move, parse_move
from .series import MAX_PLAYER_NAME

logger = logging.getLogger("stone_paper_scissors.console")

MAX_CHOICE_ATTEMPTS = 5
# Longest valid word, "scissors".
MAX_CHOICE_LENGTH = 8

SHORT_DELAY = 0.1
MEDIUM_DELAY = 0.2
LONG_DELAY = 0.5

# Same token grammar as C's scanf("%i"): sign, then hex, octal or decimal.
_INTEGER_TOKEN = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def _no_sleep(_seconds: float) -> None:
    return None


def parse_integer_token(text: str) -> Optional[int]:
    """Parse the leading integer of ``text``, ignoring whatever follows it."""
    match = _INTEGER_TOKEN.match(text)
    if not match:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits[1:], 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


class Console:
    """Paced terminal I/O shared by the input reader and the presenter."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        if isinstance(self.stdin, io.TextIOWrapper):
            # Undecodable bytes become U+FFFD and fail move matching.
            self.stdin.reconfigure(errors="replace")
        self.stdout = stdout if stdout is not None else sys.stdout
        self._sleep = time.sleep if sleep is None else sleep

    @classmethod
    def unpaced(cls, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> "Console":
        return cls(stdin, stdout, sleep=_no_sleep)

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def pause(self, seconds: float = SHORT_DELAY) -> None:
        self.stdout.flush()
        self._sleep(seconds)

    def read_line(self, limit: int) -> tuple[str, bool]:
        """Read one line and keep at most ``limit`` characters of it.

        Returns the kept text without its line terminator, and whether the
        line was longer than ``limit`` (the excess is discarded).
        """
        self.stdout.flush()
        raw = self.stdin.readline()
        text = raw.rstrip("\r\n")
        return text[:limit], len(text) > limit


class InputReader:
    def __init__(self, console: Console):
        self.console = console

    def read_player_name(self) -> str:
        console = self.console
        console.pause()
        console.write("\n")
        console.write("Player name: ")
        console.pause()
        name, overflow = console.read_line(MAX_PLAYER_NAME)
        if overflow:
            logger.debug("Player name truncated to %r", name)
        console.pause()
        console.write("\n")
        console.pause()
        return name

    def read_best_of(self) -> int:
        """Read the series length.

        Raises InputError when the line holds no integer, or when the integer
        is even or negative. Zero is even, so it shares that diagnostic.
        """
        console = self.console
        console.write("Best of: ")
        console.pause()
        raw, _ = console.read_line(sys.maxsize)
        console.pause()
        value = parse_integer_token(raw)
        if value is None:
            raise InputError(InputErrorReason.NOT_AN_INTEGER, raw)
        if value % 2 == 0 or value < 0:
            raise InputError(InputErrorReason.INVALID_BEST_OF, raw)
        return value

    def read_player_move(self) -> Move:
        console = self.console
        for attempt in range(1, MAX_CHOICE_ATTEMPTS + 1):
            console.write("\n")
            console.pause()
            console.write("Stone, Paper or Scissors: ")
            console.pause()
            text, overflow = console.read_line(MAX_CHOICE_LENGTH)
            console.write("\n")
            console.pause()

            move = None if overflow else parse_move(text)
            if move is not None:
                return move
            logger.debug("Rejected move input %r (attempt %d)", text, attempt)
            console.write("Invalid Choice...\n")
            console.pause()
        raise ExhaustedRetries(MAX_CHOICE_ATTEMPTS)
