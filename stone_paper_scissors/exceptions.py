"""Errors that end a game early."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class GameError(Exception):
    """Base class for every terminal game error."""

    exit_code = 1


class InputErrorReason(str, Enum):
    NOT_AN_INTEGER = "not_an_integer"
    INVALID_BEST_OF = "invalid_best_of"


class InputError(GameError, ValueError):
    """Raised when the series setup input is malformed or out of policy."""

    def __init__(self, reason: InputErrorReason, raw: str = ""):
        self.reason = reason
        self.raw = raw
        super().__init__(f"{reason.value}: {raw!r}")


class ExhaustedRetries(GameError):
    """Raised when the player never typed a recognised move."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No valid move after {attempts} attempts")


class SubprocessErrorKind(str, Enum):
    LAUNCH_FAILED = "launch_failed"
    EXITED_NONZERO = "exited_nonzero"
    TERMINATED = "terminated"


class SubprocessError(GameError):
    """Raised when the banner utility cannot be run to a clean exit."""

    def __init__(
        self,
        kind: SubprocessErrorKind,
        command: str,
        returncode: Optional[int] = None,
    ):
        self.kind = kind
        self.command = command
        self.returncode = returncode
        super().__init__(f"{command}: {kind.value} (returncode={returncode})")
