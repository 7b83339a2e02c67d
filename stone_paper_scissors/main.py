"""Command-line entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .banner import BannerRunner
from .config import LOG_LEVELS, Settings, load_settings
from .console import Console, InputReader
from .exceptions import (
    ExhaustedRetries,
    InputError,
    InputErrorReason,
    SubprocessError,
    SubprocessErrorKind,
)
from .game import Presenter, SeriesController
from .moves import ComputerPlayer

logger = logging.getLogger("stone_paper_scissors")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="stone-paper-scissors",
        description="Play a best-of-N series of Stone, Paper, Scissors against the computer.",
    )
    p.add_argument("--banner-command", help="Banner utility to print the result (default: figlet)")
    p.add_argument("--banner-width", type=_positive_int, help="Width passed to the banner utility (default: 180)")
    p.add_argument("--no-delay", action="store_true", default=None, help="Skip the display pacing")
    p.add_argument("--seed", type=int, help="Seed for the computer's moves (default: current time)")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                   help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    base = base or load_settings()
    overrides = {
        "banner_command": args.banner_command,
        "banner_width": args.banner_width,
        "no_delay": args.no_delay,
        "log_level": args.log_level,
    }
    merged = base.model_dump()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(merged)


def report_error(exc: Exception, console: Console) -> None:
    """Print the user-facing message for a game-ending error."""
    if isinstance(exc, InputError):
        if exc.reason is InputErrorReason.NOT_AN_INTEGER:
            console.write("Invalid input...\n\n")
        else:
            console.write("\n")
            console.pause()
            console.write("Only positive odd integers are valid...\n\n")
    elif isinstance(exc, ExhaustedRetries):
        console.write("Too many invalid inputs...\n")
    elif isinstance(exc, SubprocessError):
        console.stdout.flush()
        if exc.kind is SubprocessErrorKind.LAUNCH_FAILED:
            print(f"{exc.command} execution failed: {exc.__cause__}", file=sys.stderr)
        elif exc.kind is SubprocessErrorKind.EXITED_NONZERO:
            print(f"Child process failed to execute with status {exc.returncode}", file=sys.stderr)
        else:
            print("Child process terminated abnormally", file=sys.stderr)
    console.stdout.flush()


def build_controller(settings: Settings, console: Console, seed: Optional[int] = None) -> SeriesController:
    return SeriesController(
        reader=InputReader(console),
        presenter=Presenter(console),
        computer=ComputerPlayer(seed=seed),
        banner=BannerRunner(settings.banner_command, settings.banner_width),
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    settings = resolve_settings(args)
    logging.basicConfig(
        level=settings.logging_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console.unpaced() if settings.no_delay else Console()
    controller = build_controller(settings, console, seed=args.seed)
    try:
        state = controller.run()
    except (InputError, ExhaustedRetries, SubprocessError) as exc:
        logger.info("Game ended early: %s", exc)
        report_error(exc, console)
        return exc.exit_code
    except KeyboardInterrupt:
        print(flush=True)
        return 130
    logger.info("Series over after %d rounds: %d-%d",
                state.rounds_played, state.player_wins, state.computer_wins)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
