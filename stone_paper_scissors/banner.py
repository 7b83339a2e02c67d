"""Run the external banner utility (figlet) that prints the final result."""
from __future__ import annotations

import asyncio
import logging
from asyncio.subprocess import Process
from typing import Optional

from .exceptions import SubprocessError, SubprocessErrorKind

logger = logging.getLogger("stone_paper_scissors.banner")


class BannerRunner:
    def __init__(self, command: str, width: int):
        self.command = command
        self.width = width
        self.process: Optional[Process] = None

    def argv(self, message: str) -> list[str]:
        return [self.command, "-w", str(self.width), message]

    async def start(self, message: str) -> None:
        argv = self.argv(message)
        logger.debug("Launching banner: %r", argv)
        try:
            # Inherits our stdout so the banner lands after the game output.
            self.process = await asyncio.create_subprocess_exec(*argv)
        except OSError as exc:
            logger.error("Unable to launch %s: %s", self.command, exc)
            raise SubprocessError(SubprocessErrorKind.LAUNCH_FAILED, self.command) from exc

    async def wait(self) -> int:
        if not self.process:
            raise RuntimeError("Process is not running")
        returncode = await self.process.wait()
        logger.debug("Banner finished with returncode %s", returncode)
        if returncode < 0:
            raise SubprocessError(SubprocessErrorKind.TERMINATED, self.command, returncode)
        if returncode != 0:
            raise SubprocessError(SubprocessErrorKind.EXITED_NONZERO, self.command, returncode)
        return returncode

    async def _run(self, message: str) -> int:
        await self.start(message)
        return await self.wait()

    def show(self, message: str) -> None:
        """Render ``message`` and block until the utility exits cleanly."""
        asyncio.run(self._run(message))
