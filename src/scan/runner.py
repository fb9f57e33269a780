"""Runs the ``axe`` command line scanner as a child process."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Exit status used when the scanner could not be started at all.
LAUNCH_FAILED = 127


@dataclass(frozen=True)
class ScanOutcome:
    """Exit status and the fully collected output streams of one scan."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


class ScanRunner(Protocol):
    """Protocol for scan runners."""

    async def run(self, url: str, output_path: Path) -> ScanOutcome: ...


class AxeRunner:
    """Invokes ``axe --chromedriver-path=... --save <path> <url>``."""

    def __init__(self, chromedriver_path: str, axe_command: str = "axe") -> None:
        self._chromedriver_path = chromedriver_path
        self._axe_command = axe_command

    def build_command(self, url: str, output_path: Path) -> list[str]:
        return [
            self._axe_command,
            f"--chromedriver-path={self._chromedriver_path}",
            "--save",
            str(output_path),
            url,
        ]

    async def run(self, url: str, output_path: Path) -> ScanOutcome:
        """Run one scan and wait until the process exits and both streams are drained."""
        cmd = self.build_command(url, output_path)
        logger.debug("running scanner", extra={"command": cmd})

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.debug("scanner could not be started", extra={"command": cmd}, exc_info=True)
            return ScanOutcome(returncode=LAUNCH_FAILED, stderr=f"{self._axe_command}: {e}")

        stdout, stderr = await process.communicate()
        outcome = ScanOutcome(
            returncode=process.returncode if process.returncode is not None else 0,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        logger.debug(
            "scanner finished",
            extra={
                "returncode": outcome.returncode,
                "stdout_length": len(outcome.stdout),
                "stderr_length": len(outcome.stderr),
            },
        )
        return outcome


def check_outcome(outcome: ScanOutcome, url: str) -> str | None:
    """Return the failure message for *outcome*, or ``None`` if a report was produced.

    Anything on stderr counts as a failure, whatever the exit status.
    """
    if outcome.stderr:
        return outcome.stderr.strip()
    if not outcome.stdout:
        return f"Could not generate report for: {url}"
    return None
