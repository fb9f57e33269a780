"""Scanner submodule: child process runner and saved report handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import AxeCliResult, ViolationInstance, ViolationType
from .report_file import LoadedReport, load_report, remove_report, report_path, url_digest
from .runner import AxeRunner, ScanOutcome, ScanRunner, check_outcome

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "AxeCliResult",
    "AxeRunner",
    "LoadedReport",
    "ScanOutcome",
    "ScanRunner",
    "ViolationInstance",
    "ViolationType",
    "build_runner",
    "check_outcome",
    "load_report",
    "remove_report",
    "report_path",
    "url_digest",
]


def build_runner(settings: Settings) -> AxeRunner:
    """Build the scanner runner from settings."""
    return AxeRunner(
        chromedriver_path=settings.chromedriver_path,
        axe_command=settings.axe_command,
    )
