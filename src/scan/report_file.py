"""Temp report file: naming, loading and removal."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import AxeCliResult

logger = logging.getLogger(__name__)


def url_digest(url: str) -> str:
    """SHA-256 hex digest of *url*."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


def report_path(output_directory: str | Path, url: str) -> Path:
    """Path the scanner saves the report for *url* to."""
    return Path(output_directory) / f"{url_digest(url)}.json"


@dataclass(frozen=True)
class LoadedReport:
    """Element 0 of the saved report, as written by the scanner and as parsed."""

    raw: Any
    result: AxeCliResult


def load_report(path: Path) -> LoadedReport | None:
    """Parse the first result of the saved report, or ``None`` on any failure.

    The scanner writes a JSON array; only element 0 is used.
    """
    try:
        results = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        logger.error(
            "report file could not be read",
            extra={"error_type": "report_parse", "path": str(path)},
            exc_info=True,
        )
        return None
    except json.JSONDecodeError:
        logger.error(
            "report file is not valid json",
            extra={"error_type": "report_parse", "path": str(path)},
            exc_info=True,
        )
        return None

    if not isinstance(results, list):
        logger.error(
            "report file does not hold a list of results",
            extra={"error_type": "report_parse", "path": str(path), "found": type(results).__name__},
        )
        return None

    if not results:
        logger.error(
            "report file holds no results",
            extra={"error_type": "report_parse", "path": str(path)},
        )
        return None

    if len(results) > 1:
        logger.warning(
            "report holds more than one result, using the first",
            extra={"path": str(path), "discarded": len(results) - 1},
        )

    try:
        result = AxeCliResult.model_validate(results[0])
    except ValidationError as e:
        logger.error(
            "report result could not be parsed",
            extra={"error_type": "report_parse", "path": str(path), "errors": e.error_count()},
            exc_info=True,
        )
        return None
    return LoadedReport(raw=results[0], result=result)


def remove_report(path: Path) -> bool:
    """Delete the report file. Returns ``False`` on error."""
    try:
        path.unlink()
    except OSError:
        logger.error(
            "report file could not be removed",
            extra={"error_type": "cleanup", "path": str(path)},
            exc_info=True,
        )
        return False
    logger.debug("report file removed", extra={"path": str(path)})
    return True
