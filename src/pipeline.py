"""Scan pipeline: invoke, load, clean up, filter and report."""

from __future__ import annotations

import logging

from src.config import Settings
from src.reporter import filter_violations, render_report
from src.scan import (
    ScanRunner,
    build_runner,
    check_outcome,
    load_report,
    remove_report,
    report_path,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


async def run_scan(url: str, settings: Settings, runner: ScanRunner | None = None) -> int:
    """Scan *url*, print the report to stdout and return the process exit code."""
    runner = runner or build_runner(settings)
    output_path = report_path(settings.output_directory, url)

    logger.info("scan started", extra={"url": url, "output_path": str(output_path)})

    # --- Stage 1: Run the scanner ---
    outcome = await runner.run(url, output_path)
    failure = check_outcome(outcome, url)
    if failure is not None:
        logger.error(
            failure,
            extra={"error_type": "invocation", "url": url, "returncode": outcome.returncode},
        )
        return EXIT_FAILURE

    # --- Stage 2: Load the saved report, always removing it ---
    try:
        loaded = load_report(output_path)
        if settings.debug:
            logger.debug(
                "raw scan result",
                extra={"axe_cli_result": loaded.raw if loaded else None},
            )
    finally:
        remove_report(output_path)

    if loaded is None:
        return EXIT_FAILURE

    # --- Stage 3: Filter and report ---
    violations = filter_violations(loaded.result.violations, extraneous=settings.extraneous)
    if settings.debug:
        logger.debug(
            "filtered violations",
            extra={"filtered_violation_types": [v.model_dump(by_alias=True) for v in violations]},
        )

    for line in render_report(url, violations, verbose=settings.verbose):
        print(line)

    logger.info(
        "scan finished",
        extra={"url": url, "violation_types": len(violations)},
    )
    return EXIT_OK
