"""Command line entrypoint."""

import argparse
import asyncio
import logging
import sys

from src.config import Settings, get_settings
from src.logging_config import setup_logging
from src.pipeline import EXIT_FAILURE, run_scan

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with the same exit code as every other failure."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="axe-report",
        description="Run the axe accessibility scanner against a URL and summarise its violations",
    )
    p.add_argument("url", nargs="?", help="URL to test")
    p.add_argument("--verbose", action="store_true", default=None,
                   help="print every violation with its instances")
    p.add_argument("--extraneous", action="store_true", default=None,
                   help="keep best-practice violations")
    p.add_argument("--debug", action="store_true", default=None,
                   help="log the raw and filtered scan results")
    p.add_argument("--chromedriver-path", help="chromedriver binary passed to axe")
    p.add_argument("--output-directory", help="directory for the temporary report file")
    return p


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line overrides on top of environment settings."""
    overrides = {
        name: getattr(args, name)
        for name in ("verbose", "extraneous", "debug", "chromedriver_path", "output_directory")
        if getattr(args, name) is not None
    }
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args, get_settings())

    setup_logging("DEBUG" if settings.debug else settings.log_level)

    if not args.url:
        logger.error("You must specify a URL to test", extra={"error_type": "usage"})
        sys.exit(EXIT_FAILURE)

    sys.exit(asyncio.run(run_scan(args.url, settings)))


if __name__ == "__main__":
    main()
