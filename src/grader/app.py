# src/grader/app.py
"""
html-grader
Checks an HTML file (or a fetched page) for the presence of the CSS selectors
listed in a checks file and prints the result as JSON.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from grader.controllers.grade_controller import GradeController
from grader.exceptions import ConfigurationError
from grader.managers.config_manager import config_manager
from grader.model import CHECKSFILE_DEFAULT, HTMLFILE_DEFAULT, GraderOptions
from grader.services.json_service import to_json
from grader.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def assert_file_exists(infile: str) -> str:
    """
    Validates that the given path points to an existing file.

    Raises:
        ConfigurationError: If it does not.
    """
    instr = str(infile)
    if not os.path.isfile(instr):
        raise ConfigurationError(f"{instr} does not exist. Exiting.")
    return instr


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-grader",
        description="Check an HTML document for the presence of CSS selectors."
    )
    parser.add_argument("-f", "--file", dest="html_file", metavar="<html_file>",
                        default=HTMLFILE_DEFAULT, help=f"Path to the HTML file (default: {HTMLFILE_DEFAULT}).")
    parser.add_argument("-u", "--url", metavar="<url>", default=None,
                        help="URL to fetch and check instead of the HTML file.")
    parser.add_argument("-c", "--checks", dest="checks_file", metavar="<check_file>",
                        default=CHECKSFILE_DEFAULT, help=f"Path to the checks JSON (default: {CHECKSFILE_DEFAULT}).")
    parser.add_argument("--log-level", default=None,
                        help="Override the log level from settings.json (e.g. DEBUG).")
    return parser


def parse_options(pargs: argparse.Namespace) -> GraderOptions:
    """
    Validates the parsed command line and turns it into GraderOptions.

    The HTML file is only validated when no URL is given, since it is
    not read otherwise.
    """
    checks_file = assert_file_exists(pargs.checks_file)
    html_file = pargs.html_file if pargs.url is not None else assert_file_exists(pargs.html_file)
    return GraderOptions(html_file=html_file, url=pargs.url, checks_file=checks_file)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the grader from the command line."""
    pargs = build_parser().parse_args(argv)
    if pargs.log_level:
        config_manager.set_nested("debug.level", pargs.log_level.upper())
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        silenced_loggers=config_manager.get_nested("logging.silenced", {})
    )

    try:
        options = parse_options(pargs)
        result = asyncio.run(GradeController(options).run())
    except ConfigurationError as e:
        logger.debug("Configuration error: %s", e)
        print(str(e), file=sys.stderr)
        return 1

    if result is None:
        # Fetch failed; the controller already reported why
        return 1

    print(to_json(result, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
