# src/grader/core/evaluator.py
import logging
from typing import Dict, Iterable

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def run_checks(doc: BeautifulSoup, checks: Iterable[str]) -> Dict[str, bool]:
    """
    Checks the parsed document for the presence of every selector.

    Selectors are evaluated in ascending order, so the returned dict (and the
    JSON written from it) is sorted. A selector that appears twice simply
    overwrites its own key.

    Args:
        doc (BeautifulSoup): The parsed document. It is only read.
        checks (Iterable[str]): CSS selectors, e.g. 'h1', 'a[href]', '#nav'.

    Returns:
        Dict[str, bool]: selector -> True if at least one node matches.

    Raises:
        soupsieve.SelectorSyntaxError: Invalid selectors are not caught here.
    """
    out: Dict[str, bool] = {}
    for selector in sorted(checks):
        present = len(doc.select(selector)) > 0
        out[selector] = present
        logger.debug("Check %r -> %s", selector, present)
    return out
