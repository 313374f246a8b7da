# src/grader/controllers/grade_controller.py
import logging
import sys
from typing import Callable, Dict, Optional

from grader.core.evaluator import run_checks
from grader.managers.config_manager import config_manager
from grader.model import GraderOptions
from grader.services.check_loader_service import load_checks
from grader.services.document_builder_service import DocumentBuilder
from grader.services.generate_default_user_agent_service import generate_default_user_agent
from grader.services.page_fetcher_service import PageFetcher

logger = logging.getLogger(__name__)


def default_fetcher_factory() -> PageFetcher:
    return PageFetcher(config_manager.get_all(), generate_default_user_agent())


class GradeController:
    """
    Runs one grading pass: load the checks, obtain the document (local file
    or remote URL) and evaluate every selector against it.
    """

    def __init__(
            self,
            options: GraderOptions,
            fetcher_factory: Optional[Callable[[], PageFetcher]] = None,
            builder: Optional[DocumentBuilder] = None
    ):
        self.options = options
        self.fetcher_factory = fetcher_factory or default_fetcher_factory
        self.builder = builder or DocumentBuilder()

    def check_html_file(self, html_file: str, checks_file: str) -> Dict[str, bool]:
        """Grades a local HTML file against the checks file."""
        checks = load_checks(checks_file)
        doc = self.builder.load_file(html_file)
        return run_checks(doc, checks)

    async def check_url(self, url: str, checks_file: str) -> Optional[Dict[str, bool]]:
        """
        Fetches the URL and grades its body against the checks file.

        Returns:
            Optional[Dict[str, bool]]: None when the fetch failed. The error
                                       has then been written to stderr.
        """
        checks = load_checks(checks_file)

        async with self.fetcher_factory() as fetcher:
            result = await fetcher.fetch_page(url)

        if result.get("status", -99) < 0:
            message = result.get("error") or "Unknown failure"
            logger.debug("Fetch of %s failed with status %s", url, result.get("status"))
            print(f"Failed to fetch {url}: {message}", file=sys.stderr)
            return None

        logger.info("Fetched %s (HTTP %s) in %ss", url, result["status"], result.get("elapsed_time"))
        doc = self.builder.parse_doc(result.get("content"))
        return run_checks(doc, checks)

    async def run(self) -> Optional[Dict[str, bool]]:
        """Grades the URL if one was given, otherwise the local file."""
        if self.options.url is not None:
            return await self.check_url(self.options.url, self.options.checks_file)
        return self.check_html_file(self.options.html_file, self.options.checks_file)
