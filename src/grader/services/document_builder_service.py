# src/grader/services/document_builder_service.py
import logging
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """
    Builder responsible for turning raw HTML (from disk or from the network)
    into a BeautifulSoup document the evaluator can query with CSS selectors.
    """

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def parse_doc(self, html: Union[str, bytes, None]) -> BeautifulSoup:
        """
        Parses raw HTML content.

        Args:
            html (Union[str, bytes, None]): The raw markup. Empty input gives
                                            an empty document.

        Returns:
            BeautifulSoup: The parsed document.
        """
        if not html:
            return BeautifulSoup("", self.parser)

        if isinstance(html, bytes):
            # UnicodeDammit picks the encoding (BOM, <meta charset>, sniffing)
            return BeautifulSoup(html, self.parser)

        # Strip BOM and surrounding whitespace
        clean_html = html.replace('\ufeff', '').strip()
        return BeautifulSoup(clean_html, self.parser)

    def load_file(self, html_file: Union[str, Path]) -> BeautifulSoup:
        """Reads a local HTML file and parses it."""
        raw = Path(html_file).read_bytes()
        logger.debug("Read %d bytes from %s", len(raw), html_file)
        return self.parse_doc(raw)
