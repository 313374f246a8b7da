# src/grader/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for retrieving the paths the grader relies on.
    """

    @staticmethod
    def get_grader_package_root() -> Path:
        """Returns the directory of the installed `grader` package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_grader_package_root() / "settings.json"
