# src/grader/services/check_loader_service.py
import json
import logging
from pathlib import Path
from typing import List, Union

from grader.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_checks(checks_file: Union[str, Path]) -> List[str]:
    """
    Loads the checks file: a JSON array of CSS selector strings.

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, or is
                            not an array of strings.
    """
    path = Path(checks_file)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"{checks_file} does not exist. Exiting.")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"{checks_file} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"{checks_file} cannot be read: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(
            f"{checks_file} must contain a JSON array of selectors, got {type(data).__name__}."
        )

    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise ConfigurationError(
                f"{checks_file}: entry {index} is not a selector string ({item!r})."
            )

    logger.debug("Loaded %d checks from %s", len(data), path)
    return data
