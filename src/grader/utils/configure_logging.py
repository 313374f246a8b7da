import logging
import sys
from tqdm import tqdm

class LogWithTqdm(logging.Handler):
    """
    A custom logging handler that redirects logging output to `tqdm.write()`.
    Everything goes to stderr, stdout is reserved for the JSON report.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _resolve_level(level, fallback):
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level if level is not None else fallback


def configure_logger(general_level='WARNING', silenced_loggers=None):
    """
    Configures the root logger with a TQDM-friendly handler writing to
    stderr, and raises the level of noisy library loggers.
    """
    # 1. Handler and formatter.
    handler = LogWithTqdm()
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    )
    handler.setFormatter(formatter)

    # 2. Root logger, replacing whatever was installed before.
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 3. Muzzle noisy libraries.
    if silenced_loggers:
        for name, level in silenced_loggers.items():
            logging.getLogger(name).setLevel(_resolve_level(level, logging.CRITICAL))
