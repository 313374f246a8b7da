import logging
from pathlib import Path

from flask import Blueprint, current_app

logger = logging.getLogger(__name__)

# Blueprint serving the site's landing page
page_router = Blueprint('page_router', __name__)


@page_router.route('/')
def index():
    """
    Returns the configured index file. It is read on every request so
    edits show up without restarting the server.
    """
    index_path = Path(current_app.config['SITE_ROOT']) / current_app.config['INDEX_FILE']

    if not index_path.is_file():
        logger.error(f"Index file {index_path} not found.")
        return f"Error: {index_path.name} could not be found.", 404

    return index_path.read_text(encoding="utf-8"), 200, {"Content-Type": "text/html; charset=utf-8"}
