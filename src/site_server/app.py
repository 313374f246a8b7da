"""
Site Server
Serves the landing page (index.html) and the public/ asset folder.
"""

import argparse
import logging
import os
from pathlib import Path

from flask import Flask

from site_server.routers.page_router import page_router

# Configure logging for the Flask server
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PORT_DEFAULT = 5000


def create_app(site_root, index_file: str = "index.html", static_dir: str = "public") -> Flask:
    """
    Application factory. Files under <site_root>/<static_dir> are served
    from the URL root, e.g. /css/site.css -> public/css/site.css.
    """
    site_root = Path(site_root).resolve()

    flask_app = Flask(
        __name__,
        static_folder=str(site_root / static_dir),
        static_url_path=""
    )

    flask_app.config['SITE_ROOT'] = str(site_root)
    flask_app.config['INDEX_FILE'] = index_file

    flask_app.register_blueprint(page_router)

    return flask_app


def default_port() -> int:
    """Port from the PORT environment variable, falling back to 5000."""
    try:
        return int(os.environ.get("PORT", PORT_DEFAULT))
    except ValueError:
        logger.warning("Ignoring invalid PORT value %r", os.environ.get("PORT"))
        return PORT_DEFAULT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Static site server")
    parser.add_argument("--port", type=int, default=default_port(),
                        help="Port to bind the server to (default: $PORT or 5000)")
    parser.add_argument("--host", type=str, default="0.0.0.0",
                        help="Host interface to bind to")
    parser.add_argument("--root", type=str, default=".",
                        help="Directory holding index.html and public/")
    return parser


def main(argv=None):
    """
    Main execution block to parse arguments and start the server.
    """
    args = build_parser().parse_args(argv)

    app = create_app(args.root)

    print(f"Site server is running at localhost:{args.port}")

    # use_reloader=False keeps a single process
    app.run(
        host=args.host,
        port=args.port,
        use_reloader=False
    )


if __name__ == '__main__':
    main()
