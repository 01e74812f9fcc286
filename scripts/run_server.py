"""Start the Scholar profile HTTP API."""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from scraper.api import run_server


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Scholar profile HTTP API server")
    parser.add_argument("--host", default=settings.api_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to bind to")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    run_server(args.host, args.port)
