#!/usr/bin/env python
"""
Run the Product Catalog API server.

Usage:
    python run_api.py
    python run_api.py --reload            # Development mode
    python run_api.py --log-format json   # One JSON object per log line
"""

import argparse
import os

import uvicorn

from shared.config import get_settings
from shared.observability import setup_logging


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run Product Catalog API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=settings.log_format,
        help="Log line format",
    )
    args = parser.parse_args()

    # The app (and a --reload worker process) reads the format from the environment
    os.environ["CATALOG_LOG_FORMAT"] = args.log_format
    get_settings.cache_clear()

    # uvicorn's own loggers propagate to the root handler installed here
    setup_logging(settings.log_level, args.log_format)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
