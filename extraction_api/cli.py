"""CLI entry point for the extraction simulation server."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from common.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    p = argparse.ArgumentParser(description="Espresso extraction simulation server")
    p.add_argument("--host", default=settings.api_host)
    p.add_argument("--port", type=int, default=settings.api_port)
    p.add_argument("--reload", action="store_true", help="reload on code changes (dev only)")
    args = p.parse_args()

    logger.info("Starting extraction simulation server on %s:%d", args.host, args.port)
    logger.info("Config: db=%s metrics_file=%s", settings.database_url, settings.metrics_file)

    uvicorn.run("extraction_api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
