"""Command-line runner: configures logging and starts uvicorn."""

import argparse
import logging

import uvicorn

from homepage.config import settings


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Serve the personal website")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="debug, info, warning, error")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "homepage.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
