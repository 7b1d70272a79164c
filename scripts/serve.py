#!/usr/bin/env python3
"""Run the InfuseSecret API under uvicorn.

Usage:
    python3 scripts/serve.py
    python3 scripts/serve.py --host 0.0.0.0 --port 8080 --reload
"""

from __future__ import annotations

import argparse
import sys

import uvicorn

from infusesecret.config import get_settings


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the InfuseSecret API server.")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Bind port (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    args = parser.parse_args()

    uvicorn.run(
        "infusesecret.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if settings.debug else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
