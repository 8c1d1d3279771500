"""
Run the API server:

  python -m showcase [--host 0.0.0.0] [--port 5000] [--reload]

Defaults come from HOST and PORT in the environment or .env.
"""

import argparse
import sys

import uvicorn

from showcase.core.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the Showcase API server.")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    uvicorn.run("showcase.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
