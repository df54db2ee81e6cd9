"""Uvicorn runner for the Storefront API.

Usage:
    python src/server.py                     # HOST/PORT from the environment
    python src/server.py --port 8000 --reload
"""

import argparse

import uvicorn

from settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront API server")
    parser.add_argument("--host", help="Bind host (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Bind port (default: $PORT or 3000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()

    uvicorn.run(
        "app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
