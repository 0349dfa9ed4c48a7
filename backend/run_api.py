#!/usr/bin/env python
"""
Start the ProSocial HTTP server under uvicorn.

Host, port, reload and log level default to the values in Settings;
command-line flags override them for a single run.
"""

import argparse
from typing import Optional

import uvicorn

from shared.config import Settings, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="run_api", description="Serve the ProSocial API")
    parser.add_argument("--host", help="interface to bind (default: HOST)")
    parser.add_argument("--port", type=int, help="port to bind (default: PORT)")
    parser.add_argument("--reload", action="store_true", help="restart on code changes")
    parser.add_argument("--workers", type=int, default=1, help="worker processes (ignored with --reload)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="uvicorn log level (default: LOG_LEVEL)",
    )
    return parser


def server_options(args: argparse.Namespace, settings: Settings) -> dict:
    """Merge flags over settings into uvicorn.run keyword arguments."""
    reload = args.reload or settings.reload
    return {
        "host": args.host or settings.host,
        "port": args.port or settings.port,
        "reload": reload,
        "workers": None if reload else args.workers,
        "log_level": args.log_level or settings.log_level.lower(),
        "proxy_headers": True,
    }


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run("api:app", **server_options(args, get_settings()))


if __name__ == "__main__":
    main()
