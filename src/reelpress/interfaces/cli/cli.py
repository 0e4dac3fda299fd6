from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from reelpress import __version__
from reelpress.infrastructure.config import load_config
from reelpress.infrastructure.logging.setup import configure_logging
from reelpress.interfaces.app import create_app

log = structlog.get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 7979

# CLI flag dest -> AppConfig field
_CONFIG_FLAGS: dict[str, str] = {
    "log_level": "log_level",
    "log_format": "log_format",
    "listing_domain": "listing_domain",
}


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="reelpress",
        description="Serve the movie scraper and WordPress publisher API.",
    )
    parser.add_argument("--version", action="version", version=__version__)

    server = parser.add_argument_group("server")
    server.add_argument("--host", help=f"Bind host (env HOST, default {DEFAULT_HOST}).")
    server.add_argument(
        "--port", type=int, help=f"Bind port (env PORT, default {DEFAULT_PORT})."
    )

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", type=Path, help="Path to YAML config file.")
    config.add_argument("--dotenv", type=Path, help="Path to .env file.")
    config.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    config.add_argument(
        "--log-format", choices=["json", "console"], help="Override log format."
    )
    config.add_argument(
        "--listing-domain", help="Override the movie-listing site host."
    )

    return parser.parse_args(list(argv) if argv is not None else None)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        field: getattr(args, dest)
        for dest, field in _CONFIG_FLAGS.items()
        if getattr(args, dest) is not None
    }


def _bind_address(args: argparse.Namespace) -> tuple[str, int]:
    host = args.host or os.getenv("HOST", DEFAULT_HOST)
    port = args.port or int(os.getenv("PORT", str(DEFAULT_PORT)))
    return host, port


def start(argv: Iterable[str] | None = None) -> None:
    """Process entrypoint: load config once, configure logging, serve the app."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    host, port = _bind_address(args)

    config = load_config(
        config_path=args.config,
        dotenv_path=args.dotenv,
        cli_overrides=_cli_overrides(args),
    )
    log_config = configure_logging(config)
    log.info("server_starting", host=host, port=port, environment=config.environment)

    uvicorn.run(create_app(config), host=host, port=port, log_config=log_config)


if __name__ == "__main__":
    raise SystemExit(start())
