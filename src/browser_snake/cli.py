"""Command-line launcher for the Browser Snake server."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browser-snake",
        description="Serve the snake game to a web browser.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    serve_p = sub.add_parser("serve", help="Run the game server.")
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    serve_p.add_argument("--tick-ms", type=int, default=None)
    serve_p.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement.",
    )
    serve_p.add_argument(
        "--log-level", type=str, default="info",
        choices=["debug", "info", "warning", "error"],
    )

    return parser


def _load_config(args: argparse.Namespace):
    from browser_snake.config import GameConfig

    config = (
        GameConfig.load(args.config)
        if args.config else GameConfig()
    )

    overrides: dict = {}
    flag_map = {
        "tick_ms": "tick_ms",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from browser_snake.server.app import create_app

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    logger.info(
        "Serving on http://%s:%d (tick %d ms).",
        args.host, args.port, config.tick_ms,
    )
    uvicorn.run(
        create_app(config),
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``browser-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    handlers = {
        "serve": _run_serve,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
