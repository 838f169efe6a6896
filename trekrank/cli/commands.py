"""CLI entry point and argument parsing.

Usage examples::

    # Start the web server (default)
    python -m trekrank serve --port 8080

    # Print the DS9 ranking for season 4 with descriptions
    python -m trekrank list --series DS9 --season 4 --description
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Optional, TextIO

from trekrank.core.config import load_config
from trekrank.core.constants import DESCRIPTION_SHOW, Series
from trekrank.core.exceptions import ParameterValidationError, TrekRankError
from trekrank.core.logging_setup import get_logger, setup_logging_from_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trekrank",
        description="TrekRank – ranked Star Trek episode list",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands")

    # ── serve ──────────────────────────────────────────────────────────
    srv = sub.add_parser("serve", help="Start the web server")
    srv.add_argument("--host", default=None, help="Bind address (default: from config)")
    srv.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 3000)")

    # ── list ───────────────────────────────────────────────────────────
    ls = sub.add_parser("list", help="Print the ranked episode list")
    # Kept as strings so they go through the same validation as the web page
    ls.add_argument("--season", default=None, help="Season number 1-7")
    ls.add_argument(
        "--series",
        default=None,
        help=f"Series code ({', '.join(s.value for s in Series)})",
    )
    ls.add_argument("--description", action="store_true", help="Include descriptions")

    return parser


def main(argv: list[str] | None = None, out: Optional[TextIO] = None) -> int:
    """Parse CLI arguments and dispatch to the appropriate handler."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config()
    except TrekRankError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "list":
        return _cmd_list(args, cfg, out or sys.stdout)

    try:
        setup_logging_from_config(cfg)
    except TrekRankError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    log = get_logger("cli")

    if args.command is None or args.command == "serve":
        return _cmd_serve(args, log)
    parser.print_help()
    return 1


# ── Command handlers ──────────────────────────────────────────────────

def _cmd_serve(args, log) -> int:
    from trekrank.api.app import start_server
    try:
        start_server(host=getattr(args, "host", None), port=getattr(args, "port", None))
    except TrekRankError as exc:
        log.error("Server failed to start: %s", exc)
        return 1
    return 0


def _cmd_list(args, cfg: Dict[str, Any], out: TextIO) -> int:
    from trekrank.services.dataset import get_catalog
    from trekrank.services.validator import validate
    from trekrank.services.view import assemble

    raw = {
        "season": args.season,
        "series": args.series,
        "description": DESCRIPTION_SHOW if args.description else None,
    }
    try:
        config = validate(raw)
    except ParameterValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        episodes = get_catalog(cfg.get("dataset_path"))
    except TrekRankError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    view = assemble(episodes, config)
    for item in view.episodes:
        ep = item.episode
        out.write(f"{item.rank:>4}. [{ep.series} S{ep.season} {ep.episode_num}] {ep.title}\n")
        if view.show_description and ep.description:
            out.write(f"      {ep.description}\n")
    out.write(f"{len(view.episodes)} episode(s)\n")
    return 0
