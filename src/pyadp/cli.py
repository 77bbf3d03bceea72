"""Command-line interface for serving or fetching ADP data."""

from __future__ import annotations

import argparse
import asyncio
import csv
import json
import sys
from dataclasses import replace
from io import StringIO
from pathlib import Path
from typing import Sequence

from pyadp.config import SUPPORTED_FORMATS, Settings, normalize_format
from pyadp.errors import AdpError, InvalidFormat
from pyadp.ingest import fetch_adp_data
from pyadp.models import PlayerRecord

CSV_COLUMNS = ("overallRank", "name", "team", "position", "positionRank", "adp", "risk", "notes")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fantasy football ADP feed")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default PYADP_HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Listening port (default PORT or 3000)")

    fetch = subparsers.add_parser("fetch", help="Fetch one scoring format once, bypassing the cache")
    fetch.add_argument("scoring", help=f"Scoring format alias ({', '.join(SUPPORTED_FORMATS)})")
    fetch.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")
    fetch.add_argument(
        "--format",
        dest="output_format",
        choices=("json", "csv"),
        default="json",
        help="Output encoding",
    )
    return parser.parse_args(argv)


def render_players(players: Sequence[PlayerRecord], output_format: str) -> str:
    payloads = [player.to_payload() for player in players]
    if output_format == "json":
        return json.dumps(payloads, indent=2)
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    writer.writerows(payloads)
    return buffer.getvalue()


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    from pyadp.api import create_app

    if args.host:
        settings = replace(settings, host=args.host)
    if args.port is not None:
        settings = replace(settings, port=args.port)
    # uvicorn handles SIGTERM/SIGINT and exits without draining in-flight requests.
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)
    return 0


def _fetch(args: argparse.Namespace, settings: Settings) -> int:
    try:
        fmt = normalize_format(args.scoring)
    except InvalidFormat as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        players = asyncio.run(fetch_adp_data(fmt, settings=settings))
    except AdpError as exc:
        print(f"Failed to fetch {fmt} data: {exc}", file=sys.stderr)
        return 1

    rendered = render_players(players, args.output_format)
    if args.output:
        args.output.write_text(rendered, encoding="utf-8")
        print(f"Wrote {len(players)} {fmt} players to {args.output}")
    else:
        print(rendered)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = Settings.from_env()
    if args.command == "serve":
        return _serve(args, settings)
    return _fetch(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
