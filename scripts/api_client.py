"""Lightweight REST client for the pyadp API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyadp REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("scoring", nargs="?", default=None, help="Scoring format alias (default Half PPR)")
    parser.add_argument("--top", type=int, default=10, help="Number of players to print")
    parser.add_argument("--health", action="store_true", help="Print cache status and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=30) as client:
        if args.health:
            resp = client.get("/health")
            resp.raise_for_status()
            print(json.dumps(resp.json()["cacheStatus"], indent=2))
            return

        path = f"/api/players/{args.scoring}" if args.scoring else "/api/players"
        resp = client.get(path)
        if resp.status_code == 400:
            supported = ", ".join(resp.json().get("supportedFormats", []))
            raise SystemExit(f"unknown format {args.scoring!r}; supported: {supported}")
        if resp.status_code == 500:
            raise SystemExit(f"server could not fetch data: {resp.json().get('message')}")
        resp.raise_for_status()
        payload = resp.json()

    print(f"{payload['format']}: {payload['count']} players (updated {payload['lastUpdated']})")
    for player in payload["players"][: args.top]:
        print(
            f"{player['overallRank']:>4}  {player['name']:<28} {player['team']:<4} "
            f"{player['position']}{player['positionRank']:<4} {player['adp']:.1f}"
        )


if __name__ == "__main__":
    main()
