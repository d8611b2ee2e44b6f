# run_scraper.py
from __future__ import annotations

import argparse
import csv
import logging
import os
import time
from typing import Any, Dict, List

from npb_scraper import FetchFailure, fetch_profile, list_roster
from npb_scraper.logging_utils import setup_logging, get_logger
from npb_scraper.profile import PROFILE_LABELS
from settings.teams import resolve_team

REQUEST_DELAY = 1.0

EXPORT_DIR = "exports"
DEFAULT_OUTPUT = "npb_rosters"

LOG_FILE = os.path.join(EXPORT_DIR, "scraper.log")

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export NPB team rosters (optionally with player profiles) to CSV"
    )
    parser.add_argument(
        "--team",
        action="append",
        dest="teams",
        required=True,
        help="Team code to export (can be used multiple times). Example: --team s --team g",
    )
    parser.add_argument("--q", default="", help="Only players whose name contains this text")
    parser.add_argument("--num", default="", help="Only the player with exactly this uniform number")
    parser.add_argument(
        "--profiles",
        action="store_true",
        help="Also fetch each player's profile page (one extra request per player)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help=f"Output file base name (without extension). Default: {DEFAULT_OUTPUT}",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def collect_rows(args: argparse.Namespace) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []

    for code in args.teams:
        team = resolve_team(code)
        if team is None:
            logger.error("Unknown team code: %s (skipped)", code)
            continue

        try:
            players = list_roster(team.code, args.q, args.num, timeout=args.timeout)
        except FetchFailure as exc:
            logger.error("Could not fetch roster for %s: %s", team.name, exc)
            continue

        for player in players:
            row: Dict[str, Any] = {
                "team": team.name,
                "number": player.number,
                "name": player.name,
                "link": player.link,
            }

            if args.profiles and player.link:
                time.sleep(REQUEST_DELAY)
                try:
                    profile = fetch_profile(player.link, timeout=args.timeout)
                except FetchFailure as exc:
                    logger.warning("Profile fetch failed for %s: %s", player.name, exc)
                else:
                    row["kana"] = profile.kana
                    for attr in profile.attributes:
                        row[attr.label] = attr.value

            rows.append(row)

        logger.info("%s: %d player rows", team.name, len(players))
        time.sleep(REQUEST_DELAY)

    return rows


def write_csv(rows: List[Dict[str, Any]], output_csv: str, with_profiles: bool) -> None:
    fieldnames = ["team", "number", "name", "link"]
    if with_profiles:
        fieldnames += ["kana"] + list(PROFILE_LABELS)

    with open(output_csv, "w", newline="", encoding="utf-8-sig") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow({k: r.get(k, "") for k in fieldnames})


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    os.makedirs(EXPORT_DIR, exist_ok=True)
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=LOG_FILE,
    )

    output_csv = os.path.join(EXPORT_DIR, f"{args.output or DEFAULT_OUTPUT}.csv")

    rows = collect_rows(args)
    if not rows:
        logger.warning("No rows generated, nothing to write.")
        return 1

    write_csv(rows, output_csv, args.profiles)
    logger.info("Wrote %d player rows to: %s", len(rows), output_csv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
