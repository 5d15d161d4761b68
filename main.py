#!/usr/bin/env python3
"""
Expected goals match report, main entry point.

Prints each side's xG, the exact W/D/L distribution for the home side
and both sides' expected points.

Usage:
    python main.py                                  # built-in Arsenal vs Man Utd example
    python main.py --shots shots.csv                # first two teams in the file
    python main.py --shots shots.csv --home A --away B
    python main.py --json                           # machine-readable output
"""
import argparse
import json
import logging
import sys
from typing import Optional

from logging_config import setup_logging
from xgoals import InvalidInput, MatchSummary, summarize_match
from xgoals.shots import EXAMPLE_SHOTS, load_shots

log = logging.getLogger("main")

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def pick_teams(
    shots: dict[str, list[float]],
    home: Optional[str],
    away: Optional[str],
) -> tuple[str, str]:
    """Resolve the two sides, defaulting to the first two teams in `shots`."""
    teams = list(shots)
    for name in (home, away):
        if name is not None and name not in shots:
            raise InvalidInput(f"unknown team {name!r} (have: {', '.join(teams)})")

    if home is None:
        home = next((t for t in teams if t != away), None)
    if away is None:
        away = next((t for t in teams if t != home), None)
    if home is None or away is None or home == away:
        raise InvalidInput(f"need two distinct teams, have: {', '.join(teams) or 'none'}")
    return home, away


def print_report(summary: MatchSummary) -> None:
    print(f"{summary.home} xG = {summary.home_xg:.2f}  ({summary.home_shots} shots)")
    print(f"{summary.away} xG = {summary.away_xg:.2f}  ({summary.away_shots} shots)")
    print(
        f"W/D/L distribution for {summary.home}: "
        f"{summary.win:.4f} / {summary.draw:.4f} / {summary.loss:.4f}"
    )
    print(f"{summary.home} xP: {summary.home_xp:.3f}")
    print(f"{summary.away} xP: {summary.away_xp:.3f}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Expected goals match report")
    parser.add_argument("--shots", type=str, default=None,
                        help="CSV with one row per shot (columns: team, xg)")
    parser.add_argument("--home", type=str, default=None,
                        help="Home team name, default: first team in the file")
    parser.add_argument("--away", type=str, default=None,
                        help="Away team name, default: next team in the file")
    parser.add_argument("--json", action="store_true",
                        help="Print the summary as JSON")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Override LOG_LEVEL from the environment")
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    try:
        shots = load_shots(args.shots) if args.shots else EXAMPLE_SHOTS
        home, away = pick_teams(shots, args.home, args.away)
        summary = summarize_match(home, shots[home], away, shots[away])
    except (InvalidInput, OSError) as exc:
        log.error("bad input: %s", exc)
        return EXIT_BAD_INPUT

    if args.json:
        print(json.dumps(summary.as_dict(), indent=2))
    else:
        print_report(summary)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
