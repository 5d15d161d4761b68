"""
Shot data loading.

CSV layout, one row per shot:

    team,xg
    Arsenal,0.76
    Manchester United,0.63
    ...

Extra columns (minute, player, …) are ignored.
"""
import logging
from pathlib import Path

import pandas as pd

from xgoals.distribution import InvalidInput, validate_parameters

log = logging.getLogger("xgoals.shots")

REQUIRED_COLUMNS = ("team", "xg")


# Arsenal vs Manchester United, from "The Expected Goals Philosophy"
# (James Tippett), where the outcome split is estimated by simulation.
EXAMPLE_SHOTS: dict[str, list[float]] = {
    "Arsenal": [
        0.02, 0.02, 0.03, 0.04, 0.04, 0.05, 0.06,
        0.07, 0.09, 0.10, 0.12, 0.13, 0.76,
    ],
    "Manchester United": [
        0.01, 0.02, 0.02, 0.02, 0.03, 0.05, 0.05,
        0.05, 0.06, 0.22, 0.30, 0.43, 0.48, 0.63,
    ],
}


def load_shots(path: Path | str) -> dict[str, list[float]]:
    """Read a shot CSV into {team: [xg, …]}, teams in order of first appearance.

    Raises:
        InvalidInput: if the file is not a readable CSV, a required column
            is missing, a team name is blank or an xg value is not a
            probability.
    """
    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise InvalidInput(f"{path}: unreadable CSV: {exc}") from exc

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"{path}: missing column(s) {', '.join(missing)}")

    blank = df.index[df["team"].isna()]
    if len(blank):
        # header is line 1
        raise InvalidInput(f"{path}: line {blank[0] + 2}: blank team name")

    shots: dict[str, list[float]] = {}
    for team, group in df.groupby("team", sort=False):
        try:
            shots[str(team)] = validate_parameters(group["xg"].tolist())
        except InvalidInput as exc:
            raise InvalidInput(f"{path}: team {team!r}: {exc}") from exc

    log.info("loaded %d shots for %d team(s) from %s", len(df), len(shots), path)
    return shots
