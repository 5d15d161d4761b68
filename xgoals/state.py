"""
Match summary dataclass.

Pure data container: no logic, no side effects.
Built by the outcome layer, consumed by the CLI for printing and JSON.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSummary:
    """Outcome distribution and summary statistics for one match.

    Probabilities are from the home side's point of view:
    win = P(home > away), draw = P(home = away), loss = P(home < away).
    """
    home: str
    away: str
    home_shots: int
    away_shots: int
    home_xg: float
    away_xg: float

    win: float
    draw: float
    loss: float

    # ── Derived: expected points ─────────────────────────────────
    home_xp: float = 0.0
    away_xp: float = 0.0

    def as_dict(self) -> dict:
        """Flat dict for JSON serialization."""
        return {
            "home": self.home,
            "away": self.away,
            "home_shots": self.home_shots,
            "away_shots": self.away_shots,
            "home_xg": round(self.home_xg, 4),
            "away_xg": round(self.away_xg, 4),
            "win": round(self.win, 6),
            "draw": round(self.draw, 6),
            "loss": round(self.loss, 6),
            "home_xp": round(self.home_xp, 4),
            "away_xp": round(self.away_xp, 4),
        }

    def __str__(self) -> str:
        return (
            f"{self.home} vs {self.away} | "
            f"xG={self.home_xg:.2f}-{self.away_xg:.2f} | "
            f"W={self.win:.4f}  D={self.draw:.4f}  L={self.loss:.4f} | "
            f"xP={self.home_xp:.3f}-{self.away_xp:.3f}"
        )
