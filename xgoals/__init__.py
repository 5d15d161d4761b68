"""
Expected goals outcome engine.

Exact win/draw/loss probabilities for a match, given each side's
per-shot scoring probabilities. No simulation.
"""
from xgoals.distribution import InvalidInput, compute_distribution
from xgoals.outcome import (
    compute_outcome_distribution,
    expected_goals,
    expected_points,
    summarize_match,
)
from xgoals.state import MatchSummary

__all__ = [
    "InvalidInput",
    "compute_distribution",
    "compute_outcome_distribution",
    "expected_goals",
    "expected_points",
    "summarize_match",
    "MatchSummary",
]
