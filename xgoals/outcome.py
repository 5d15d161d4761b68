"""
Match outcome distribution from per-shot scoring probabilities.

Each side's goal count is an independent Poisson binomial variable
(one Bernoulli trial per shot). Given both mass functions, the 1X2
split is a double sum over the joint table:

    P(A > B) = Σ_i Σ_{j<i} P_A(i) P_B(j)
    P(A = B) = Σ_i         P_A(i) P_B(i)
    P(A < B) = Σ_i Σ_{j>i} P_A(i) P_B(j)

The sum runs over the shorter side's mass function in the outer loop.
When A has more shots than B, the arguments are swapped and the
win/loss components of the result are exchanged back.
"""
import logging
from typing import Sequence

from xgoals.distribution import compute_distribution, validate_parameters
from xgoals.state import MatchSummary

log = logging.getLogger("xgoals.outcome")


# ═══════════════════════════════════════════════════════════════════════
#  Tunable Constants
# ═══════════════════════════════════════════════════════════════════════

POINTS_FOR_WIN = 3
"""League points awarded for a win."""

POINTS_FOR_DRAW = 1
"""League points awarded for a draw."""


# ═══════════════════════════════════════════════════════════════════════
#  Core
# ═══════════════════════════════════════════════════════════════════════

def compute_outcome_distribution(
    a: Sequence[float],
    b: Sequence[float],
) -> tuple[float, float, float]:
    """Compute P(A > B), P(A = B), P(A < B) for two independent
    Poisson binomial variables.

    Args:
        a: Parameters of A (e.g. home shot xG values).
        b: Parameters of B (e.g. away shot xG values).

    Returns:
        (p_greater, p_equal, p_less), summing to 1.0 within float error.

    Raises:
        InvalidInput: if either vector holds a value outside [0, 1].
    """
    # Loop bounds below need B to have at least as many trials as A
    if len(a) > len(b):
        p_less, p_equal, p_greater = compute_outcome_distribution(b, a)
        return p_greater, p_equal, p_less

    dist_a = compute_distribution(a)
    dist_b = compute_distribution(b)

    p_greater = 0.0
    p_equal = 0.0
    p_less = 0.0

    for i, pa in enumerate(dist_a):
        p_equal += pa * dist_b[i]

        for j in range(i - 1, -1, -1):
            p_greater += pa * dist_b[j]

        for j in range(i + 1, len(dist_b)):
            p_less += pa * dist_b[j]

    return p_greater, p_equal, p_less


# ═══════════════════════════════════════════════════════════════════════
#  Summary Statistics
# ═══════════════════════════════════════════════════════════════════════

def expected_goals(p: Sequence[float]) -> float:
    """Expected goals (xG): the sum of the per-shot probabilities."""
    return sum(validate_parameters(p))


def expected_points(outcome: tuple[float, float, float]) -> tuple[float, float]:
    """Expected league points for both sides from a (W, D, L) split.

    Returns:
        (xP for A, xP for B).
    """
    win, draw, loss = outcome
    xp_a = win * POINTS_FOR_WIN + draw * POINTS_FOR_DRAW
    xp_b = loss * POINTS_FOR_WIN + draw * POINTS_FOR_DRAW
    return xp_a, xp_b


def summarize_match(
    home: str,
    home_shots: Sequence[float],
    away: str,
    away_shots: Sequence[float],
) -> MatchSummary:
    """xG, outcome distribution and xP for one match, from home's side."""
    outcome = compute_outcome_distribution(home_shots, away_shots)
    home_xp, away_xp = expected_points(outcome)

    summary = MatchSummary(
        home=home,
        away=away,
        home_shots=len(home_shots),
        away_shots=len(away_shots),
        home_xg=expected_goals(home_shots),
        away_xg=expected_goals(away_shots),
        win=outcome[0],
        draw=outcome[1],
        loss=outcome[2],
        home_xp=home_xp,
        away_xp=away_xp,
    )
    log.debug("summary: %s", summary)
    return summary
