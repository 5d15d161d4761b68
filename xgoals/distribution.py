"""
Poisson binomial probability mass function.

Exact PMF of the number of successes in independent, non-identical
Bernoulli trials (e.g. goals from a list of per-shot xG values), using
the recursive identity

    P(0) = Π (1 − p_j)
    P(k) = (1/k) Σ_{i=1..k} (−1)^(i+1) T(i) P(k−i)
    T(i) = Σ_j (p_j / (1 − p_j))^i

Cost is O(n²) in the number of trials. No simulation, no enumeration
of the 2^n trial outcomes.

The alternating sum is only well conditioned while every ratio
p_j / (1 − p_j) is at most 1. Trials are therefore split at p = 0.5:
    - low trials (p_j ≤ 0.5) go through the recursion as they are;
    - high trials (p_j > 0.5) go through it as misses, q_j = 1 − p_j,
      and the resulting PMF is reversed (k misses = n_high − k goals).
The two PMFs are then convolved.

Certain successes (p_j = 1.0) are removed first and the final PMF is
shifted right by one index per certain success.
"""
import math
import logging
from typing import Sequence

log = logging.getLogger("xgoals.distribution")

SPLIT_PROBABILITY = 0.5
"""Trials above this go through the recursion as misses (ratio stays ≤ 1)."""


class InvalidInput(ValueError):
    """Raised when a parameter vector holds a value that is not a probability."""


def validate_parameters(p: Sequence[float]) -> list[float]:
    """Copy `p` into a list of floats, rejecting anything outside [0, 1]."""
    checked = []
    for idx, value in enumerate(p):
        try:
            pj = float(value)
        except (TypeError, ValueError):
            raise InvalidInput(f"p[{idx}]={value!r} is not a number") from None
        if math.isnan(pj) or pj < 0.0 or pj > 1.0:
            raise InvalidInput(f"p[{idx}]={pj!r} is outside [0, 1]")
        checked.append(pj)
    return checked


def _compute_t(p: list[float]) -> list[float]:
    """The T-function of the recursion, T(0) … T(n).

    T(0) is the number of trials: every trial contributes 1 to the
    zeroth power, including p_j = 0.
    """
    ratios = [pj / (1.0 - pj) for pj in p]
    t = [float(len(p))]
    for i in range(1, len(p) + 1):
        t.append(sum(r ** i for r in ratios))
    return t


def _recursive_pmf(p: list[float]) -> list[float]:
    """PMF of trials with p_j < 1 straight from the recursion."""
    t = _compute_t(p)

    pmf = [0.0] * (len(p) + 1)
    pmf[0] = 1.0
    for pj in p:
        pmf[0] *= 1.0 - pj

    for k in range(1, len(pmf)):
        acc = 0.0
        for i in range(1, k + 1):
            term = t[i] * pmf[k - i]
            acc += term if i % 2 == 1 else -term
        pmf[k] = acc / k

    return pmf


def _convolve(x: list[float], y: list[float]) -> list[float]:
    """PMF of the sum of two independent counts."""
    out = [0.0] * (len(x) + len(y) - 1)
    for i, px in enumerate(x):
        for j, py in enumerate(y):
            out[i + j] += px * py
    return out


def compute_distribution(p: Sequence[float]) -> list[float]:
    """Probability mass function of a Poisson binomial random variable.

    Args:
        p: Per-trial success probabilities, each in [0, 1].

    Returns:
        List of length len(p) + 1; entry k is P(count = k).
        An empty `p` gives [1.0] (zero trials, certainly zero successes).

    Raises:
        InvalidInput: if any entry is not a number in [0, 1].
    """
    probs = validate_parameters(p)

    uncertain = [pj for pj in probs if pj < 1.0]
    certain = len(probs) - len(uncertain)
    if certain:
        log.debug("%d certain success(es), shifting PMF by %d", certain, certain)

    # ── Likely trials: recurse on the failures, then reverse ──────
    low = [pj for pj in uncertain if pj <= SPLIT_PROBABILITY]
    high_misses = [1.0 - pj for pj in uncertain if pj > SPLIT_PROBABILITY]

    pmf_low = _recursive_pmf(low)
    pmf_high = _recursive_pmf(high_misses)[::-1]

    return [0.0] * certain + _convolve(pmf_low, pmf_high)
