import itertools
import random

import pytest


def brute_force_pmf(p):
    """PMF by enumerating every success/failure pattern (2^n terms)."""
    pmf = [0.0] * (len(p) + 1)
    for outcome in itertools.product((0, 1), repeat=len(p)):
        prob = 1.0
        for hit, pj in zip(outcome, p):
            prob *= pj if hit else 1.0 - pj
        pmf[sum(outcome)] += prob
    return pmf


def sequential_pmf(p):
    """PMF by adding one trial at a time (O(n^2), no cancellation)."""
    pmf = [1.0]
    for pj in p:
        nxt = [0.0] * (len(pmf) + 1)
        for k, x in enumerate(pmf):
            nxt[k] += x * (1.0 - pj)
            nxt[k + 1] += x * pj
        pmf = nxt
    return pmf


@pytest.fixture
def rng():
    return random.Random(20231019)


@pytest.fixture
def random_vectors(rng):
    """Up to 20 shots, xG anywhere in [0, 1]."""
    return [
        [round(rng.uniform(0.0, 1.0), 3) for _ in range(rng.randint(0, 20))]
        for _ in range(200)
    ]


@pytest.fixture
def mixed_vectors(rng):
    """20-40 shots: mostly low xG with a few big chances above 0.6."""
    vectors = []
    for _ in range(100):
        n = rng.randint(20, 40)
        vectors.append([
            rng.uniform(0.6, 1.0) if rng.random() < 0.25 else rng.uniform(0.0, 0.15)
            for _ in range(n)
        ])
    return vectors


@pytest.fixture
def high_vectors(rng):
    """20-40 shots, every one above 0.6 xG."""
    return [
        [rng.uniform(0.6, 1.0) for _ in range(rng.randint(20, 40))]
        for _ in range(50)
    ]


@pytest.fixture
def arsenal():
    return [0.02, 0.02, 0.03, 0.04, 0.04, 0.05, 0.06, 0.07, 0.09, 0.10, 0.12, 0.13, 0.76]


@pytest.fixture
def man_utd():
    return [0.01, 0.02, 0.02, 0.02, 0.03, 0.05, 0.05, 0.05, 0.06, 0.22, 0.30, 0.43, 0.48, 0.63]
