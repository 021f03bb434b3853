# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from manifold_samples import (
    generate_ball_volume,
    generate_circle,
    generate_sphere,
    generate_torus,
)

SEED = 20240607


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic generator for a single test."""
    return np.random.default_rng(SEED)


@pytest.fixture(params=["circle", "sphere", "ball_volume", "torus"])
def sampler(request):
    """Each sampler as a callable taking (n_points, noise=..., rng=...)."""
    return {
        "circle": generate_circle,
        "sphere": generate_sphere,
        "ball_volume": generate_ball_volume,
        "torus": lambda n_points, **kw: generate_torus(n_points, 2.0, 0.5, **kw),
    }[request.param]
