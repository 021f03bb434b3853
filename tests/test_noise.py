# tests/test_noise.py
"""Tests for uniform noise and generator handling."""

from __future__ import annotations

import math

import numpy as np
import pytest

from manifold_samples import NoiseRange, add_uniform_noise, as_noise_range, make_rng


def test_noise_range_fields() -> None:
    """NoiseRange keeps its bounds and reports the width."""
    noise = NoiseRange(-0.1, 0.3)
    assert noise.low == -0.1
    assert noise.high == 0.3
    assert noise.width == pytest.approx(0.4)


@pytest.mark.parametrize(
    "low, high",
    [(0.1, 0.1), (0.5, -0.5), (-math.inf, 0.0), (0.0, math.nan)],
)
def test_noise_range_rejects_invalid_bounds(low: float, high: float) -> None:
    """Empty, reversed and non-finite intervals fail on construction."""
    with pytest.raises(ValueError):
        NoiseRange(low, high)


def test_noise_range_is_frozen() -> None:
    noise = NoiseRange(0.0, 1.0)
    with pytest.raises(AttributeError):
        noise.low = 0.5  # type: ignore[misc]


def test_as_noise_range_coercion() -> None:
    """None passes through, pairs become NoiseRange."""
    assert as_noise_range(None) is None
    noise = NoiseRange(0.0, 1.0)
    assert as_noise_range(noise) is noise
    assert as_noise_range((-1, 2)) == NoiseRange(-1.0, 2.0)
    assert as_noise_range([0.0, 0.5]) == NoiseRange(0.0, 0.5)


@pytest.mark.parametrize("bad", [0.1, (0.1,), (0.0, 1.0, 2.0)])
def test_as_noise_range_rejects_non_pairs(bad) -> None:
    with pytest.raises(ValueError):
        as_noise_range(bad)


def test_make_rng_reuses_generator() -> None:
    """An existing Generator is returned untouched."""
    gen = np.random.default_rng(1)
    assert make_rng(gen) is gen


def test_make_rng_seed_is_reproducible() -> None:
    a = make_rng(7).random(5)
    b = make_rng(7).random(5)
    np.testing.assert_array_equal(a, b)
    assert isinstance(make_rng(None), np.random.Generator)


def test_add_uniform_noise_without_range_is_noop(rng: np.random.Generator) -> None:
    """No noise leaves the array and the generator state untouched."""
    points = np.arange(12, dtype=float).reshape(4, 3)
    before = points.copy()
    state = rng.bit_generator.state

    add_uniform_noise(points, None, rng)

    np.testing.assert_array_equal(points, before)
    assert rng.bit_generator.state == state


def test_add_uniform_noise_in_place_within_bounds(rng: np.random.Generator) -> None:
    """Every coordinate moves by an offset inside [low, high)."""
    points = np.zeros((500, 3))
    add_uniform_noise(points, (0.25, 0.5), rng)

    assert points.shape == (500, 3)
    assert np.all(points >= 0.25)
    assert np.all(points < 0.5)
    # Coordinates are perturbed independently
    assert len(np.unique(points)) == points.size


def test_add_uniform_noise_empty_cloud(rng: np.random.Generator) -> None:
    points = np.empty((0, 2))
    add_uniform_noise(points, (-1.0, 1.0), rng)
    assert points.shape == (0, 2)


def test_add_uniform_noise_rejects_flat_array(rng: np.random.Generator) -> None:
    with pytest.raises(ValueError):
        add_uniform_noise(np.zeros(3), (0.0, 1.0), rng)
