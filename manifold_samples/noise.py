"""
Uniform coordinate noise and random generator handling.

Every sampler finishes by calling add_uniform_noise on the freshly built
(N, D) array. Noise is described by an optional NoiseRange:

    None                  -> points returned untouched
    NoiseRange(lo, hi)    -> each coordinate gets an independent U[lo, hi) offset

Randomness is always passed explicitly. `rng` may be None (fresh generator
seeded from OS entropy), an integer seed, or a numpy Generator which is used
as is, so one generator can be threaded through several calls.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

RngLike = Union[None, int, np.random.Generator]
NoiseLike = Union[None, 'NoiseRange', Tuple[float, float]]


@dataclass(frozen=True)
class NoiseRange:
    """Half-open interval [low, high) for additive uniform noise."""
    low: float
    high: float

    def __post_init__(self):
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise ValueError(
                f"Noise bounds must be finite, got [{self.low}, {self.high})")
        if self.low >= self.high:
            raise ValueError(
                f"Noise range must satisfy low < high, got [{self.low}, {self.high})")

    @property
    def width(self) -> float:
        return self.high - self.low


def as_noise_range(noise: NoiseLike) -> Optional[NoiseRange]:
    """Coerce None, a NoiseRange or a (low, high) pair into Optional[NoiseRange]."""
    if noise is None or isinstance(noise, NoiseRange):
        return noise
    try:
        low, high = noise
    except (TypeError, ValueError):
        raise ValueError(f"Expected a (low, high) pair for noise, got {noise!r}") from None
    return NoiseRange(float(low), float(high))


def make_rng(rng: RngLike = None) -> np.random.Generator:
    """Return a numpy Generator for None, an int seed, or an existing Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def add_uniform_noise(points: np.ndarray,
                      noise: NoiseLike,
                      rng: RngLike = None) -> None:
    """
    Perturb every coordinate of `points` in place.

    Args:
        points: (N, D) float array, modified in place
        noise: None for no perturbation, or the interval [low, high)
        rng: Random generator or seed

    No random numbers are drawn when noise is None.
    """
    noise = as_noise_range(noise)
    if noise is None:
        return
    if points.ndim != 2:
        raise ValueError(f"Expected points to have shape (N, D), got {points.shape}")

    rng = make_rng(rng)
    points += rng.uniform(noise.low, noise.high, size=points.shape)
    logger.debug("Applied U[%g, %g) noise to %d points", noise.low, noise.high,
                 points.shape[0])
