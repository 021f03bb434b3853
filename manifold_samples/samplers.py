"""
Point Cloud Samplers for Canonical Manifolds

Generates point clouds on low-dimensional manifolds, intended as
benchmark inputs for topological and geometric analysis:
- 1D: unit circle in the plane (evenly spaced, deterministic)
- 2D: unit sphere surface, torus surface
- 3D: solid unit ball

Every generator builds the clean points first and then applies optional
uniform noise with the same random generator, so for a fixed seed the
clean samples do not depend on whether noise was requested.
"""

import logging
import operator
from typing import Callable, Dict, List, Optional

import numpy as np

from .noise import NoiseLike, RngLike, add_uniform_noise, as_noise_range, make_rng
from .point_cloud import ManifoldDim, PointCloud

logger = logging.getLogger(__name__)

TWO_PI = 2 * np.pi


def _check_count(value, name: str = "n_points") -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _unit_directions(n_points: int, rng: np.random.Generator) -> np.ndarray:
    """
    Uniform random unit vectors in R^3 (Archimedes' hat-box construction).

        theta ~ U[0, 2π),  z ~ U[-1, 1)
        (x, y, z) = (√(1-z²) cos θ, √(1-z²) sin θ, z)

    Uniform z on the axis gives uniform area on the sphere because every
    horizontal band of equal height has equal area.
    """
    theta = rng.uniform(0.0, TWO_PI, n_points)
    z = rng.uniform(-1.0, 1.0, n_points)
    r = np.sqrt(1.0 - z * z)
    return np.stack([r * np.cos(theta), r * np.sin(theta), z], axis=1)


# =============================================================================
# 1D MANIFOLDS (Curves)
# =============================================================================

def generate_circle(n_points: int = 1024, noise: NoiseLike = None,
                    rng: RngLike = None) -> PointCloud:
    """
    Generate evenly spaced points on the unit circle in the plane.

    Point k sits at angle 2πk/n_points, starting at (1, 0) and moving
    counter-clockwise. Placement is deterministic; only the noise is random.

    Args:
        n_points: Number of points (0 gives an empty (0, 2) cloud)
        noise: Optional (low, high) interval for per-coordinate uniform noise
        rng: Random generator or seed used for the noise

    Returns:
        PointCloud of shape (n_points, 2) on the 1D circle manifold
    """
    n_points = _check_count(n_points)
    noise = as_noise_range(noise)

    # linspace never divides by n_points, so n_points == 0 is safe
    t = np.linspace(0, TWO_PI, n_points, endpoint=False)
    points = np.stack([np.cos(t), np.sin(t)], axis=1)

    # Normals point radially outward
    normals = points.copy()

    add_uniform_noise(points, noise, rng)
    logger.debug("circle: %d points, noise=%s", n_points, noise)

    return PointCloud(points, normals, "circle", ManifoldDim.CURVE_1D)


# =============================================================================
# 2D MANIFOLDS (Surfaces)
# =============================================================================

def generate_sphere(n_points: int = 1024, noise: NoiseLike = None,
                    rng: RngLike = None) -> PointCloud:
    """
    Generate points uniformly distributed on the unit sphere surface.

    Args:
        n_points: Number of points to sample
        noise: Optional (low, high) interval for per-coordinate uniform noise
        rng: Random generator or seed

    Returns:
        PointCloud of shape (n_points, 3) on the 2D sphere manifold
    """
    n_points = _check_count(n_points)
    noise = as_noise_range(noise)
    rng = make_rng(rng)

    # z = ±1 collapses to a pole (r = 0), a legitimate sample
    points = _unit_directions(n_points, rng)
    normals = points.copy()

    add_uniform_noise(points, noise, rng)
    logger.debug("sphere: %d points, noise=%s", n_points, noise)

    return PointCloud(points, normals, "sphere", ManifoldDim.SURFACE_2D)


def generate_torus(n_points: int = 1024, major: float = 1.0, minor: float = 0.3,
                   noise: NoiseLike = None, rng: RngLike = None) -> PointCloud:
    """
    Generate points on a torus surface around the z axis.

    Parametrization with u, v ~ U[0, 2π):
        x = (R + r cos v) cos u
        y = (R + r cos v) sin u
        z = r sin v

    Note: u and v are uniform over the parameter square, not over the
    surface. The area element carries a factor (R + r cos v), so points are
    denser on the inner side of the tube than a surface-uniform sampler
    would give.

    Args:
        n_points: Number of points to sample
        major: Major radius R (torus axis to tube center), must be > 0
        minor: Minor radius r (tube radius), must be > 0
        noise: Optional (low, high) interval for per-coordinate uniform noise
        rng: Random generator or seed

    Returns:
        PointCloud of shape (n_points, 3) on the 2D torus manifold
    """
    if not (major > 0 and minor > 0):
        raise ValueError(
            f"Torus radii must be positive, got major={major}, minor={minor}")
    n_points = _check_count(n_points)
    noise = as_noise_range(noise)
    rng = make_rng(rng)

    u = rng.uniform(0.0, TWO_PI, n_points)
    v = rng.uniform(0.0, TWO_PI, n_points)

    # Torus parametric equations
    ring = major + minor * np.cos(v)
    x = ring * np.cos(u)
    y = ring * np.sin(u)
    z = minor * np.sin(v)

    points = np.stack([x, y, z], axis=1)

    # Surface normals
    nx = np.cos(v) * np.cos(u)
    ny = np.cos(v) * np.sin(u)
    nz = np.sin(v)
    normals = np.stack([nx, ny, nz], axis=1)

    add_uniform_noise(points, noise, rng)
    logger.debug("torus(R=%g, r=%g): %d points, noise=%s",
                 major, minor, n_points, noise)

    return PointCloud(points, normals, "torus", ManifoldDim.SURFACE_2D)


# =============================================================================
# 3D MANIFOLDS (Volumes)
# =============================================================================

def generate_ball_volume(n_points: int = 1024, noise: NoiseLike = None,
                         rng: RngLike = None) -> PointCloud:
    """
    Generate points uniformly inside the unit ball (solid sphere).

    Direction comes from the sphere sampler; the radius is u^(1/3) with
    u ~ U[0, 1). The cube root cancels the r² growth of spherical shells,
    so the density is uniform per unit volume. Using u directly would pile
    points up near the origin.

    Args:
        n_points: Number of points to sample
        noise: Optional (low, high) interval for per-coordinate uniform noise
        rng: Random generator or seed

    Returns:
        PointCloud of shape (n_points, 3) in the 3D ball volume
    """
    n_points = _check_count(n_points)
    noise = as_noise_range(noise)
    rng = make_rng(rng)

    directions = _unit_directions(n_points, rng)
    radii = np.cbrt(rng.random(n_points))
    points = radii[:, None] * directions

    add_uniform_noise(points, noise, rng)
    logger.debug("ball_volume: %d points, noise=%s", n_points, noise)

    return PointCloud(points, None, "ball_volume", ManifoldDim.VOLUME_3D)


# =============================================================================
# DATASET COLLECTION
# =============================================================================

def get_all_generators() -> Dict[str, Callable[..., PointCloud]]:
    """Return dictionary of all point cloud generators."""
    return {
        # 1D Curves
        "circle": generate_circle,
        # 2D Surfaces
        "sphere": generate_sphere,
        "torus": generate_torus,
        # 3D Volumes
        "ball_volume": generate_ball_volume,
    }


def get_generator(name: str) -> Callable[..., PointCloud]:
    generators = get_all_generators()
    if name not in generators:
        raise ValueError(f"Unknown shape: {name}. Available: {list(generators)}")
    return generators[name]


def generate_dataset(shapes: Optional[List[str]] = None, n_points: int = 1024,
                     n_samples_per_shape: int = 1,
                     noise: NoiseLike = None,
                     rng: RngLike = None) -> List[PointCloud]:
    """
    Generate a dataset of point clouds.

    Args:
        shapes: List of shape names (None = all shapes)
        n_points: Points per cloud
        n_samples_per_shape: Number of samples per shape type
        noise: Optional (low, high) interval for per-coordinate uniform noise
        rng: Random generator or seed shared by all clouds

    Returns:
        List of PointCloud objects, grouped by shape in the given order
    """
    if shapes is None:
        shapes = list(get_all_generators())

    # Validate everything before sampling anything
    selected = [get_generator(name) for name in shapes]
    n_points = _check_count(n_points)
    n_samples_per_shape = _check_count(n_samples_per_shape, "n_samples_per_shape")
    noise = as_noise_range(noise)
    rng = make_rng(rng)

    dataset = []
    for generator in selected:
        for _ in range(n_samples_per_shape):
            dataset.append(generator(n_points=n_points, noise=noise, rng=rng))

    logger.debug("Generated dataset of %d clouds over %s", len(dataset), shapes)
    return dataset


def get_shapes_by_dimension(dim: int) -> List[str]:
    """Get shape names filtered by intrinsic manifold dimension."""
    result = []
    for name, gen in get_all_generators().items():
        pc = gen(n_points=0)  # Empty sample still carries the metadata
        if pc.manifold_dim.value == dim:
            result.append(name)
    return result


def get_ambient_dimension(name: str) -> int:
    """Number of coordinates per point produced by the named shape."""
    return get_generator(name)(n_points=0).dim
