"""Synthetic point clouds sampled from canonical manifolds."""

import logging

from .point_cloud import PointCloud, ManifoldDim
from .noise import (
    NoiseRange,
    as_noise_range,
    make_rng,
    add_uniform_noise,
)
from .samplers import (
    # 1D Generators
    generate_circle,
    # 2D Generators
    generate_sphere,
    generate_torus,
    # 3D Generators
    generate_ball_volume,
    # Utilities
    get_all_generators,
    get_generator,
    get_shapes_by_dimension,
    get_ambient_dimension,
    generate_dataset,
)
from .datasets import PointCloudDataset

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'PointCloud',
    'ManifoldDim',
    'NoiseRange',
    'as_noise_range',
    'make_rng',
    'add_uniform_noise',
    'generate_circle',
    'generate_sphere',
    'generate_torus',
    'generate_ball_volume',
    'get_all_generators',
    'get_generator',
    'get_shapes_by_dimension',
    'get_ambient_dimension',
    'generate_dataset',
    'PointCloudDataset',
]
