"""Torch dataset over the manifold samplers."""

import inspect
import logging
from typing import List, Union

import numpy as np
import torch
from torch.utils.data import Dataset

from .noise import NoiseLike, as_noise_range
from .samplers import _check_count, get_generator

logger = logging.getLogger(__name__)


class PointCloudDataset(Dataset):
    """
    Dataset of sampled point clouds.

    Item idx is drawn from shapes[idx % len(shapes)] with a generator
    seeded from (seed, idx), so an item is the same no matter which worker
    loads it or in which order items are requested.
    """

    def __init__(self, shapes: Union[str, List[str]] = 'sphere', n_samples: int = 1000,
                 n_points: int = 256, noise: NoiseLike = None, seed: int = 0,
                 **shape_kwargs):
        """
        Args:
            shapes: Shape name or list of names (supports multi-shape datasets)
            n_samples: Number of samples in dataset
            n_points: Points per sample
            noise: Optional (low, high) interval for per-coordinate uniform noise
            seed: Base seed; item idx uses the seed sequence (seed, idx)
            **shape_kwargs: Extra generator arguments (e.g. major/minor for torus),
                each forwarded only to the shapes that accept it
        """
        self.shapes = shapes if isinstance(shapes, list) else [shapes]
        if not self.shapes:
            raise ValueError("At least one shape is required")
        n_samples = _check_count(n_samples, "n_samples")
        n_points = _check_count(n_points)
        seed = _check_count(seed, "seed")

        if 'rng' in shape_kwargs:
            raise ValueError("rng is derived from seed; pass seed instead")

        self.n_samples = n_samples
        self.n_points = n_points
        self.noise = as_noise_range(noise)
        self.seed = seed

        self.generators = [get_generator(shape) for shape in self.shapes]

        # Each generator only receives the keyword arguments it declares
        self.generator_kwargs = []
        unused = set(shape_kwargs)
        for generator in self.generators:
            params = inspect.signature(generator).parameters
            kwargs = {k: v for k, v in shape_kwargs.items() if k in params}
            unused -= set(kwargs)
            self.generator_kwargs.append(kwargs)
        if unused:
            raise ValueError(
                f"Arguments {sorted(unused)} are not accepted by any of {self.shapes}")

        # Empty samples check argument values (e.g. torus radii) up front
        dims = {}
        for shape, generator, kwargs in zip(self.shapes, self.generators,
                                            self.generator_kwargs):
            dims[shape] = generator(n_points=0, **kwargs).dim

        # Items must stack into a single batch tensor
        if len(set(dims.values())) > 1:
            raise ValueError(f"Shapes have mixed ambient dimensions: {dims}")
        self.dim = next(iter(dims.values()))

        logger.debug("PointCloudDataset: shapes=%s, n_samples=%d, n_points=%d",
                     self.shapes, n_samples, n_points)

    def __len__(self):
        return self.n_samples

    def __getitem__(self, idx):
        if idx < 0:
            idx += self.n_samples
        if not 0 <= idx < self.n_samples:
            raise IndexError(f"Index {idx} out of range for {self.n_samples} samples")

        which = idx % len(self.generators)
        generator = self.generators[which]
        rng = np.random.default_rng([self.seed, idx])

        pc = generator(n_points=self.n_points, noise=self.noise, rng=rng,
                       **self.generator_kwargs[which])
        return pc.as_tensor(torch.float32)
