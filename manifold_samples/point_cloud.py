"""
Point cloud container shared by all samplers.

A cloud is an (N, D) float64 array plus light metadata describing which
manifold it was drawn from. D is 2 for planar curves and 3 otherwise.
"""

import numpy as np
import torch
from typing import Tuple, Optional
from dataclasses import dataclass
from enum import Enum


class ManifoldDim(Enum):
    """Intrinsic dimension of the sampled manifold."""
    CURVE_1D = 1
    SURFACE_2D = 2
    VOLUME_3D = 3


@dataclass
class PointCloud:
    """Point cloud with metadata."""
    points: np.ndarray  # (N, D) array of points
    normals: Optional[np.ndarray] = None  # (N, D) unit normals at the clean samples
    name: str = ""
    manifold_dim: ManifoldDim = ManifoldDim.SURFACE_2D

    def __len__(self) -> int:
        return self.num_points

    @property
    def num_points(self) -> int:
        return self.points.shape[0]

    @property
    def dim(self) -> int:
        """Ambient dimension D."""
        return self.points.shape[1]

    @property
    def bbox(self) -> Tuple[np.ndarray, np.ndarray]:
        """Bounding box (min, max). Undefined for an empty cloud."""
        if self.num_points == 0:
            raise ValueError("Bounding box of an empty point cloud is undefined")
        return self.points.min(axis=0), self.points.max(axis=0)

    @property
    def center(self) -> np.ndarray:
        """Centroid of point cloud."""
        if self.num_points == 0:
            return np.zeros(self.dim)
        return self.points.mean(axis=0)

    @property
    def scale(self) -> float:
        """Maximum extent from center."""
        if self.num_points == 0:
            return 0.0
        centered = self.points - self.center
        return float(np.max(np.linalg.norm(centered, axis=1)))

    def normalize(self, target_scale: float = 1.0) -> 'PointCloud':
        """Return a copy centered at the origin with maximum extent target_scale."""
        scale = self.scale
        if scale == 0.0:
            return PointCloud(self.points - self.center, self.normals,
                              self.name, self.manifold_dim)
        centered = self.points - self.center
        scaled = centered / scale * target_scale
        normals = self.normals  # Normals are direction vectors, don't scale
        return PointCloud(scaled, normals, self.name, self.manifold_dim)

    def as_tensor(self, dtype: torch.dtype = torch.float32) -> torch.Tensor:
        """Copy the points into a torch tensor of shape (N, D)."""
        return torch.tensor(self.points, dtype=dtype)
