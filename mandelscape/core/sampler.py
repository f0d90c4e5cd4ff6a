"""
Grid sampler: fixed lattice -> complex plane -> height + color.

The lattice never changes; each frame only the AnimationParams (computed
once) move it across the complex plane.
"""

import logging
import numpy as np
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from .animation import AnimationParams, params_at
from .coloring import build_palette
from .escape_time import iterate_grid
from .profiles import VisualProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridCoordinate:
    x: float
    y: float


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def length(self) -> float:
        return float(np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))


@dataclass(frozen=True)
class ColoredPoint:
    """One sampled lattice point, ready for projection."""
    position: Point3D
    color: str
    iterations: int = 0
    index: int = 0        # Row-major lattice index


@dataclass
class PointCloud:
    """Array form of a frame's ColoredPoints (row-major lattice order)."""
    x: np.ndarray           # (N,) float64
    y: np.ndarray           # (N,) float64
    z: np.ndarray           # (N,) float64
    iterations: np.ndarray  # (N,) int32
    colors: np.ndarray      # (N,) str
    params: AnimationParams
    shape: Tuple[int, int]  # (rows, cols)

    @property
    def n_points(self) -> int:
        return len(self.x)

    def to_points(self) -> List[ColoredPoint]:
        return [
            ColoredPoint(
                position=Point3D(float(x), float(y), float(z)),
                color=str(color),
                iterations=int(n),
                index=i,
            )
            for i, (x, y, z, n, color) in enumerate(
                zip(self.x, self.y, self.z, self.iterations, self.colors))
        ]


@lru_cache(maxsize=8)
def _lattice_axes(size: int, spacing: float) -> np.ndarray:
    half = (size - 1) * spacing / 2.0
    axis = np.arange(size, dtype=np.float64) * spacing - half
    axis.setflags(write=False)
    return axis


def build_lattice(profile: VisualProfile) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lattice coordinates as flat row-major arrays.

    Returns:
        gx, gy: (size*size,) arrays centred on the origin
    """
    axis = _lattice_axes(profile.lattice_size, profile.lattice_spacing)
    GX, GY = np.meshgrid(axis, axis)
    return GX.ravel(), GY.ravel()


def lattice_coordinates(profile: VisualProfile) -> List[GridCoordinate]:
    gx, gy = build_lattice(profile)
    return [GridCoordinate(float(x), float(y)) for x, y in zip(gx, gy)]


def height_for(iterations, profile: VisualProfile):
    """0 in the set (or when flattened), else iterations * height_per_iteration."""
    if profile.flatten:
        return np.zeros_like(np.asarray(iterations, dtype=np.float64))
    n = np.asarray(iterations, dtype=np.float64)
    return np.where(n >= profile.max_iter, 0.0, n * profile.height_per_iteration)


def sample_cloud(t: float, profile: VisualProfile,
                 params: Optional[AnimationParams] = None) -> PointCloud:
    """Sample the whole lattice at time t (ms)."""
    if params is None:
        params = params_at(t, profile)

    gx, gy = build_lattice(profile)
    real = gx * params.scale + params.offset_x
    imag = gy * params.scale + params.offset_y

    iterations = iterate_grid(real, imag, profile.max_iter)
    heights = height_for(iterations, profile)
    palette = np.asarray(build_palette(profile.max_iter, profile.colors))
    colors = palette[iterations]

    logger.debug(f"t={t:.0f}ms region={params.region} scale={params.scale:.5f} "
                 f"interior={np.mean(iterations == profile.max_iter):.3f}")

    return PointCloud(
        x=gx.copy(),
        y=gy.copy(),
        z=heights,
        iterations=iterations,
        colors=colors,
        params=params,
        shape=(profile.lattice_size, profile.lattice_size),
    )


def sample_frame(t: float, profile: VisualProfile) -> List[ColoredPoint]:
    """Sample the lattice at time t as a list of ColoredPoints."""
    return sample_cloud(t, profile).to_points()
