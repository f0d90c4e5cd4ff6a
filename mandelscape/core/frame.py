"""
Frame assembly: sample -> rotate/project -> depth sort -> drawables.

`render_batch` is what the viewer calls every tick; `render_frame` and
`project_and_sort` give the same result as plain Python objects.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .animation import AnimationParams
from .depth import depth_order
from .profiles import VisualProfile
from .projection import Rotation, project_points, project_rotated, rotate
from .sampler import ColoredPoint, PointCloud, sample_cloud


@dataclass(frozen=True)
class DrawablePoint:
    """One circle for the render sink."""
    screen_x: float
    screen_y: float
    radius: float
    color: str
    opacity: float


@dataclass
class DrawableBatch:
    """Array form of a depth-sorted drawable list."""
    screen_x: np.ndarray
    screen_y: np.ndarray
    depth: np.ndarray
    colors: np.ndarray
    radius: float
    opacity: float
    cloud: Optional[PointCloud] = None  # the sampled frame, in lattice order

    def __len__(self) -> int:
        return len(self.screen_x)

    @property
    def params(self) -> Optional[AnimationParams]:
        return self.cloud.params if self.cloud is not None else None

    @property
    def offsets(self) -> np.ndarray:
        """(N, 2) screen positions, as matplotlib collections expect."""
        return np.column_stack([self.screen_x, self.screen_y])

    def to_points(self) -> List[DrawablePoint]:
        return [
            DrawablePoint(float(x), float(y), self.radius, str(c), self.opacity)
            for x, y, c in zip(self.screen_x, self.screen_y, self.colors)
        ]


def render_batch(t: float, rotation: Rotation, profile: VisualProfile) -> DrawableBatch:
    """Render one frame at time t (ms) seen through rotation."""
    cloud = sample_cloud(t, profile)
    sx, sy, depth = project_points(cloud.x, cloud.y, cloud.z, rotation,
                                   profile.projection, profile.focal_length)
    order = depth_order(depth)

    return DrawableBatch(
        screen_x=sx[order],
        screen_y=sy[order],
        depth=depth[order],
        colors=cloud.colors[order],
        radius=profile.point_radius,
        opacity=profile.opacity,
        cloud=cloud,
    )


def render_frame(t: float, rotation: Rotation, profile: VisualProfile) -> List[DrawablePoint]:
    """Render one frame as a flat, back-to-front list of DrawablePoints."""
    return render_batch(t, rotation, profile).to_points()


def project_and_sort(points: Sequence[ColoredPoint], rotation: Rotation,
                     profile: VisualProfile) -> List[DrawablePoint]:
    """Project already-sampled points and order them back-to-front."""
    rotated = [(rotate(point.position, rotation), point) for point in points]
    rotated.sort(key=lambda item: item[0].z)

    drawables = []
    for r, point in rotated:
        x, y = project_rotated(r, profile.projection, profile.focal_length)
        drawables.append(DrawablePoint(x, y, profile.point_radius, point.color, profile.opacity))
    return drawables
