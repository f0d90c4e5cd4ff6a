"""
Per-frame statistics of the sampled lattice (shown in the viewer HUD and
logged by the CLI).
"""

import numpy as np
from dataclasses import dataclass, asdict
from scipy import ndimage

from .profiles import VisualProfile
from .sampler import PointCloud


@dataclass(frozen=True)
class FrameMetrics:
    interior_fraction: float   # Share of samples in the set
    mean_escape: float         # Mean normalized escape time of escaped samples
    max_height: float
    island_count: int          # Connected in-set regions on the lattice
    region: int

    def to_dict(self) -> dict:
        return asdict(self)


def compute_frame_metrics(cloud: PointCloud, profile: VisualProfile) -> FrameMetrics:
    interior = cloud.iterations >= profile.max_iter
    escaped = cloud.iterations[~interior]

    if escaped.size:
        mean_escape = float(np.mean(escaped) / profile.max_iter)
    else:
        mean_escape = 0.0

    _, island_count = ndimage.label(interior.reshape(cloud.shape))

    return FrameMetrics(
        interior_fraction=float(np.mean(interior)),
        mean_escape=mean_escape,
        max_height=float(np.max(cloud.z)) if cloud.n_points else 0.0,
        island_count=int(island_count),
        region=cloud.params.region,
    )
