"""
Painter's-algorithm ordering.

Larger post-rotation z is nearer the viewer (the perspective divide uses the
same direction), so ascending z is back-to-front. Sorts are stable: equal depths
keep lattice order.
"""

import numpy as np
from typing import List, Optional, Sequence

from .projection import Rotation, rotate
from .sampler import ColoredPoint


def depth_of(point: ColoredPoint, rotation: Optional[Rotation] = None) -> float:
    """Post-rotation z, or the raw z when no rotation is given."""
    if rotation is None:
        return point.position.z
    return rotate(point.position, rotation).z


def sort_by_depth(points: Sequence[ColoredPoint],
                  rotation: Optional[Rotation] = None) -> List[ColoredPoint]:
    """Stable ascending sort by depth."""
    return sorted(points, key=lambda p: depth_of(p, rotation))


def depth_order(depth: np.ndarray) -> np.ndarray:
    """Indices that sort depth ascending, stable."""
    return np.argsort(depth, kind='stable')
