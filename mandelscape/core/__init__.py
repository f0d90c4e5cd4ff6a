"""
Core Pipeline

Escape time, animation parameters, lattice sampling, rotation/projection,
depth sorting and frame assembly.
"""

from .complex_math import Complex
from .escape_time import iterate, iterate_grid, is_in_set
from .profiles import (
    ColorScheme,
    CameraConfig,
    VisualProfile,
    PROFILES,
    REGIONS,
    get_profile,
)
from .animation import AnimationParams, params_at, region_index
from .coloring import color_for, build_palette, hsl_to_hex
from .sampler import (
    GridCoordinate,
    Point3D,
    ColoredPoint,
    PointCloud,
    build_lattice,
    lattice_coordinates,
    sample_cloud,
    sample_frame,
)
from .projection import (
    Rotation,
    rotate,
    rotate_points,
    project,
    project_points,
    project_rotated,
)
from .depth import sort_by_depth, depth_order
from .frame import (
    DrawablePoint,
    DrawableBatch,
    render_batch,
    render_frame,
    project_and_sort,
)
from .metrics import FrameMetrics, compute_frame_metrics

__all__ = [
    # Arithmetic / escape time
    'Complex',
    'iterate',
    'iterate_grid',
    'is_in_set',
    # Configuration
    'ColorScheme',
    'CameraConfig',
    'VisualProfile',
    'PROFILES',
    'REGIONS',
    'get_profile',
    # Animation
    'AnimationParams',
    'params_at',
    'region_index',
    # Coloring
    'color_for',
    'build_palette',
    'hsl_to_hex',
    # Sampling
    'GridCoordinate',
    'Point3D',
    'ColoredPoint',
    'PointCloud',
    'build_lattice',
    'lattice_coordinates',
    'sample_cloud',
    'sample_frame',
    # Projection / depth
    'Rotation',
    'rotate',
    'rotate_points',
    'project',
    'project_points',
    'project_rotated',
    'sort_by_depth',
    'depth_order',
    # Frames
    'DrawablePoint',
    'DrawableBatch',
    'render_batch',
    'render_frame',
    'project_and_sort',
    'FrameMetrics',
    'compute_frame_metrics',
]
