"""
mandelscape - animated pseudo-3D Mandelbrot point clouds

Organized by layer:
- core/: escape time, animation parameters, sampling, projection, depth sort
- interactive/: application state, frame loop, matplotlib viewer
"""

from .core import (
    Complex,
    iterate,
    iterate_grid,
    VisualProfile,
    PROFILES,
    get_profile,
    AnimationParams,
    params_at,
    color_for,
    sample_frame,
    Rotation,
    project,
    sort_by_depth,
    DrawablePoint,
    render_frame,
    project_and_sort,
)
from .interactive import ApplicationState, FrameLoop

__all__ = [
    'Complex',
    'iterate',
    'iterate_grid',
    'VisualProfile',
    'PROFILES',
    'get_profile',
    'AnimationParams',
    'params_at',
    'color_for',
    'sample_frame',
    'Rotation',
    'project',
    'sort_by_depth',
    'DrawablePoint',
    'render_frame',
    'project_and_sort',
    'ApplicationState',
    'FrameLoop',
]

__version__ = '0.1.0'
