"""
Interactive Visualization

Application state, the serialized frame loop and the matplotlib viewer.
"""

from .state import (
    ApplicationState,
    Tick,
    PointerMoved,
    FrameLoop,
    update,
    initial_state,
    pointer_target,
    auto_target,
)

__all__ = [
    'ApplicationState',
    'Tick',
    'PointerMoved',
    'FrameLoop',
    'update',
    'initial_state',
    'pointer_target',
    'auto_target',
]
