"""
Time-driven animation parameters.

The mapping from lattice space to the complex plane is a pure function of
elapsed time: several sinusoids with unrelated periods (zoom, spiral,
figure-eight, breathing) plus a stepped region selector. Nothing here keeps
state, so any timestamp can be evaluated on its own.
"""

import math
from dataclasses import dataclass

from .profiles import VisualProfile, TAU


@dataclass(frozen=True)
class AnimationParams:
    """Affine lattice -> complex-plane map for one frame."""
    offset_x: float
    offset_y: float
    scale: float
    region: int = 0

    def to_plane(self, gx: float, gy: float) -> complex:
        return complex(gx * self.scale + self.offset_x, gy * self.scale + self.offset_y)


def zoom_factor(t: float, profile: VisualProfile) -> float:
    """Zoom oscillation in [1, 1 + zoom_depth]."""
    return 1.0 + profile.zoom_depth * (1.0 - math.cos(TAU * t / profile.zoom_period)) / 2.0


def breathing(t: float, profile: VisualProfile) -> float:
    """Breathing envelope in [0, 1]."""
    return (1.0 + math.sin(TAU * t / profile.breath_period)) / 2.0


def spiral_offset(t: float, profile: VisualProfile):
    r = profile.spiral_radius * breathing(t, profile)
    angle = TAU * t / profile.spiral_period
    return r * math.cos(angle), r * math.sin(angle)


def figure_eight_offset(t: float, profile: VisualProfile):
    """Lissajous 1:2 curve."""
    phase = TAU * t / profile.figure_eight_period
    a = profile.figure_eight_radius
    return a * math.sin(phase), a * math.sin(2.0 * phase) / 2.0


def region_index(t: float, profile: VisualProfile) -> int:
    """Stepped selector over profile.regions; repeats every region_cycle ms."""
    phase = t % profile.region_cycle
    return int(phase // profile.region_step) % len(profile.regions)


def params_at(t: float, profile: VisualProfile) -> AnimationParams:
    """
    Plane mapping at time t (milliseconds).

    Compute once per frame and share across every sample of that frame.
    """
    zoom = zoom_factor(t, profile)
    sx, sy = spiral_offset(t, profile)
    fx, fy = figure_eight_offset(t, profile)
    region = region_index(t, profile)
    centre = profile.regions[region]

    return AnimationParams(
        offset_x=centre.real + (sx + fx) / zoom,
        offset_y=centre.imag + (sy + fy) / zoom,
        scale=profile.base_scale / zoom,
        region=region,
    )
