"""
Visual profiles.

A profile collects every numeric constant that distinguishes one visual
variant from another: lattice size and spacing, iteration cap, animation
periods, color scheme, camera behaviour and projection mode. The presets in
PROFILES cover the terrain, perspective and flat looks.
"""

import numpy as np
from dataclasses import dataclass, field, replace
from typing import Tuple

TAU = 2 * np.pi

PROJECTION_MODES = ('orthographic', 'perspective')
INTERACTION_MODES = ('pointer', 'auto')

# Target regions for the animation's region selector (name, centre)
REGIONS = {
    'overview': complex(-0.5, 0.0),
    'seahorse': complex(-0.745, 0.11),
    'elephant': complex(0.285, 0.01),
    'antenna': complex(-1.25, 0.0),
    'northern_bulb': complex(-0.12, 0.75),
}


@dataclass(frozen=True)
class ColorScheme:
    """Escape-time -> HSL color parameters."""
    cycles: float = 3.0            # Color bands across the iteration range
    hue_offset: float = 200.0      # Degrees
    hue_range: float = 280.0       # Degrees spanned by one band
    saturation: float = 0.85
    min_lightness: float = 0.25    # Fast escapers
    max_lightness: float = 0.65    # Near the boundary


@dataclass(frozen=True)
class CameraConfig:
    """Camera rotation behaviour."""
    interaction: str = 'pointer'   # 'pointer' or 'auto'
    axes: int = 3                  # 2 pins roll to 0
    smoothing: float = 0.05        # EMA weight per tick
    max_angle: float = np.pi / 3   # Pointer at the edge -> this many radians
    base_pitch: float = 0.6        # Resting tilt so heights are visible
    viewport: Tuple[float, float] = (800.0, 600.0)

    # Time-driven drift (roll for pointer mode, everything for auto mode)
    drift_amplitude: float = 0.35
    drift_period: float = 20000.0  # ms

    @property
    def center(self) -> Tuple[float, float]:
        return (self.viewport[0] / 2.0, self.viewport[1] / 2.0)


@dataclass(frozen=True)
class VisualProfile:
    """Complete configuration for one visual variant."""
    name: str = 'terrain'

    # Lattice
    lattice_size: int = 151
    lattice_spacing: float = 3.0

    # Escape time
    max_iter: int = 80
    height_per_iteration: float = 1.5
    flatten: bool = False

    # Plane mapping (complex units per lattice unit at zoom 1)
    base_scale: float = 0.0075

    # Animation signals (ms)
    zoom_depth: float = 1.5
    zoom_period: float = 24000.0
    breath_period: float = 6000.0
    spiral_radius: float = 0.08
    spiral_period: float = 15000.0
    figure_eight_radius: float = 0.05
    figure_eight_period: float = 11000.0
    region_step: float = 2000.0
    regions: Tuple[complex, ...] = (
        REGIONS['overview'],
        REGIONS['seahorse'],
        REGIONS['elephant'],
        REGIONS['antenna'],
    )

    colors: ColorScheme = field(default_factory=ColorScheme)
    camera: CameraConfig = field(default_factory=CameraConfig)

    # Projection
    projection: str = 'orthographic'
    focal_length: float = 600.0

    # Drawing constants
    point_radius: float = 1.8
    opacity: float = 0.85

    def __post_init__(self):
        if self.lattice_size < 1:
            raise ValueError(f"lattice_size must be positive, got {self.lattice_size}")
        if self.lattice_spacing <= 0:
            raise ValueError(f"lattice_spacing must be positive, got {self.lattice_spacing}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be positive, got {self.max_iter}")
        if self.projection not in PROJECTION_MODES:
            raise ValueError(f"Unknown projection: {self.projection}")
        if self.camera.interaction not in INTERACTION_MODES:
            raise ValueError(f"Unknown interaction: {self.camera.interaction}")
        if self.camera.axes not in (2, 3):
            raise ValueError(f"Rotation axes must be 2 or 3, got {self.camera.axes}")
        if not 0.0 <= self.camera.smoothing <= 1.0:
            raise ValueError(f"smoothing must be in [0, 1], got {self.camera.smoothing}")
        if self.focal_length <= 0:
            raise ValueError(f"focal_length must be positive, got {self.focal_length}")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0, 1], got {self.opacity}")
        if not self.regions:
            raise ValueError("At least one region is required")
        if self.region_step <= 0:
            raise ValueError(f"region_step must be positive, got {self.region_step}")

    @property
    def half_extent(self) -> float:
        """Lattice half-width in lattice units."""
        return (self.lattice_size - 1) * self.lattice_spacing / 2.0

    @property
    def region_cycle(self) -> float:
        """Period (ms) after which the region selector repeats."""
        return self.region_step * len(self.regions)

    @property
    def n_points(self) -> int:
        return self.lattice_size * self.lattice_size


# Pre-tuned profiles
PROFILES = {
    'terrain': VisualProfile(),
    'perspective': VisualProfile(
        name='perspective',
        lattice_size=101,
        lattice_spacing=4.5,
        max_iter=40,
        height_per_iteration=2.5,
        zoom_period=30000.0,
        region_step=5000.0,
        regions=(REGIONS['overview'], REGIONS['seahorse'], REGIONS['northern_bulb']),
        colors=ColorScheme(cycles=2.0, hue_offset=160.0),
        camera=CameraConfig(interaction='auto', base_pitch=0.8, drift_amplitude=0.5),
        projection='perspective',
        point_radius=2.4,
    ),
    'flat': VisualProfile(
        name='flat',
        lattice_size=121,
        lattice_spacing=4.0,
        max_iter=20,
        flatten=True,
        colors=ColorScheme(cycles=1.0, hue_offset=0.0, hue_range=300.0),
        camera=CameraConfig(axes=2, base_pitch=0.9),
        point_radius=2.2,
        opacity=0.9,
    ),
}

DEFAULT_PROFILE = 'terrain'


def get_profile(name: str = DEFAULT_PROFILE, **overrides) -> VisualProfile:
    """
    Get a pre-tuned profile, optionally overriding individual fields.

    Args:
        name: Key in PROFILES
        **overrides: VisualProfile field overrides (e.g. max_iter=60)
    """
    if name not in PROFILES:
        raise ValueError(f"Unknown profile: {name} (available: {', '.join(PROFILES)})")
    profile = PROFILES[name]
    if overrides:
        profile = replace(profile, **overrides)
    return profile
