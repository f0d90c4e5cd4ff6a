"""
Escape time -> color.

Points in the set are black. Escaped points get a hue that cycles
`cycles` times across the iteration range and a lightness that rises as
the point escapes later (closer to the boundary).
"""

import colorsys
from functools import lru_cache
from typing import Tuple

from matplotlib.colors import to_hex

from .profiles import ColorScheme

IN_SET_COLOR = '#000000'


def hsl_for(iterations: int, max_iter: int,
            scheme: ColorScheme = ColorScheme()) -> Tuple[float, float, float]:
    """Hue (degrees), saturation, lightness for an escaped point."""
    normalized = iterations / max_iter
    band = (normalized * scheme.cycles) % 1.0
    hue = (scheme.hue_offset + band * scheme.hue_range) % 360.0
    lightness = scheme.min_lightness + (scheme.max_lightness - scheme.min_lightness) * normalized
    return hue, scheme.saturation, lightness


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Standard HSL -> RGB, formatted as #rrggbb."""
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return to_hex((r, g, b))


def color_for(iterations: int, max_iter: int, scheme: ColorScheme = ColorScheme()) -> str:
    """Color string for an escape-time value in [0, max_iter]."""
    if iterations >= max_iter:
        return IN_SET_COLOR
    return hsl_to_hex(*hsl_for(iterations, max_iter, scheme))


@lru_cache(maxsize=32)
def build_palette(max_iter: int, scheme: ColorScheme = ColorScheme()) -> Tuple[str, ...]:
    """All max_iter + 1 colors, indexable by escape time."""
    return tuple(color_for(i, max_iter, scheme) for i in range(max_iter + 1))
