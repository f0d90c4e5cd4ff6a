"""
Camera rotation and 2D projection.

Rotation order is fixed: X (pitch), then Y (yaw) on the X-rotated z, then
Z (roll) on the Y-rotated x and y.

Post-rotation z points toward the viewer, whose eye sits at z = focal_length.
Larger z is nearer both for the perspective divide and for the depth sort.
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .sampler import Point3D

PERSPECTIVE_EPSILON = 1e-6


@dataclass(frozen=True)
class Rotation:
    """Camera angles in radians."""
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def approach(self, target: 'Rotation', smoothing: float) -> 'Rotation':
        """Exponential smoothing step toward target."""
        return Rotation(
            pitch=self.pitch + (target.pitch - self.pitch) * smoothing,
            yaw=self.yaw + (target.yaw - self.yaw) * smoothing,
            roll=self.roll + (target.roll - self.roll) * smoothing,
        )


IDENTITY = Rotation()


def rotate(p: Point3D, rot: Rotation) -> Point3D:
    """Rotate a point about X, then Y, then Z."""
    cp, sp = math.cos(rot.pitch), math.sin(rot.pitch)
    cy, sy = math.cos(rot.yaw), math.sin(rot.yaw)
    cr, sr = math.cos(rot.roll), math.sin(rot.roll)

    # X
    y1 = p.y * cp - p.z * sp
    z1 = p.y * sp + p.z * cp
    # Y
    x2 = p.x * cy + z1 * sy
    z2 = -p.x * sy + z1 * cy
    # Z
    x3 = x2 * cr - y1 * sr
    y3 = x2 * sr + y1 * cr

    return Point3D(x3, y3, z2)


def rotate_points(x: np.ndarray, y: np.ndarray, z: np.ndarray,
                  rot: Rotation) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorized rotate() over (N,) arrays."""
    cp, sp = math.cos(rot.pitch), math.sin(rot.pitch)
    cy, sy = math.cos(rot.yaw), math.sin(rot.yaw)
    cr, sr = math.cos(rot.roll), math.sin(rot.roll)

    y1 = y * cp - z * sp
    z1 = y * sp + z * cp
    x2 = x * cy + z1 * sy
    z2 = -x * sy + z1 * cy
    x3 = x2 * cr - y1 * sr
    y3 = x2 * sr + y1 * cr

    return x3, y3, z2


def perspective_scale(z, focal_length: float):
    """focal / (focal - z), with the denominator clamped away from zero."""
    denom = focal_length - np.asarray(z, dtype=np.float64)
    denom = np.where(np.abs(denom) < PERSPECTIVE_EPSILON, PERSPECTIVE_EPSILON, denom)
    return focal_length / denom


def project_rotated(r: Point3D, mode: str = 'orthographic',
                    focal_length: float = 600.0) -> Tuple[float, float]:
    """Project a point that has already been rotated."""
    if mode == 'perspective':
        s = float(perspective_scale(r.z, focal_length))
        return r.x * s, r.y * s
    return r.x, r.y


def project(p: Point3D, rot: Rotation, mode: str = 'orthographic',
            focal_length: float = 600.0) -> Tuple[float, float]:
    """Rotate p and project it to screen space."""
    return project_rotated(rotate(p, rot), mode, focal_length)


def project_points(x: np.ndarray, y: np.ndarray, z: np.ndarray, rot: Rotation,
                   mode: str = 'orthographic', focal_length: float = 600.0):
    """
    Vectorized project().

    Returns:
        sx, sy: screen coordinates
        depth: post-rotation z (for depth sorting)
    """
    rx, ry, rz = rotate_points(x, y, z, rot)
    if mode == 'perspective':
        s = perspective_scale(rz, focal_length)
        return rx * s, ry * s, rz
    return rx, ry, rz
