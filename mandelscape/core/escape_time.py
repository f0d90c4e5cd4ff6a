"""
Escape-time evaluation of the Mandelbrot recurrence z -> z^2 + c.

`iterate` is the reference scalar evaluator; `iterate_grid` runs the same
recurrence over numpy arrays and must agree with it sample for sample.
"""

import numpy as np
from typing import Union

from .complex_math import Complex, ZERO

BAILOUT_SQUARED = 4.0

ComplexLike = Union[Complex, complex, float]


def iterate(c: ComplexLike, max_iter: int) -> int:
    """
    Count iterations until the orbit of 0 under z^2 + c escapes |z| > 2.

    Returns the 0-based iteration at which |z|^2 first exceeds 4, or
    `max_iter` if the orbit stays bounded (the "in the set" sentinel).
    """
    c = Complex.coerce(c)
    z = ZERO
    for i in range(max_iter):
        z = z * z + c
        if z.magnitude_squared() > BAILOUT_SQUARED:
            return i
    return max_iter


def is_in_set(c: ComplexLike, max_iter: int = 100) -> bool:
    """Check if c is in the Mandelbrot set (up to max_iter)."""
    return iterate(c, max_iter) == max_iter


def iterate_grid(real: np.ndarray, imag: np.ndarray, max_iter: int) -> np.ndarray:
    """
    Vectorized escape time over arrays of c = real + imag*i.

    Returns an int32 array shaped like `real`, values in [0, max_iter].
    """
    c_re = np.asarray(real, dtype=np.float64)
    c_im = np.asarray(imag, dtype=np.float64)

    z_re = np.zeros_like(c_re)
    z_im = np.zeros_like(c_im)
    iterations = np.full(c_re.shape, max_iter, dtype=np.int32)
    mask = np.ones(c_re.shape, dtype=bool)

    for i in range(max_iter):
        zr = z_re[mask]
        zi = z_im[mask]
        # Same operation order as Complex.__mul__ / __add__
        new_re = (zr * zr - zi * zi) + c_re[mask]
        new_im = (zr * zi + zi * zr) + c_im[mask]
        z_re[mask] = new_re
        z_im[mask] = new_im

        escaped = np.zeros_like(mask)
        escaped[mask] = (new_re * new_re + new_im * new_im) > BAILOUT_SQUARED

        iterations[escaped] = i
        mask &= ~escaped
        if not np.any(mask):
            break

    return iterations
