from __future__ import annotations

from numba import njit

@njit(cache=True)
def scale_pixel(radius, c, s):
    """Map pixel index c on an axis of s pixels to [-radius/2, radius/2)."""
    return (radius / s) * c - 0.5 * radius
