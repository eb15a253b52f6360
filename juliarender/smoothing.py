from __future__ import annotations

import math

from numba import njit

from juliarender.escape import PixelResult

_LOG10_2 = math.log10(2.0)

@njit(cache=True)
def smooth_iterations(raw_iterations, final_re, final_im):
    """
    Continuous escape count: n + 2 - log10(log10(|z|^2)) / log10(2).

    Only defined for escaped points with radius >= 1, where |z|^2 > 1.
    Bounded points must never reach this function.
    """
    return raw_iterations + 2.0 - math.log10(math.log10(final_re * final_re + final_im * final_im)) / _LOG10_2

def smooth_value(result: PixelResult) -> float:
    if not result.escaped:
        raise ValueError("smooth value is undefined for a bounded point")
    return float(smooth_iterations(result.raw_iterations, result.final_re, result.final_im))
