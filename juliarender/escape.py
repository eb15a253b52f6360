from __future__ import annotations

from typing import NamedTuple

from numba import njit

from juliarender.config import FractalKind, RenderConfig
from juliarender.mapping import scale_pixel

class PixelResult(NamedTuple):
    raw_iterations: int
    escaped: bool
    final_re: float
    final_im: float

@njit(cache=True)
def escape_time(zx, zy, cx, cy, radius, max_iterations):
    """
    Iterate z -> z^2 + c starting at (zx, zy).

    The counter is bumped after every step and before the checks, so the first
    full step is iteration 1. Escape is tested before the cap: a point leaving
    the radius on the last permitted step still counts as escaped.
    Returns (raw_iterations, escaped, final_re, final_im).
    """
    x = float(zx)
    y = float(zy)
    r2 = radius * radius
    iteration = 0
    while iteration < max_iterations:
        xtemp = x * x - y * y
        y = 2.0 * x * y + cy
        x = xtemp + cx
        iteration += 1
        if x * x + y * y > r2:
            return iteration, True, x, y
    return iteration, False, x, y

@njit(cache=True)
def evaluate_point(mandelbrot, px, py, cx, cy, radius, max_iterations):
    if mandelbrot:
        return escape_time(0.0, 0.0, px, py, radius, max_iterations)
    return escape_time(px, py, cx, cy, radius, max_iterations)

def evaluate(zx: float, zy: float, cx: float, cy: float, radius: float, max_iterations: int) -> PixelResult:
    n, escaped, re, im = escape_time(float(zx), float(zy), float(cx), float(cy), float(radius), int(max_iterations))
    return PixelResult(int(n), bool(escaped), float(re), float(im))

def evaluate_pixel(config: RenderConfig, x: int, y: int) -> PixelResult:
    px = scale_pixel(float(config.radius), x, config.width)
    py = scale_pixel(float(config.radius), y, config.height)
    n, escaped, re, im = evaluate_point(
        config.fractal is FractalKind.MANDELBROT,
        px, py,
        float(config.center_re), float(config.center_im),
        float(config.radius), int(config.max_iterations),
    )
    return PixelResult(int(n), bool(escaped), float(re), float(im))
