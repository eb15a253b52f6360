# color.py

from __future__ import annotations

from typing import Tuple

from numba import njit

from juliarender.config import ColorScheme, RenderConfig
from juliarender.escape import PixelResult
from juliarender.smoothing import smooth_iterations

GRAYSCALE = 0
HUE_BASED = 1

_SCHEME_CODES = {
    ColorScheme.GRAYSCALE: GRAYSCALE,
    ColorScheme.HUE_BASED: HUE_BASED,
}

def scheme_code(scheme: ColorScheme) -> int:
    return _SCHEME_CODES[scheme]

@njit(cache=True)
def to_u8(value):
    # truncate toward zero, saturate like a float -> u8 cast
    if value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)

@njit(cache=True)
def hsv_to_rgb(hue, saturation, value):
    """
    Hue-sector HSV -> RGB. hue is in degrees and wraps, saturation and value
    are in [0, 1]. Returns float channels in [0, 1].
    """
    s = float(saturation)
    v = float(value)
    h = (hue % 360.0) / 60.0
    sector = int(h)
    f = h - sector
    sector = sector % 6
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q

@njit(cache=True)
def grayscale_color(smooth, max_iterations):
    t = to_u8(255.0 * (smooth / max_iterations))
    return 255 - t, 255 - t, 255 - t

@njit(cache=True)
def hue_color(smooth, color_scale):
    r, g, b = hsv_to_rgb(smooth * color_scale, 1.0, 1.0)
    return to_u8(255.0 - r * 255.0), to_u8(255.0 - g * 255.0), to_u8(255.0 - b * 255.0)

@njit(cache=True)
def shade(raw_iterations, escaped, final_re, final_im, max_iterations, scheme, color_scale):
    """Color one iteration result. Bounded points are black and skip smoothing."""
    if not escaped:
        return 0, 0, 0
    smooth = smooth_iterations(raw_iterations, final_re, final_im)
    if scheme == GRAYSCALE:
        return grayscale_color(smooth, max_iterations)
    return hue_color(smooth, color_scale)

def pixel_color(result: PixelResult, config: RenderConfig) -> Tuple[int, int, int]:
    r, g, b = shade(
        int(result.raw_iterations), bool(result.escaped),
        float(result.final_re), float(result.final_im),
        int(config.max_iterations), scheme_code(config.color_scheme), float(config.color_scale),
    )
    return int(r), int(g), int(b)
