from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numba import njit
from tqdm import tqdm

from juliarender.color import scheme_code, shade
from juliarender.config import FractalKind, RenderConfig
from juliarender.escape import evaluate_point
from juliarender.mapping import scale_pixel
from juliarender.util.logging_setup import get_logger

@njit(cache=True)
def _render_band(out, y0, width, height, mandelbrot, cx, cy, radius, max_iterations, scheme, color_scale):
    for yi in range(out.shape[0]):
        py = scale_pixel(radius, y0 + yi, height)
        for x in range(width):
            px = scale_pixel(radius, x, width)
            n, escaped, re, im = evaluate_point(mandelbrot, px, py, cx, cy, radius, max_iterations)
            r, g, b = shade(n, escaped, re, im, max_iterations, scheme, color_scale)
            out[yi, x, 0] = r
            out[yi, x, 1] = g
            out[yi, x, 2] = b

def split_bands(height: int, band_height: int) -> List[Tuple[int, int]]:
    if band_height <= 0:
        raise ValueError("band_height must be > 0")
    bands: List[Tuple[int, int]] = []
    y = 0
    while y < height:
        y1 = min(height, y + band_height)
        bands.append((y, y1))
        y = y1
    return bands

def render_image(config: RenderConfig, *, band_height: int = 32, progress: bool = False) -> np.ndarray:
    """
    Render every pixel of `config` into a (height, width, 3) uint8 raster.

    Rows are filled band by band; bands only drive progress reporting and
    never change the result.
    """
    logger = get_logger()

    width = int(config.width)
    height = int(config.height)
    mandelbrot = config.fractal is FractalKind.MANDELBROT
    scheme = scheme_code(config.color_scheme)

    logger.info("Render start size=%sx%s fractal=%s c=(%s, %s) radius=%s iter=%s scheme=%s scale=%s",
                width, height, config.fractal.value, config.center_re, config.center_im,
                config.radius, config.max_iterations, config.color_scheme.value, config.color_scale)

    buf = np.zeros((height, width, 3), dtype=np.uint8)
    bands = split_bands(height, band_height)

    for y0, y1 in tqdm(bands, desc="rows", unit="band", disable=not progress):
        _render_band(
            buf[y0:y1], y0, width, height, mandelbrot,
            float(config.center_re), float(config.center_im), float(config.radius),
            int(config.max_iterations), scheme, float(config.color_scale),
        )
        logger.debug("Rendered rows %s..%s/%s", y0, y1, height)

    logger.info("Render done size=%sx%s", width, height)
    return buf
