from __future__ import annotations

import os

import numpy as np
from PIL import Image

from juliarender.util.logging_setup import get_logger

def save_image(raster: np.ndarray, path: str) -> str:
    logger = get_logger()
    if raster.ndim != 3 or raster.shape[2] != 3 or raster.dtype != np.uint8:
        raise ValueError(f"Expected a (height, width, 3) uint8 raster, got {raster.shape} {raster.dtype}")

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    img = Image.fromarray(raster)
    ext = os.path.splitext(path)[1].lower()
    if ext in ("", ".png"):
        img.save(path, format="PNG", optimize=True)
    else:
        img.save(path)
    logger.info("Image written: %s (%sx%s)", path, img.size[0], img.size[1])
    return path
