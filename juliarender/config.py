from __future__ import annotations

import enum
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

class ColorScheme(enum.Enum):
    GRAYSCALE = "grayscale"
    HUE_BASED = "hue"

class FractalKind(enum.Enum):
    JULIA = "julia"
    MANDELBROT = "mandelbrot"

_SCHEME_NAMES = {
    "grayscale": ColorScheme.GRAYSCALE,
    "gray": ColorScheme.GRAYSCALE,
    "hue": ColorScheme.HUE_BASED,
    "hue_based": ColorScheme.HUE_BASED,
    "hsv": ColorScheme.HUE_BASED,
}

DEFAULTS: Dict[str, Any] = {
    "width": 800,
    "height": 600,
    "center_re": -0.4,
    "center_im": 0.6,
    "radius": 3.0,
    "max_iterations": 1000,
    "color_scheme": "hue",
    "color_scale": 1.0,
    "output_path": "julia.png",
    "fractal": "julia",
}

@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable render parameters shared by every pipeline stage.

    Preconditions (checked by normalise_config, not by the core):
    width, height, max_iterations > 0 and radius >= 1. Below radius 1 the
    smoothing formula takes the log of a non-positive number.
    """

    width: int = 800
    height: int = 600
    center_re: float = -0.4
    center_im: float = 0.6
    radius: float = 3.0
    max_iterations: int = 1000
    color_scheme: ColorScheme = ColorScheme.HUE_BASED
    color_scale: float = 1.0
    output_path: str = "julia.png"
    fractal: FractalKind = FractalKind.JULIA

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["color_scheme"] = self.color_scheme.value
        out["fractal"] = self.fractal.value
        return out

def parse_color_scheme(value: Any) -> ColorScheme:
    if isinstance(value, ColorScheme):
        return value
    key = str(value).strip().lower().replace("-", "_")
    if key not in _SCHEME_NAMES:
        raise ValueError(f"Unknown color scheme: {value!r}")
    return _SCHEME_NAMES[key]

def parse_fractal(value: Any) -> FractalKind:
    if isinstance(value, FractalKind):
        return value
    try:
        return FractalKind(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown fractal: {value!r}") from None

def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    cfg = dict(DEFAULTS)
    if not config_path:
        return cfg
    with open(config_path, "r", encoding="utf-8") as f:
        loaded = json.load(f)
    if not isinstance(loaded, dict):
        raise ValueError("Config JSON must be an object.")
    cfg.update(loaded)
    return cfg

def merge_overrides(cfg: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(cfg)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

def normalise_config(cfg: Dict[str, Any]) -> RenderConfig:
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown config field(s): {', '.join(unknown)}")
    for r in ("width", "height", "radius", "max_iterations"):
        if r not in cfg:
            raise ValueError(f"Missing config field: {r}")

    width = int(cfg["width"])
    height = int(cfg["height"])
    max_iterations = int(cfg["max_iterations"])
    if width <= 0 or height <= 0 or max_iterations <= 0:
        raise ValueError("width/height/max_iterations must be positive.")

    radius = float(cfg["radius"])
    if not radius >= 1.0:
        raise ValueError("radius must be >= 1 for smooth coloring.")

    color_scale = float(cfg.get("color_scale", DEFAULTS["color_scale"]))
    if not color_scale > 0.0:
        raise ValueError("color_scale must be positive.")

    return RenderConfig(
        width=width,
        height=height,
        center_re=float(cfg.get("center_re", DEFAULTS["center_re"])),
        center_im=float(cfg.get("center_im", DEFAULTS["center_im"])),
        radius=radius,
        max_iterations=max_iterations,
        color_scheme=parse_color_scheme(cfg.get("color_scheme", DEFAULTS["color_scheme"])),
        color_scale=color_scale,
        output_path=str(cfg.get("output_path", DEFAULTS["output_path"])),
        fractal=parse_fractal(cfg.get("fractal", DEFAULTS["fractal"])),
    )
