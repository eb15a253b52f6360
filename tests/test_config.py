import json

import pytest

from juliarender.config import (
    ColorScheme,
    FractalKind,
    RenderConfig,
    load_config,
    merge_overrides,
    normalise_config,
    parse_color_scheme,
)

def test_defaults_match_render_config():
    assert normalise_config(load_config(None)) == RenderConfig()

def test_default_values():
    cfg = RenderConfig()
    assert (cfg.width, cfg.height) == (800, 600)
    assert (cfg.center_re, cfg.center_im) == (-0.4, 0.6)
    assert cfg.radius == 3.0
    assert cfg.max_iterations == 1000
    assert cfg.color_scheme is ColorScheme.HUE_BASED
    assert cfg.color_scale == 1.0
    assert cfg.output_path == "julia.png"
    assert cfg.fractal is FractalKind.JULIA

def test_render_config_is_frozen():
    cfg = RenderConfig()
    with pytest.raises(AttributeError):
        cfg.width = 10

def test_load_config_json_overrides_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"width": 64, "color_scheme": "grayscale"}), encoding="utf-8")
    cfg = normalise_config(load_config(str(path)))
    assert cfg.width == 64
    assert cfg.height == 600
    assert cfg.color_scheme is ColorScheme.GRAYSCALE

def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))

def test_merge_overrides_skips_none():
    merged = merge_overrides({"width": 10, "height": 20}, {"width": None, "height": 5})
    assert merged == {"width": 10, "height": 5}

@pytest.mark.parametrize("name, scheme", [
    ("grayscale", ColorScheme.GRAYSCALE),
    ("Gray", ColorScheme.GRAYSCALE),
    ("hue", ColorScheme.HUE_BASED),
    ("hue-based", ColorScheme.HUE_BASED),
    ("HSV", ColorScheme.HUE_BASED),
])
def test_parse_color_scheme(name, scheme):
    assert parse_color_scheme(name) is scheme

@pytest.mark.parametrize("override", [
    {"width": 0},
    {"height": -1},
    {"max_iterations": 0},
    {"radius": 0.5},
    {"color_scale": 0.0},
    {"color_scheme": "rainbow"},
    {"fractal": "newton"},
    {"zoom": 2},
])
def test_normalise_config_rejects_bad_values(override):
    with pytest.raises(ValueError):
        normalise_config(merge_overrides(load_config(None), override))

def test_normalise_config_requires_dimensions():
    cfg = load_config(None)
    del cfg["width"]
    with pytest.raises(ValueError):
        normalise_config(cfg)

def test_as_dict_uses_plain_values():
    d = RenderConfig(fractal=FractalKind.MANDELBROT).as_dict()
    assert d["color_scheme"] == "hue"
    assert d["fractal"] == "mandelbrot"
    assert json.loads(json.dumps(d)) == d
