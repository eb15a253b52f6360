from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from juliarender.config import RenderConfig, load_config, merge_overrides, normalise_config
from juliarender.image.png_writer import save_image
from juliarender.pipeline import render_image
from juliarender.util.logging_setup import configure_root_logging, get_logger, shutdown_logging
from juliarender.util.manifest import build_manifest, write_manifest

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="juliarender", description="Escape-time fractal renderer (Julia/Mandelbrot) with smooth coloring.")
    p.add_argument("--config", type=str, default=None, help="Path to config JSON. Flags override its values.")
    p.add_argument("--width", type=int, default=None, help="Image width in pixels (default 800).")
    p.add_argument("--height", type=int, default=None, help="Image height in pixels (default 600).")
    p.add_argument("--cx", type=float, default=None, help="Real part of the Julia constant (default -0.4).")
    p.add_argument("--cy", type=float, default=None, help="Imaginary part of the Julia constant (default 0.6).")
    p.add_argument("--radius", type=float, default=None, help="Window half-extent and escape radius, >= 1 (default 3.0).")
    p.add_argument("--max-iterations", type=int, default=None, help="Iteration cap per pixel (default 1000).")
    p.add_argument("--color-scheme", type=str, default=None, choices=["grayscale", "hue"], help="Color scheme (default hue).")
    p.add_argument("--color-scale", type=float, default=None, help="Hue multiplier applied to the smooth value (default 1.0).")
    p.add_argument("--fractal", type=str, default=None, choices=["julia", "mandelbrot"], help="Fractal variant (default julia).")
    p.add_argument("-o", "--output", type=str, default=None, help="Output image path (default julia.png).")
    p.add_argument("--manifest", type=str, default=None, help="Write a JSON run manifest to this path.")
    p.add_argument("--progress", action="store_true", help="Show a progress bar while rendering.")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level.")
    p.add_argument("--log-file", type=str, default="render.log", help="Log file path (rotating). Set empty to disable file logging.")
    return p

def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "width": args.width,
        "height": args.height,
        "center_re": args.cx,
        "center_im": args.cy,
        "radius": args.radius,
        "max_iterations": args.max_iterations,
        "color_scheme": args.color_scheme,
        "color_scale": args.color_scale,
        "fractal": args.fractal,
        "output_path": args.output,
    }

def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return normalise_config(merge_overrides(load_config(args.config), _overrides(args)))

def main(argv: Optional[list] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config_from_args(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    log_file = args.log_file if args.log_file and args.log_file.strip() else None
    configure_root_logging(level=log_level, console=True, log_file=log_file)
    logger = get_logger()

    try:
        raster = render_image(cfg, progress=args.progress)
        try:
            save_image(raster, cfg.output_path)
        except OSError:
            logger.exception("Failed to write image to %s", cfg.output_path)
            raise

        if args.manifest:
            write_manifest(args.manifest, build_manifest(config=cfg, raster=raster))
            logger.info("Run manifest written: %s", args.manifest)
        return 0
    finally:
        shutdown_logging()
