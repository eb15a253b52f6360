import hashlib
import json
import os
import platform
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import importlib.metadata as importlib_metadata
import numpy as np

from juliarender.config import RenderConfig

@dataclass(frozen=True)
class RunManifest:
    started_utc: str
    config: Dict[str, Any]
    python: Dict[str, Any]
    packages: Dict[str, str]
    system: Dict[str, Any]
    raster: Dict[str, Any]

def _utc_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())

def _safe_pkg_version(name: str) -> Optional[str]:
    try:
        return importlib_metadata.version(name)
    except importlib_metadata.PackageNotFoundError:
        return None

def raster_digest(raster: np.ndarray) -> str:
    return hashlib.sha256(np.ascontiguousarray(raster).tobytes()).hexdigest()

def build_manifest(*, config: RenderConfig, raster: np.ndarray) -> RunManifest:
    pkgs = {}
    for name in ["juliarender", "numpy", "numba", "Pillow", "tqdm"]:
        v = _safe_pkg_version(name)
        if v:
            pkgs[name] = v

    return RunManifest(
        started_utc=_utc_iso(),
        config=config.as_dict(),
        python={"version": sys.version, "executable": sys.executable},
        packages=pkgs,
        system={"platform": platform.platform(), "machine": platform.machine(), "processor": platform.processor()},
        raster={"shape": list(raster.shape), "dtype": str(raster.dtype), "sha256": raster_digest(raster)},
    )

def write_manifest(path: str, manifest: RunManifest) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest.__dict__, f, indent=2, sort_keys=True)
