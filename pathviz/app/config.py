# pathviz/app/config.py
"""
Viewer settings.

- ENV:  PATHVIZ_ALGORITHM, PATHVIZ_WIDTH, PATHVIZ_HEIGHT, PATHVIZ_CELL_SIZE,
        PATHVIZ_FPS, PATHVIZ_SEED, PATHVIZ_LOG_LEVEL
- CLI:  --algo= --width= --height= --cell= --fps= --seed= --log=
CLI flags win over the environment.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from pathviz.core.algorithms import DEFAULT_ALGORITHM, resolve_name

# setting -> (env var, cli flag)
_SOURCES: Dict[str, tuple] = {
    "algorithm": ("PATHVIZ_ALGORITHM", "--algo"),
    "width":     ("PATHVIZ_WIDTH",     "--width"),
    "height":    ("PATHVIZ_HEIGHT",    "--height"),
    "cell_size": ("PATHVIZ_CELL_SIZE", "--cell"),
    "fps":       ("PATHVIZ_FPS",       "--fps"),
    "seed":      ("PATHVIZ_SEED",      "--seed"),
    "log_level": ("PATHVIZ_LOG_LEVEL", "--log"),
}


@dataclass(frozen=True)
class ViewerConfig:
    algorithm: str = DEFAULT_ALGORITHM
    width: int = 31
    height: int = 21
    cell_size: int = 24
    fps: int = 30
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _int(key: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {value}")
    return value


def resolve_config(argv: Optional[List[str]] = None,
                   environ: Optional[Mapping[str, str]] = None) -> ViewerConfig:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw: Dict[str, str] = {}
    for key, (env_name, _) in _SOURCES.items():
        if environ.get(env_name):
            raw[key] = environ[env_name]
    for arg in argv:
        for key, (_, flag) in _SOURCES.items():
            if arg.startswith(flag + "="):
                raw[key] = arg.split("=", 1)[1]

    values: Dict[str, object] = {}
    if "algorithm" in raw:
        try:
            values["algorithm"] = resolve_name(raw["algorithm"])
        except KeyError as ex:
            raise ValueError(f"algorithm: {ex.args[0]}") from None
    for key, minimum in (("width", 2), ("height", 2), ("cell_size", 4), ("fps", 1)):
        if key in raw:
            values[key] = _int(key, raw[key], minimum)
    if "seed" in raw:
        values["seed"] = _int("seed", raw["seed"], 0)
    if "log_level" in raw:
        level = raw["log_level"].upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {raw['log_level']!r}")
        values["log_level"] = level
    return ViewerConfig(**values)
