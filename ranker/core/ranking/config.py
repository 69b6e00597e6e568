"""
config.py - Reference constants for the ranking engine

The defaults reproduce the reference behaviour exactly. They can be
overridden from a YAML mapping, e.g.::

    initial_score: 1500
    k_factor: 32
    cross_effort_min_items: 4
    cross_effort_max_comparisons: 5
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from ranker.utils.io_helpers import read_utf8
from ..errors import ConfigError

# Confidence steps: (minimum comparisons, confidence), highest first
CONFIDENCE_STEPS = ((5, 0.9), (3, 0.7), (2, 0.5))
MIN_CONFIDENCE = 0.3

UNKNOWN_EFFORT = "UNKNOWN"


@dataclass(frozen=True)
class RankingConfig:
    initial_score: float = 1500.0
    k_factor: float = 32.0
    # secondary pair strategy only runs for sets at least this large
    cross_effort_min_items: int = 4
    # ...and only while one of the two items has fewer comparisons than this
    cross_effort_max_comparisons: int = 5


DEFAULT_CONFIG = RankingConfig()


def load_ranking_config(path: Optional[Path]) -> RankingConfig:
    """Return DEFAULT_CONFIG overridden by the YAML mapping at *path*."""
    if path is None:
        return DEFAULT_CONFIG
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Ranking config not found: {path}")

    try:
        data = yaml.safe_load(read_utf8(path)) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    known = {f.name: f.type for f in fields(RankingConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"Unknown ranking config keys in {path}: {', '.join(unknown)}")

    overrides = {}
    for key, value in data.items():
        cast = float if known[key] in (float, "float") else int
        try:
            overrides[key] = cast(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Bad value for {key} in {path}: {value!r}") from e
    return replace(DEFAULT_CONFIG, **overrides)
