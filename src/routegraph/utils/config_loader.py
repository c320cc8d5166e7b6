# src/routegraph/utils/config_loader.py

"""
Config loading for the route analysis.

Settings have built-in defaults and may be overridden by an INI file:

    # analysis.ini
    [analysis]
    input = data/routes.csv
    top = 5
    full_centrality = false
    densest_members = 10

    [connectivity]
    checks = ATL->JFK, LAX->ORD

Command-line flags are applied on top by analyse.py.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .log import info


class ConfigError(ValueError):
    """Raised when an INI file cannot be parsed into an AnalysisConfig."""


@dataclass
class AnalysisConfig:
    input: str = "data/routes.csv"
    top: int = 5
    full_centrality: bool = False
    densest_members: int = 10
    checks: List[Tuple[str, str]] = field(default_factory=lambda: [("ATL", "JFK")])


def _parse_checks(raw: str) -> List[Tuple[str, str]]:
    """
    Parse "SRC->DST, SRC->DST" into label pairs. Labels may contain "-".
    """
    pairs: List[Tuple[str, str]] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        if "->" not in item:
            raise ConfigError(f"Invalid connectivity check (expected SRC->DST): {item!r}")
        src, dst = item.split("->", 1)
        src, dst = src.strip(), dst.strip()
        if not src or not dst:
            raise ConfigError(f"Connectivity check with empty endpoint: {item!r}")
        pairs.append((src, dst))
    return pairs


def load_config(path: Optional[Path] = None) -> AnalysisConfig:
    """
    Build an AnalysisConfig from defaults, overlaid with an INI file if given.

    Parameters
    ----------
    path : Path, optional
        INI file. A missing file is an error when explicitly requested.
    """
    cfg = AnalysisConfig()
    if path is None:
        return cfg

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")

        if parser.has_section("analysis"):
            section = parser["analysis"]
            cfg.input = section.get("input", cfg.input)
            cfg.top = section.getint("top", cfg.top)
            cfg.full_centrality = section.getboolean("full_centrality", cfg.full_centrality)
            cfg.densest_members = section.getint("densest_members", cfg.densest_members)
    except (configparser.Error, ValueError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if parser.has_section("connectivity"):
        raw = parser["connectivity"].get("checks")
        if raw is not None:
            cfg.checks = _parse_checks(raw)

    info(f"Loaded config from {path}")
    return cfg
