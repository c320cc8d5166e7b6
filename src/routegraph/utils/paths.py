"""
Helpers for locating the routes dataset.

The analysis accepts either:
  - --input          (a routes CSV file or a directory of CSV files)
  - --data-location  (a data directory containing routes.csv)

If neither is given, the configured default path is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

ROUTES_FILENAME = "routes.csv"


def resolve_input_path(
    input_path: Optional[str],
    data_location: Optional[str],
    default: str,
) -> Path:
    """
    Resolve the routes input from CLI arguments.

    Priority:
        1) input_path    (explicit file or directory)
        2) data_location (joined with routes.csv)
        3) default       (from config)
    """
    if input_path:
        return Path(input_path)
    if data_location:
        return Path(data_location) / ROUTES_FILENAME
    return Path(default)
