# src/routegraph/utils/log.py

"""
Console logging helpers.

Progress goes to stdout with a UTC timestamp; one-off status lines are
tagged [INFO].
"""

from __future__ import annotations

from datetime import datetime, timezone


def log(msg: str) -> None:
    """Lightweight, timestamped logger (stdout)."""
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    print(f"[{ts}] {msg}")


def info(msg: str) -> None:
    print(f"[INFO] {msg}")
