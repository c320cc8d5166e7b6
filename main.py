#!/usr/bin/env python3
"""
Launcher for the route graph analysis.

Equivalent to `python -m src.routegraph.analyse`; all flags are passed
through (see --help).
"""

from src.routegraph.analyse import main


if __name__ == "__main__":
    main()
