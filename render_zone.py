#!/usr/bin/env python3
"""
Zone Constraint Renderer

Prints a zone configuration's replica constraints as a tree.

Usage:
    python render_zone.py '+region=east'                    # All replicas
    python render_zone.py '2:+region=east' '1:-region=west' # Per replica count
    python render_zone.py '2:+region=east' --format json    # Output as JSON
"""

from zonecat.cli import run

if __name__ == "__main__":
    run()
