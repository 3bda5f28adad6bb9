"""
Main entry point for running the package directly:

    python -m zonecat '2:+region=east' '1:-region=west'
"""

from .cli import run

if __name__ == "__main__":
    run()
