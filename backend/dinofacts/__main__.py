"""
Dinosaur Facts entry point.

Usage:
    python -m dinofacts
"""

from .main import run

if __name__ == "__main__":
    run()
