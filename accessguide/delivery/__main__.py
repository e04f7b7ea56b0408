"""
Entry point for running the guidance reader as a module.

Usage:
    python -m accessguide.delivery show 2.1-F-1
    python -m accessguide.delivery search "grab rail"
    python -m accessguide.delivery --help
"""
from .cli import main

if __name__ == "__main__":
    main()
