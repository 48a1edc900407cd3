"""
Entry point for `python -m rounder`.
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
