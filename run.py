"""
Start script for the movie rating system.

Run it with:
    python run.py
    or, depending on the installation, python3 run.py

It adds the src directory to the Python path,
so the application runs without installation.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Make sure "src" is on sys.path
repo_root = Path(__file__).resolve().parent
src_path = repo_root / "src"
sys.path.insert(0, str(src_path))

from movie_ratings.main import main

if __name__ == "__main__":
    main()
