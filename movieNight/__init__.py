"""
movieNight
~~~~~~~~~~

Top-level package for the Movie Night watchlist application.

Exports:
  - Domain objects: MovieEntry, JsonStore, Watchlist
  - OMDb search: OMDBClient, SearchError
  - Utility functions: log_debug

The Qt window lives in ``movieNight.gui``; start it with ``movieNight.main.main``.
"""

# utils
from movieNight.utils import log_debug

# core logic
from movieNight.metadata import JsonStore, MovieEntry, OMDBClient, SearchError, Watchlist

__all__ = [
    # utils
    "log_debug",
    # core
    "MovieEntry",
    "JsonStore",
    "Watchlist",
    "OMDBClient",
    "SearchError",
]
