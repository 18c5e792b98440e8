"""
metadata.core
~~~~~~~~~~~~~
Domain layer – entry dataclass, key/value store and the watchlist.
"""

from .models    import MovieEntry
from .store     import JsonStore
from .watchlist import Watchlist

__all__ = ["MovieEntry", "JsonStore", "Watchlist"]
