"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – MovieEntry dataclass, JSON store, Watchlist
* api_clients – OMDb search client
"""

# ── core objects ──────────────────────────────────────────────────────────
from .core.models    import MovieEntry
from .core.store     import JsonStore
from .core.watchlist import Watchlist

# ── API clients ───────────────────────────────────────────────────────────
from .api_clients.omdb_client import OMDBClient, SearchError, results_from_payload

__all__ = [
    "MovieEntry",
    "JsonStore",
    "Watchlist",
    "OMDBClient",
    "SearchError",
    "results_from_payload",
]
