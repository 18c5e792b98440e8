"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
"""

from .omdb_client import OMDBClient, SearchError, results_from_payload

__all__ = ["OMDBClient", "SearchError", "results_from_payload"]
