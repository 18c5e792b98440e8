# movieNight/metadata/api_clients/omdb_client.py
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from movieNight import settings
from movieNight.utils import log_debug, mask_api_key


class SearchError(RuntimeError):
    """The OMDb request failed (transport error or non-2xx status)."""


class OMDBClient:
    """
    Thin wrapper around the OMDb title search.

    One call → one GET. No caching, no retry: a failed search is reported
    to the caller and the user simply searches again.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(self, api_key: str | None = None, timeout: float = settings.REQUEST_TIMEOUT):
        self.api_key = api_key or os.getenv("OMDB_API_KEY")
        if not self.api_key:
            raise RuntimeError("OMDB_API_KEY not set and no api_key passed")
        self.timeout = timeout

    @staticmethod
    def base_url() -> str:
        return settings.OMDB_URL

    # ────────────────────────────────────────────────────────────────
    # URL building
    # ────────────────────────────────────────────────────────────────
    def search_params(self, title: str, year: str | None = None) -> Dict[str, str]:
        params = {"apikey": self.api_key, "s": title}
        if year and year.strip():
            params["y"] = year.strip()
        return params

    def build_search_url(self, title: str, year: str | None = None) -> str:
        return self.base_url() + "?" + urlencode(self.search_params(title, year))

    # ────────────────────────────────────────────────────────────────
    # Search
    # ────────────────────────────────────────────────────────────────
    def search(self, title: str, year: str | None = None) -> Optional[dict]:
        """
        GET the search endpoint and return the decoded JSON body.

        Raises ``SearchError`` on any transport failure or non-2xx status.
        """
        url = self.build_search_url(title, year)
        log_debug(f"Searching OMDb with URL: {mask_api_key(url, self.api_key)}")
        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SearchError("Network error") from exc
        if not resp.ok:
            raise SearchError(f"Network error (HTTP {resp.status_code})")
        try:
            return resp.json()
        except ValueError as exc:
            raise SearchError("Network error (invalid JSON)") from exc


# ────────────────────────────────────────────────────────────────────
# Caller-side helpers
# ────────────────────────────────────────────────────────────────────
def results_from_payload(data: Any) -> List[dict]:
    """No payload or ``Response: "False"`` means zero results, not an error."""
    if not data or not isinstance(data, dict) or data.get("Response") == "False":
        return []
    hits = data.get("Search")
    if not isinstance(hits, list):
        return []
    return [h for h in hits if isinstance(h, dict) and h.get("imdbID")]

