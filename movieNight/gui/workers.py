from PySide6.QtCore import QByteArray, QObject, Signal, Slot

import requests

from movieNight import settings
from movieNight.metadata.api_clients import SearchError, results_from_payload
from movieNight.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _SearchWorker(QObject):
    """One OMDb search off the GUI thread."""
    results  = Signal(int, list)     # request id, OMDb hits ([] = no results)
    failed   = Signal(int, str)
    finished = Signal(bool)

    def __init__(self, client, title: str, year: str, request_id: int = 0):
        super().__init__()
        self.request_id = request_id
        self.client = client
        self.title = title
        self.year  = year

    @Slot()
    def run(self):
        try:
            hits = results_from_payload(self.client.search(self.title, self.year))
        except SearchError as e:
            log_debug(f"search-worker error: {e}")
            self.failed.emit(self.request_id, str(e))
            self.finished.emit(False)
            return
        except Exception as e:
            log_debug(f"search-worker unexpected error: {e!r}")
            self.failed.emit(self.request_id, "Error fetching movies.")
            self.finished.emit(False)
            return
        self.results.emit(self.request_id, hits)
        self.finished.emit(True)


class _PosterWorker(QObject):
    """
    Download poster images for a batch of results.
    A failed download is logged and skipped; the card keeps its placeholder.
    """
    loaded   = Signal(str, QByteArray)    # imdb_id, raw image bytes
    finished = Signal(bool)

    def __init__(self, posters: list[tuple[str, str]]):
        super().__init__()
        self.posters = posters

    @Slot()
    def run(self):
        for imdb_id, url in self.posters:
            try:
                resp = requests.get(url, timeout=settings.REQUEST_TIMEOUT)
                resp.raise_for_status()
            except requests.RequestException as e:
                log_debug(f"Image failed to load for {imdb_id}, URL was: {url} ({e})")
                continue
            self.loaded.emit(imdb_id, QByteArray(resp.content))
        self.finished.emit(True)
