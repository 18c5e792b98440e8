from __future__ import annotations
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Optional

from PySide6.QtCore import QObject, QThread

from movieNight import settings
from movieNight.metadata import JsonStore, MovieEntry, OMDBClient, Watchlist
from movieNight.gui.workers import _PosterWorker, _SearchWorker

_YEAR_RE = re.compile(r"^[0-9]{4}$")


# ───────────────────────── Validation ─────────────────────────────────────
class Validation(NamedTuple):
    ok: bool
    message: str
    field: Optional[str] = None      # "title" | "year" | None


def validate_search_input(title: str | None, year: str | None) -> Validation:
    """
    Check the search form.

    A blank title fails; a year fails only when it is non-blank and not
    exactly four digits. The title check wins when both are bad.
    """
    if not title or not title.strip():
        return Validation(False, "Title is required.", "title")
    if year and year.strip() and not _YEAR_RE.match(year.strip()):
        return Validation(False, "Year must be 4 digits (or leave blank).", "year")
    return Validation(True, "")


# ───────────────────────── Application context ────────────────────────────
@dataclass
class AppContext:
    """Everything the window needs, owned for the lifetime of the app."""
    store: JsonStore
    watchlist: Watchlist
    api_key: str | None = None
    _client: OMDBClient | None = field(default=None, init=False, repr=False)

    @classmethod
    def create(cls, store_path: Path | None = None, api_key: str | None = None) -> "AppContext":
        store = JsonStore(store_path or settings.STORE_PATH)
        watchlist = Watchlist(store, settings.WATCHLIST_KEY)
        watchlist.load()
        return cls(store=store, watchlist=watchlist, api_key=api_key)

    def omdb(self) -> OMDBClient:
        """Build the client on first use; raises RuntimeError without a key."""
        if self._client is None:
            self._client = OMDBClient(self.api_key)
        return self._client


# ───────────────────────── UI text ────────────────────────────────────────
def no_pick_message(watchlist: Watchlist) -> str:
    if len(watchlist) == 0:
        return "Your watchlist is empty."
    return "All movies are marked as watched."


def countdown_message(remaining: int) -> str:
    return f"Picking in {remaining}..."


def pick_announcement(entry: MovieEntry) -> str:
    return f"Tonight's Pick: {entry.label}"


# ───────────────────────── Controller helpers exposed to UI ───────────────
def _start_worker(worker: QObject, running: set) -> QThread:
    """
    Move *worker* to a fresh QThread and start it. *running* holds the
    (thread, worker) pair until the thread has finished.
    """
    thr = QThread()
    worker.moveToThread(thr)
    running.add((thr, worker))

    worker.finished.connect(thr.quit)
    worker.finished.connect(worker.deleteLater)
    thr.finished.connect(thr.deleteLater)
    thr.finished.connect(lambda: running.discard((thr, worker)))

    thr.started.connect(worker.run)
    thr.start()
    return thr


def start_search(ctx: AppContext, title: str, year: str, request_id: int,
                 running: set, on_results, on_failed) -> _SearchWorker:
    """
    Kick off one OMDb search; results arrive on the GUI thread.
    Raises RuntimeError straight away when no API key is configured.
    """
    worker = _SearchWorker(ctx.omdb(), title.strip(), year.strip(), request_id)
    worker.results.connect(on_results)
    worker.failed.connect(on_failed)
    _start_worker(worker, running)
    return worker


def start_poster_download(hits: list[dict], running: set, on_loaded) -> _PosterWorker | None:
    """Fetch posters for every hit that has one; None if there is nothing to fetch."""
    posters = [
        (h["imdbID"], h["Poster"])
        for h in hits
        if h.get("Poster") and h["Poster"] != settings.NO_POSTER
    ]
    if not posters:
        return None
    worker = _PosterWorker(posters)
    worker.loaded.connect(on_loaded)
    _start_worker(worker, running)
    return worker
