from __future__ import annotations

import dataclasses
import json
import random
from typing import Any, Iterator, Mapping

from movieNight.utils import log_debug
from .models import MovieEntry
from .store  import JsonStore


class Watchlist:
    """
    Ordered list of saved movies, mirrored to a ``JsonStore`` key.

    Insertion order is kept, ``imdb_id`` is unique, and every mutation is
    written back to the store before the method returns.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(self, store: JsonStore, storage_key: str, rng: Any = random):
        self.store = store
        self.storage_key = storage_key
        self.last_pick_key = storage_key + "LastPick"
        self._rng = rng
        self._items: list[MovieEntry] = []
        self.load_error: str | None = None

    # ────────────────────────────────────────────────────────────────
    # Persistence
    # ────────────────────────────────────────────────────────────────
    def load(self) -> None:
        self.load_error = None
        raw = self.store.get_item(self.storage_key)
        if not raw:
            self._items = []
            return
        try:
            self._items = self._decode(raw)
        except (ValueError, TypeError, AttributeError) as exc:
            # keep the unreadable payload around instead of dropping it
            backup_key = self.storage_key + ".corrupt"
            self.store.set_item(backup_key, raw)
            self._items = []
            self.load_error = (
                "Your saved watchlist could not be read and was reset. "
                f"The old data was kept under '{backup_key}'."
            )
            log_debug(f"Watchlist '{self.storage_key}' decode error: {exc}")

    def save(self) -> None:
        payload = [m.to_dict() for m in self._items]
        self.store.set_item(self.storage_key, json.dumps(payload))

    @staticmethod
    def _decode(raw: str) -> list[MovieEntry]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        items: list[MovieEntry] = []
        seen: set[str] = set()
        for obj in data:
            entry = MovieEntry.from_dict(obj)
            if entry.imdb_id not in seen:
                seen.add(entry.imdb_id)
                items.append(entry)
        return items

    # ────────────────────────────────────────────────────────────────
    # Mutations (each one persists)
    # ────────────────────────────────────────────────────────────────
    def add(self, movie: MovieEntry | Mapping[str, Any]) -> None:
        entry = movie if isinstance(movie, MovieEntry) else MovieEntry.from_dict(movie)
        if entry.imdb_id in self:
            return
        self._items.append(dataclasses.replace(entry, watched=bool(entry.watched)))
        self.save()

    def remove(self, imdb_id: str) -> None:
        self._items = [m for m in self._items if m.imdb_id != imdb_id]
        self.save()

    def set_watched(self, imdb_id: str, watched: bool) -> None:
        self._items = [
            dataclasses.replace(m, watched=bool(watched)) if m.imdb_id == imdb_id else m
            for m in self._items
        ]
        self.save()

    def toggle_watched(self, imdb_id: str) -> bool | None:
        """Flip the watched flag; returns the new value or None if unknown."""
        entry = self.get(imdb_id)
        if entry is None:
            return None
        self.set_watched(imdb_id, not entry.watched)
        return not entry.watched

    # ────────────────────────────────────────────────────────────────
    # Random pick
    # ────────────────────────────────────────────────────────────────
    def unwatched(self) -> list[MovieEntry]:
        return [m for m in self._items if not m.watched]

    def random_pick(self) -> MovieEntry | None:
        pool = self.unwatched()
        if not pool:
            return None
        return pool[self._rng.randrange(len(pool))]

    def remember_pick(self, entry: MovieEntry) -> None:
        self.store.set_item(self.last_pick_key, json.dumps(entry.to_dict()))

    def last_pick(self) -> MovieEntry | None:
        raw = self.store.get_item(self.last_pick_key)
        if not raw:
            return None
        try:
            return MovieEntry.from_dict(json.loads(raw))
        except (ValueError, TypeError, AttributeError) as exc:
            log_debug(f"Last pick '{self.last_pick_key}' decode error: {exc}")
            return None

    # ────────────────────────────────────────────────────────────────
    # Read access
    # ────────────────────────────────────────────────────────────────
    @property
    def items(self) -> tuple[MovieEntry, ...]:
        return tuple(self._items)

    def get(self, imdb_id: str) -> MovieEntry | None:
        return next((m for m in self._items if m.imdb_id == imdb_id), None)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MovieEntry]:
        return iter(tuple(self._items))

    def __contains__(self, imdb_id: object) -> bool:
        return any(m.imdb_id == imdb_id for m in self._items)
