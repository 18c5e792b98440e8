# MovieEntry dataclass (+ OMDb field mapping)
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from movieNight.settings import NO_POSTER


@dataclass(frozen=True, slots=True)
class MovieEntry:
    imdb_id: str
    title: str = ""
    year: str = ""
    poster_url: str = NO_POSTER
    watched: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MovieEntry":
        """Build from an OMDb search hit or a stored watchlist object."""
        imdb_id = raw.get("imdbID")
        if not imdb_id:
            raise ValueError("movie has no imdbID")
        return cls(
            imdb_id=str(imdb_id),
            title=str(raw.get("Title") or ""),
            year=str(raw.get("Year") or ""),
            poster_url=str(raw.get("Poster") or NO_POSTER),
            watched=bool(raw.get("watched", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdbID":  self.imdb_id,
            "Title":   self.title,
            "Year":    self.year,
            "Poster":  self.poster_url,
            "watched": self.watched,
        }

    @property
    def has_poster(self) -> bool:
        return bool(self.poster_url) and self.poster_url != NO_POSTER

    @property
    def label(self) -> str:
        return f"{self.title} ({self.year})"
