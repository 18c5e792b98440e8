import json
import random
import unittest
from collections import Counter
from unittest.mock import patch

from movieNight.metadata.core.models import MovieEntry
from movieNight.metadata.core.store import JsonStore
from movieNight.metadata.core.watchlist import Watchlist

from tests._support import TempDirMixin

KEY = "movieWatchlist"


def _hit(imdb_id: str, title: str = "Up", year: str = "2009", poster: str = "N/A") -> dict:
    return {"imdbID": imdb_id, "Title": title, "Year": year, "Poster": poster, "Type": "movie"}


class TestMovieEntry(unittest.TestCase):
    def test_from_omdb_hit_defaults_watched_false(self) -> None:
        entry = MovieEntry.from_dict(_hit("tt1049413"))
        self.assertEqual(entry.imdb_id, "tt1049413")
        self.assertEqual(entry.label, "Up (2009)")
        self.assertIs(entry.watched, False)
        self.assertFalse(entry.has_poster)

    def test_to_dict_uses_omdb_field_names(self) -> None:
        entry = MovieEntry("tt1", "Alien", "1979", "http://img/alien.jpg", True)
        self.assertEqual(
            entry.to_dict(),
            {"imdbID": "tt1", "Title": "Alien", "Year": "1979",
             "Poster": "http://img/alien.jpg", "watched": True},
        )
        self.assertTrue(entry.has_poster)

    def test_missing_imdb_id_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MovieEntry.from_dict({"Title": "Nameless"})


class TestWatchlist(TempDirMixin, unittest.TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.store_path = self.tmp_path / "store.json"
        self.store = JsonStore(self.store_path)
        self.wl = Watchlist(self.store, KEY)
        self.wl.load()

    def _reload(self) -> Watchlist:
        wl = Watchlist(JsonStore(self.store_path), KEY)
        wl.load()
        return wl

    # ── load / save ───────────────────────────────────────────────────
    def test_first_use_is_empty(self) -> None:
        self.assertEqual(len(self.wl), 0)
        self.assertIsNone(self.wl.load_error)

    def test_add_then_reload_round_trips(self) -> None:
        self.wl.add(_hit("tt1", "Alien", "1979"))
        self.wl.add(MovieEntry("tt2", "Heat", "1995", watched=True))

        again = self._reload()
        self.assertEqual(again.items, self.wl.items)
        self.assertEqual([m.imdb_id for m in again], ["tt1", "tt2"])

    def test_stored_format_is_a_json_array(self) -> None:
        self.wl.add(_hit("tt1"))
        stored = json.loads(self.store.get_item(KEY))
        self.assertEqual(stored, [{"imdbID": "tt1", "Title": "Up", "Year": "2009",
                                   "Poster": "N/A", "watched": False}])

    def test_reads_data_written_by_the_browser_version(self) -> None:
        self.store.set_item(KEY, json.dumps([
            {"Title": "Up", "Year": "2009", "imdbID": "tt1049413",
             "Type": "movie", "Poster": "N/A", "watched": True},
            {"Title": "Heat", "Year": "1995", "imdbID": "tt0113277",
             "Type": "movie", "Poster": "N/A"},
        ]))
        self.wl.load()
        self.assertEqual([m.watched for m in self.wl], [True, False])

    # ── corrupt data ──────────────────────────────────────────────────
    def test_corrupt_payload_is_backed_up_and_reported(self) -> None:
        self.store.set_item(KEY, "[{broken")
        self.wl.load()

        self.assertEqual(len(self.wl), 0)
        self.assertIsNotNone(self.wl.load_error)
        self.assertEqual(self.store.get_item(KEY + ".corrupt"), "[{broken")
        self.assertIn("decode error", self.read_log())

    def test_non_array_payload_counts_as_corrupt(self) -> None:
        self.store.set_item(KEY, json.dumps({"imdbID": "tt1"}))
        self.wl.load()
        self.assertEqual(len(self.wl), 0)
        self.assertIsNotNone(self.wl.load_error)

    def test_element_without_id_counts_as_corrupt(self) -> None:
        self.store.set_item(KEY, json.dumps([{"Title": "Nameless"}]))
        self.wl.load()
        self.assertIsNotNone(self.wl.load_error)

    def test_duplicate_ids_in_storage_keep_the_first(self) -> None:
        self.store.set_item(KEY, json.dumps([_hit("tt1", "First"), _hit("tt1", "Second")]))
        self.wl.load()
        self.assertEqual([m.title for m in self.wl], ["First"])

    # ── add / remove ──────────────────────────────────────────────────
    def test_duplicate_add_keeps_first_entry(self) -> None:
        self.wl.add(_hit("tt1", "Original"))
        self.wl.add(_hit("tt1", "Impostor"))

        self.assertEqual(len(self.wl), 1)
        self.assertEqual(self.wl.get("tt1").title, "Original")
        self.assertEqual(self._reload().get("tt1").title, "Original")

    def test_add_copies_the_mapping(self) -> None:
        hit = _hit("tt1")
        self.wl.add(hit)
        hit["Title"] = "Changed later"
        self.assertEqual(self.wl.get("tt1").title, "Up")
        self.assertNotIn("watched", hit)

    def test_add_keeps_insertion_order(self) -> None:
        for i in range(5):
            self.wl.add(_hit(f"tt{i}"))
        self.assertEqual([m.imdb_id for m in self.wl], [f"tt{i}" for i in range(5)])

    def test_remove_persists(self) -> None:
        self.wl.add(_hit("tt1"))
        self.wl.add(_hit("tt2"))
        self.wl.remove("tt1")

        self.assertNotIn("tt1", self.wl)
        self.assertEqual([m.imdb_id for m in self._reload()], ["tt2"])

    def test_remove_unknown_id_still_rewrites_store(self) -> None:
        self.wl.add(_hit("tt1"))
        before = self.wl.items
        with patch.object(self.store, "set_item", wraps=self.store.set_item) as spy:
            self.wl.remove("tt-missing")
        self.assertEqual(self.wl.items, before)
        spy.assert_called_once()

    # ── watched flag ──────────────────────────────────────────────────
    def test_set_watched_persists(self) -> None:
        self.wl.add(_hit("tt1"))
        self.wl.set_watched("tt1", True)

        self.assertTrue(self.wl.get("tt1").watched)
        self.assertTrue(self._reload().get("tt1").watched)

    def test_toggle_watched_flips_and_returns_new_value(self) -> None:
        self.wl.add(_hit("tt1"))
        self.assertIs(self.wl.toggle_watched("tt1"), True)
        self.assertIs(self.wl.toggle_watched("tt1"), False)
        self.assertFalse(self._reload().get("tt1").watched)

    def test_toggle_unknown_id_returns_none(self) -> None:
        self.assertIsNone(self.wl.toggle_watched("tt-missing"))

    # ── random pick ───────────────────────────────────────────────────
    def test_pick_on_empty_list_is_none(self) -> None:
        self.assertIsNone(self.wl.random_pick())

    def test_pick_on_all_watched_is_none(self) -> None:
        self.wl.add(MovieEntry("tt1", "A", "2001", watched=True))
        self.wl.add(MovieEntry("tt2", "B", "2002", watched=True))
        self.assertIsNone(self.wl.random_pick())

    def test_pick_never_returns_watched_and_does_not_mutate(self) -> None:
        self.wl.add(MovieEntry("tt1", "A", "2001", watched=True))
        self.wl.add(MovieEntry("tt2", "B", "2002"))
        before = self.wl.items
        for _ in range(50):
            self.assertEqual(self.wl.random_pick().imdb_id, "tt2")
        self.assertEqual(self.wl.items, before)

    def test_pick_is_roughly_uniform_over_unwatched(self) -> None:
        wl = Watchlist(self.store, "uniform", rng=random.Random(1234))
        for imdb_id in ("A", "B", "C"):
            wl.add(MovieEntry(imdb_id, imdb_id, "2000"))

        counts = Counter(wl.random_pick().imdb_id for _ in range(3000))
        self.assertEqual(set(counts), {"A", "B", "C"})
        for n in counts.values():
            self.assertTrue(850 < n < 1150, counts)

    def test_pick_uses_index_over_unwatched_subset(self) -> None:
        class _Rng:
            def __init__(self):
                self.calls = []

            def randrange(self, n):
                self.calls.append(n)
                return n - 1

        rng = _Rng()
        wl = Watchlist(self.store, "subset", rng=rng)
        wl.add(MovieEntry("tt1", "A", "2001"))
        wl.add(MovieEntry("tt2", "B", "2002", watched=True))
        wl.add(MovieEntry("tt3", "C", "2003"))
        wl.add(MovieEntry("tt4", "D", "2004", watched=True))

        self.assertEqual(wl.random_pick().imdb_id, "tt3")
        self.assertEqual(rng.calls, [2])

    # ── last pick ─────────────────────────────────────────────────────
    def test_last_pick_round_trips(self) -> None:
        self.assertIsNone(self.wl.last_pick())
        entry = MovieEntry("tt1", "Up", "2009")
        self.wl.remember_pick(entry)

        self.assertEqual(self._reload().last_pick(), entry)
        self.assertIsNotNone(self.store.get_item("movieWatchlistLastPick"))

    def test_corrupt_last_pick_reads_as_none(self) -> None:
        self.store.set_item("movieWatchlistLastPick", "nope")
        self.assertIsNone(self.wl.last_pick())


if __name__ == "__main__":
    unittest.main()
