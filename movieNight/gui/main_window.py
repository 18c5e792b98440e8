# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, QByteArray, Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QSplitter, QVBoxLayout, QHBoxLayout, QGridLayout,
    QFormLayout, QLineEdit, QPushButton, QLabel, QScrollArea, QGroupBox
)

from movieNight import settings
from movieNight.utils          import log_debug
from movieNight.gui.controller import (
    AppContext,
    validate_search_input,
    start_search,
    start_poster_download,
    no_pick_message,
    countdown_message,
    pick_announcement,
)
from movieNight.gui.countdown  import Countdown, run_countdown
from movieNight.gui.movie_card import MovieCard, WatchlistCard

RESULT_COLUMNS = 3


# --------------------------------------------------------------------------
class MainWindow(QMainWindow):
    def __init__(self, ctx: AppContext):
        super().__init__()
        self.ctx = ctx
        self.setWindowTitle("Movie Night")
        self.resize(1024, 640)

        self._workers: set = set()
        self._search_id = 0
        self._result_cards: dict[str, MovieCard] = {}
        self._countdown: Countdown | None = None

        self._build_ui()
        self._connect_signals()

        self.render_watchlist()
        if last := ctx.watchlist.last_pick():
            self.picked_label.setText(f"Last pick: {last.label}")
        if ctx.watchlist.load_error:
            self.statusBar().showMessage(ctx.watchlist.load_error)

    # ======================================================================
    # Layout
    # ======================================================================
    def _build_ui(self) -> None:
        # ── search side ----------------------------------------------------
        search_box = QGroupBox("Search")
        form = QFormLayout()
        self.title_input = QLineEdit(placeholderText="Movie title")
        self.year_input  = QLineEdit(placeholderText="Year (optional)")
        self.year_input.setMaxLength(4)
        self.search_btn  = QPushButton("Search")
        form.addRow("Title:", self.title_input)
        form.addRow("Year:",  self.year_input)
        self.error_label = QLabel()
        self.error_label.setObjectName("ErrorLabel")
        sb = QVBoxLayout(search_box)
        sb.addLayout(form)
        sb.addWidget(self.search_btn)
        sb.addWidget(self.error_label)

        self.results_status = QLabel(alignment=Qt.AlignCenter)
        results_container = QWidget()
        self.results_grid = QGridLayout(results_container)
        self.results_grid.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.results_area = QScrollArea()
        self.results_area.setWidgetResizable(True)
        self.results_area.setWidget(results_container)

        left = QWidget()
        lv = QVBoxLayout(left)
        lv.addWidget(search_box)
        lv.addWidget(self.results_status)
        lv.addWidget(self.results_area, 1)

        # ── watchlist side -------------------------------------------------
        watch_box = QGroupBox("Watchlist")
        wv = QVBoxLayout(watch_box)
        watch_container = QWidget()
        self.watchlist_layout = QVBoxLayout(watch_container)
        self.watchlist_layout.setAlignment(Qt.AlignTop)
        self.watchlist_area = QScrollArea()
        self.watchlist_area.setWidgetResizable(True)
        self.watchlist_area.setWidget(watch_container)
        wv.addWidget(self.watchlist_area, 1)

        pick_row = QHBoxLayout()
        self.pick_btn = QPushButton("Pick a Movie")
        pick_row.addWidget(self.pick_btn)
        pick_row.addStretch()
        wv.addLayout(pick_row)

        self.countdown_label = QLabel(alignment=Qt.AlignCenter)
        self.picked_label    = QLabel(alignment=Qt.AlignCenter)
        self.picked_label.setStyleSheet(f"font-weight:bold; color:{settings.ACCENT_COLOR};")
        wv.addWidget(self.countdown_label)
        wv.addWidget(self.picked_label)

        splitter = QSplitter()
        splitter.addWidget(left)
        splitter.addWidget(watch_box)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        # ── toolbar --------------------------------------------------------
        tb = self.addToolBar("Main")
        act = QAction("Pick", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self._on_pick)
        tb.addAction(act)

    def _connect_signals(self) -> None:
        self.search_btn.clicked.connect(self._on_search)
        self.title_input.returnPressed.connect(self._on_search)
        self.year_input.returnPressed.connect(self._on_search)
        self.pick_btn.clicked.connect(self._on_pick)

    # ======================================================================
    # Search
    # ======================================================================
    @Slot()
    def _on_search(self):
        """Validate the form, then hand the query to a search worker."""
        self.error_label.clear()
        self._clear_results()
        title = self.title_input.text()
        year  = self.year_input.text()
        self._mark_invalid(self.title_input, False)
        self._mark_invalid(self.year_input, False)

        check = validate_search_input(title, year)
        if not check.ok:
            self.error_label.setText(check.message)
            self._mark_invalid(self.title_input, check.field == "title")
            self._mark_invalid(self.year_input, check.field == "year")
            return

        self._search_id += 1
        self.results_status.setText("Searching...")
        try:
            start_search(
                self.ctx, title, year, self._search_id, self._workers,
                self._on_results, self._on_search_failed,
            )
        except RuntimeError as err:
            log_debug(f"search not started: {err}")
            self.results_status.setText("Error fetching movies.")

    @Slot(int, list)
    def _on_results(self, request_id: int, hits: list):
        if request_id != self._search_id:
            return                                   # superseded search
        self.render_results(hits)
        start_poster_download(hits, self._workers, self._on_poster_loaded)

    @Slot(int, str)
    def _on_search_failed(self, request_id: int, message: str):
        if request_id != self._search_id:
            return
        self._clear_results()
        self.results_status.setText("Error fetching movies.")

    @Slot(str, QByteArray)
    def _on_poster_loaded(self, imdb_id: str, data: QByteArray):
        if card := self._result_cards.get(imdb_id):
            card.set_poster_data(data)

    def render_results(self, hits: list[dict]) -> None:
        self._clear_results()
        if not hits:
            self.results_status.setText("No results found.")
            return
        self.results_status.clear()
        for idx, hit in enumerate(hits):
            card = MovieCard(hit, self)
            card.add_requested.connect(self._on_add)
            r, c = divmod(idx, RESULT_COLUMNS)
            self.results_grid.addWidget(card, r, c)
            self._result_cards[card.imdb_id] = card

    def _clear_results(self) -> None:
        self.results_status.clear()
        self._result_cards = {}
        while self.results_grid.count():
            item = self.results_grid.takeAt(0)
            if widget := item.widget():
                widget.deleteLater()

    @staticmethod
    def _mark_invalid(field: QLineEdit, invalid: bool) -> None:
        field.setProperty("invalid", invalid)
        field.style().unpolish(field)
        field.style().polish(field)

    # ======================================================================
    # Watchlist
    # ======================================================================
    @Slot(dict)
    def _on_add(self, hit: dict):
        self.ctx.watchlist.add(hit)
        self.render_watchlist()

    @Slot(str)
    def _on_toggle(self, imdb_id: str):
        watched = self.ctx.watchlist.toggle_watched(imdb_id)
        if watched is None:
            return
        for card in self.watchlist_area.widget().findChildren(WatchlistCard):
            if card.imdb_id == imdb_id:
                card.set_watched(watched)

    @Slot(str)
    def _on_remove(self, imdb_id: str):
        self.ctx.watchlist.remove(imdb_id)
        self.render_watchlist()

    def render_watchlist(self) -> None:
        while self.watchlist_layout.count():
            item = self.watchlist_layout.takeAt(0)
            if widget := item.widget():
                widget.deleteLater()

        if len(self.ctx.watchlist) == 0:
            self.watchlist_layout.addWidget(QLabel("Empty Watchlist."))
            return

        for entry in self.ctx.watchlist:
            card = WatchlistCard(entry)
            card.toggle_requested.connect(self._on_toggle)
            card.remove_requested.connect(self._on_remove)
            self.watchlist_layout.addWidget(card)

    # ======================================================================
    # Pick
    # ======================================================================
    @Slot()
    def _on_pick(self):
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown.deleteLater()
            self._countdown = None
        self.picked_label.clear()
        self.countdown_label.clear()

        pick = self.ctx.watchlist.random_pick()
        if pick is None:
            self.countdown_label.setText(no_pick_message(self.ctx.watchlist))
            return

        self._countdown = run_countdown(
            settings.COUNTDOWN_SECONDS,
            lambda t: self.countdown_label.setText(countdown_message(t)),
            lambda: self._on_pick_done(pick),
            parent=self,
        )

    def _on_pick_done(self, pick):
        self.countdown_label.clear()
        self.picked_label.setText(pick_announcement(pick))
        self.ctx.watchlist.remember_pick(pick)
        log_debug(f"Picked {pick.label} [{pick.imdb_id}]")
