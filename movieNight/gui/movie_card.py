from __future__ import annotations
from PySide6.QtCore    import Qt, QByteArray, QPropertyAnimation, Signal # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QPushButton, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect
)

from movieNight import settings
from movieNight.metadata import MovieEntry
from movieNight.utils import log_debug, make_placeholder_pixmap


class MovieCard(QFrame):
    """Search-result card: poster, "Title (Year)" and an Add button."""
    add_requested = Signal(dict)

    def __init__(self, hit: dict, parent=None):
        super().__init__(parent)
        self.hit = hit
        self.imdb_id = hit.get("imdbID", "")
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── poster (placeholder until the real image arrives) ───────────
        self.poster = QLabel(alignment=Qt.AlignCenter)
        self.poster.setFixedSize(settings.POSTER_WIDTH, settings.POSTER_HEIGHT)
        self.poster.setToolTip(f"{hit.get('Title', '')} poster")
        self.poster.setPixmap(make_placeholder_pixmap())
        root.addWidget(self.poster, 0, Qt.AlignHCenter)

        # ── title ───────────────────────────────────────────────────────
        title = QLabel(f"{hit.get('Title', '')} ({hit.get('Year', '')})")
        title.setWordWrap(True)
        title.setAlignment(Qt.AlignHCenter)
        root.addWidget(title)

        # ── add button ──────────────────────────────────────────────────
        self.add_btn = QPushButton("Add")
        self.add_btn.clicked.connect(lambda: self.add_requested.emit(self.hit))
        root.addWidget(self.add_btn)
        root.addStretch()

        # ── hover shadow effect ─────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def set_poster_data(self, data: QByteArray) -> None:
        pix = QPixmap()
        if not pix.loadFromData(data):
            # broken image: keep the placeholder
            log_debug(f"Poster data for {self.imdb_id} could not be decoded")
            return
        self.poster.setPixmap(
            pix.scaled(settings.POSTER_WIDTH, settings.POSTER_HEIGHT,
                       Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)


class _ClickableLabel(QLabel):
    clicked = Signal()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)


class WatchlistCard(QFrame):
    """Watchlist row: click the title to cross it off, Remove to drop it."""
    toggle_requested = Signal(str)
    remove_requested = Signal(str)

    def __init__(self, entry: MovieEntry, parent=None):
        super().__init__(parent)
        self.imdb_id = entry.imdb_id
        self.setObjectName("WatchlistCardItem")
        self.setFrameShape(QFrame.StyledPanel)

        row = QHBoxLayout(self)
        row.setContentsMargins(8, 4, 8, 4)

        self.title = _ClickableLabel(entry.label)
        self.title.setCursor(Qt.PointingHandCursor)
        self.title.setToolTip("Click to mark as watched / unwatched")
        self.title.clicked.connect(lambda: self.toggle_requested.emit(self.imdb_id))
        self.set_watched(entry.watched)

        self.remove_btn = QPushButton("Remove")
        self.remove_btn.clicked.connect(lambda: self.remove_requested.emit(self.imdb_id))

        row.addWidget(self.title, 1)
        row.addWidget(self.remove_btn, 0, Qt.AlignRight)

    def set_watched(self, watched: bool) -> None:
        font = self.title.font()
        font.setStrikeOut(watched)
        self.title.setFont(font)
        self.title.setProperty("watched", watched)
        self.title.setStyleSheet("color: #9aa0a6;" if watched else "")
