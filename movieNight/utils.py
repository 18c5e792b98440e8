from datetime import datetime
from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap, QPainter, QFont, QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieNight import settings


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def mask_api_key(url: str, api_key: str | None = None) -> str:
    """Hide the OMDb credential (the `apikey` query value) before a URL is logged."""
    parts = urlsplit(url)
    query = [(k, "***" if k == "apikey" else v) for k, v in parse_qsl(parts.query, keep_blank_values=True)]
    masked = urlunsplit(parts._replace(query=urlencode(query, safe="*")))
    if api_key:
        masked = masked.replace(api_key, "***").replace(quote_plus(api_key), "***")
    return masked


def make_placeholder_pixmap(
    width: int = settings.POSTER_WIDTH,
    height: int = settings.POSTER_HEIGHT,
    text: str = "No Poster",
    fg_color: str = "#9aa0a6",
    bg_color: str = "#2b2c2e",
    border_color: str = settings.ACCENT_COLOR,
) -> QPixmap:
    """
    Create a poster-sized pixmap with a rounded border and centered `text`.
    Used whenever a result has no poster or its image fails to load.
    """
    pix = QPixmap(width, height)
    pix.fill(QColor(bg_color))

    painter = QPainter(pix)
    painter.setRenderHint(QPainter.Antialiasing)

    pen = painter.pen()
    pen.setWidth(2)
    pen.setColor(QColor(border_color))
    painter.setPen(pen)
    painter.drawRoundedRect(1, 1, width - 2, height - 2, 6, 6)

    font = QFont("Arial", max(7, width // 10), QFont.Bold)
    painter.setFont(font)
    painter.setPen(QColor(fg_color))
    painter.drawText(pix.rect(), Qt.AlignCenter | Qt.TextWordWrap, text)

    painter.end()
    return pix


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#202124"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase, QColor("#323336"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
    app.setStyleSheet(
        "QLineEdit[invalid=\"true\"] { border: 1px solid #e74c3c; }"
        "QLabel#ErrorLabel { color: #e74c3c; }"
        "QFrame#MovieCardItem, QFrame#WatchlistCardItem { border-radius: 6px; }"
    )
