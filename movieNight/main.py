import sys
from PySide6.QtWidgets import QApplication

from movieNight.utils          import apply_dark_palette, log_debug
from movieNight.gui.controller import AppContext
from movieNight.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    # -------- load the saved watchlist before any widget exists -------
    ctx = AppContext.create()
    log_debug(f"Started with {len(ctx.watchlist)} movies on the watchlist.")

    window = MainWindow(ctx)
    window.show()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
