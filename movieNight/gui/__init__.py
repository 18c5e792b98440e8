"""
gui
~~~
All Qt widgets, pages and controllers.

•  No direct store access here – everything goes through `AppContext.watchlist`.
•  Re-export the high-level symbols so the app can simply:

    from movieNight.gui import MainWindow, AppContext
"""

from movieNight.gui.controller import (
    AppContext,
    Validation,
    validate_search_input,
    start_search,             # OMDb search on a worker thread
    start_poster_download,    # poster images on a worker thread
)
from movieNight.gui.countdown  import Countdown, run_countdown
from movieNight.gui.main_window import MainWindow
from movieNight.gui.movie_card  import MovieCard, WatchlistCard

__all__ = [
    "AppContext", "Validation", "validate_search_input",
    "start_search", "start_poster_download",
    "Countdown", "run_countdown",
    "MainWindow", "MovieCard", "WatchlistCard",
]
