from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (OMDB_API_KEY, MOVIE_NIGHT_DATA_DIR)
load_dotenv(BASE_DIR / "secret.env")

# File / folder paths
DATA_DIR   = Path(os.getenv("MOVIE_NIGHT_DATA_DIR") or BASE_DIR / "data")
STORE_PATH = DATA_DIR / "store.json"
LOG_PATH   = DATA_DIR / "movie_night.log"

# OMDb
OMDB_URL        = "https://www.omdbapi.com/"
REQUEST_TIMEOUT = 8
NO_POSTER       = "N/A"

# Store keys (same names the browser version used in localStorage)
WATCHLIST_KEY = "movieWatchlist"
LAST_PICK_KEY = WATCHLIST_KEY + "LastPick"

# Picker
COUNTDOWN_SECONDS = 3

# UI constants
ACCENT_COLOR  = "#3b82f6"
POSTER_WIDTH  = 80
POSTER_HEIGHT = 120
