# config.py
import os
import sys


def get_data_dir():
    """Get the appropriate data directory for user files."""
    override = os.environ.get("DESKBOOK_DATA_DIR")
    if override:
        data_dir = override
    elif sys.platform == "win32":
        data_dir = os.path.join(os.path.expanduser('~'), 'AppData', 'Local', 'Deskbook')
    else:
        data_dir = os.path.join(os.path.expanduser('~'), '.deskbook')
    return data_dir


# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")
BOOKINGS_FILE = os.path.join(_DATA_DIR, "bookings.json")

# --- Branches ---
BRANCH_MSK = "msk"
BRANCH_RND = "rnd"

# --- Calendar Defaults ---
DAYS_IN_WEEK = 7
LANE_STRATEGY_IDENTITY = "identity"
LANE_STRATEGY_OVERLAP = "overlap"
DEFAULT_LANE_STRATEGY = LANE_STRATEGY_IDENTITY
DEFAULT_BOOKING_LABEL = "Бронь"
DEFAULT_LOG_LEVEL = "INFO"

# --- Window ---
DEFAULT_WINDOW_GEOMETRY = [200, 200, 720, 640]
