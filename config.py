"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
DB_PATH = DATA_DIR / "user_directory.db"

# Ensure directories exist
DATA_DIR.mkdir(exist_ok=True)

# Database (durable preference storage)
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

# Remote user directory
USERS_API_URL = os.getenv("USERS_API_URL", "https://jsonplaceholder.typicode.com/users")
USERS_API_TIMEOUT = _env_float("USERS_API_TIMEOUT", 15.0)

# Avatar images, keyed by record id
AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?img={id}"

# Query behaviour
PAGE_SIZE = max(1, _env_int("PAGE_SIZE", 5))
SEARCH_DEBOUNCE_SECONDS = _env_float("SEARCH_DEBOUNCE_SECONDS", 0.3)
SCROLL_THRESHOLD = _env_float("SCROLL_THRESHOLD", 5.0)

# Preference keys
DARK_MODE_KEY = "darkMode"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "User Directory"
APP_PORT = _env_int("APP_PORT", 8080)
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
