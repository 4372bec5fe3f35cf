# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/site.db")
SEED_ON_STARTUP = _env_bool("SEED_ON_STARTUP", True)

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "auth_token")
SESSION_TTL_DAYS = int(os.getenv("SESSION_TTL_DAYS", 30))
SESSION_TTL_SECONDS = SESSION_TTL_DAYS * 24 * 60 * 60
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)

PASSWORD_HASH_ITERATIONS = int(os.getenv("PASSWORD_HASH_ITERATIONS", 210_000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

# client side
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", 2))
CART_STORAGE_PATH = os.path.expanduser(os.getenv("CART_STORAGE_PATH", "~/.storefront/cart.json"))
FREE_SHIPPING_THRESHOLD_CENTS = int(os.getenv("FREE_SHIPPING_THRESHOLD_CENTS", 50000))
SHIPPING_CENTS = int(os.getenv("SHIPPING_CENTS", 7900))
CURRENCY_LABEL = os.getenv("CURRENCY_LABEL", "Kč")
