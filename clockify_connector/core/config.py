# clockify_connector/core/config.py

from dotenv import load_dotenv
import os

load_dotenv()

ENV_PREFIX = "CLOCKIFY"
DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"

_TRUTHY = {"1", "true", "yes", "on"}


def get_clockify_token() -> str:
    """
    Clé API lue dans CLOCKIFY_TOKEN.
    Une valeur absente renvoie "" : c'est la construction du client qui la refuse.
    """
    return os.getenv(f"{ENV_PREFIX}_TOKEN", "").strip()


def get_clockify_base_url() -> str:
    return os.getenv(f"{ENV_PREFIX}_BASE_URL", "").strip() or DEFAULT_BASE_URL


def is_debug_enabled() -> bool:
    """Active le log des requêtes/réponses (CLOCKIFY_DEBUG=1|true|yes|on)."""
    return os.getenv(f"{ENV_PREFIX}_DEBUG", "").strip().lower() in _TRUTHY
