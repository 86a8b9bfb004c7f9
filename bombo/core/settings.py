import logging
from os import getenv, path
from typing import Optional

from pydantic import BaseModel
from dotenv import load_dotenv

# =====================================================
# Load the .env file from the project root
# =====================================================
BASE_DIR = path.dirname(path.abspath(__file__))        # bombo/core
ROOT_DIR = path.dirname(path.dirname(BASE_DIR))        # <root>/
ENV_PATH = path.join(ROOT_DIR, ".env")                 # <root>/.env
load_dotenv(ENV_PATH)
# =====================================================

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "") -> bool:
    return getenv(name, default).strip().lower() in _TRUTHY


def _env_int(name: str) -> Optional[int]:
    raw = getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer.")
        return None


class Settings(BaseModel):
    encoding: str = getenv("BOMBO_ENCODING", "utf-8")
    csv_sep: str = getenv("BOMBO_CSV_SEP", ",")

    # Diagnostic listing of the loaded pool (never on by default)
    debug: bool = _env_flag("BOMBO_DEBUG")
    # Fixed seed for reproducible draws; unset means a fresh seed per run
    seed: Optional[int] = _env_int("BOMBO_SEED")

    log_level: str = getenv("BOMBO_LOG_LEVEL", "WARNING")


settings = Settings()
