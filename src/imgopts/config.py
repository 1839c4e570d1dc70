"""Configuration for imgopts"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


class Config:
    """Process-wide defaults read from the environment"""

    # Relative priority given to download tasks that don't set one
    DEFAULT_PRIORITY = _env_float("IMGOPTS_DEFAULT_PRIORITY", 0.5)

    # Native scale reported for the current display
    SCREEN_SCALE = _env_float("IMGOPTS_SCREEN_SCALE", 1.0)

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
