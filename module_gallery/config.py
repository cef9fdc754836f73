"""
Runtime settings for the module gallery.

Values come from the environment (optionally seeded from a .env file at the
project root) and fall back to the defaults below.
"""
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PATH = Path(__file__).parent.parent / ".env"


def load_env(env_path: Optional[Path] = None) -> int:
    """Load KEY=VALUE lines from a .env file into os.environ. Returns the count loaded."""
    env_path = Path(env_path) if env_path else ENV_PATH
    if not env_path.exists():
        logger.debug(f".env file not found at {env_path}")
        return 0

    loaded = 0
    with open(env_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                os.environ[key.strip()] = value.strip()
                loaded += 1
    logger.info(f"Loaded {loaded} settings from {env_path}")
    return loaded


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={value} is below {minimum}, using {default}")
        return default
    return value


class Settings:
    """Snapshot of the gallery settings read from the environment."""

    def __init__(self):
        self.log_level = os.getenv("GALLERY_LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("GALLERY_LOG_FILE") or None
        self.default_bins = _env_int("GALLERY_DEFAULT_BINS", 10)
        self.histogram_dataset = os.getenv("GALLERY_HISTOGRAM_DATASET", "diabetes")
        self.preview_rows = _env_int("GALLERY_PREVIEW_ROWS", 6)

    def __repr__(self):
        return (
            f"<Settings(log_level={self.log_level}, default_bins={self.default_bins}, "
            f"histogram_dataset={self.histogram_dataset})>"
        )


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    global _settings
    if _settings is None or reload:
        _settings = Settings()
    return _settings
