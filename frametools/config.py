import os
import logging
from typing import Optional

def _int_env(name: str, default: int) -> int:
    """Reads an integer setting, falling back to the default when unset or invalid."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default

# Number formatting (defaults follow ABNT NBR 5891: thousands ".", decimal ",")
THOUSANDS_SEPARATOR = os.getenv("FRAMETOOLS_THOUSANDS_SEPARATOR", ".")
DECIMAL_SEPARATOR = os.getenv("FRAMETOOLS_DECIMAL_SEPARATOR", ",")
DECIMAL_PLACES = _int_env("FRAMETOOLS_DECIMAL_PLACES", 2)

# Table inspection
MAX_UNIQUE_ITEMS = _int_env("FRAMETOOLS_MAX_UNIQUE_ITEMS", 6)
DATE_FORMAT = os.getenv("FRAMETOOLS_DATE_FORMAT", "dd-mm-yyyy")

LOG_LEVEL = os.getenv("FRAMETOOLS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def configure_logging(level: Optional[str] = None):
    """Configures root logging for scripts and notebooks using frametools."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
