# unimatch/core/config.py

import logging
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def env_float(name: str, default: Optional[float]) -> Optional[float]:
    """
    Read a float setting. Unset or blank gives `default`; an unparsable
    value is logged and also gives `default`.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


APP_NAME = "UniMatch Chat"
VERSION = "1.0.0"

DIAGNOSTIC_API_URL = os.getenv("DIAGNOSTIC_API_URL", "http://localhost:8080/diagnostico")

# None lets requests wait for as long as the connection stays open
DIAGNOSTIC_API_TIMEOUT = env_float("DIAGNOSTIC_API_TIMEOUT", None)

MATCH_THRESHOLD = env_float("MATCH_THRESHOLD", 70.0)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
