from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field

from npb_scraper.logging_utils import get_logger

logger = get_logger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default


class Settings(BaseModel):
    api_title: str = "NPB Roster Directory API"
    api_description: str = "Unofficial API exposing NPB team rosters, player profiles and cheering songs."
    api_version: str = "0.1.0"
    fetch_timeout: float = Field(15.0, gt=0, description="Seconds allowed for each upstream page fetch.")
    allowed_email: Optional[str] = Field(
        None, description="Only this identity may use the API; unset leaves the API open."
    )
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings(
        api_title=os.getenv("NPB_API_TITLE", "NPB Roster Directory API"),
        fetch_timeout=_env_float("NPB_FETCH_TIMEOUT", 15.0),
        allowed_email=os.getenv("NPB_ALLOWED_EMAIL") or None,
        log_level=os.getenv("NPB_LOG_LEVEL", "INFO"),
    )
