"""Configuration settings for the Scholar profile scraper.

Handles the profile URL, headless browser options, and the HTTP service
and viewer endpoints.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

from scraper.profile_urls import DEFAULT_SCHOLAR_USER_ID, build_profile_url

load_dotenv()

# Project root directory
ROOT_DIR = Path(__file__).parent.parent


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [part.strip() for part in os.getenv(name, default).split(",") if part.strip()]


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Profile to scrape
    scholar_user_id: str = os.getenv("SCHOLAR_USER_ID", DEFAULT_SCHOLAR_USER_ID)
    scholar_profile_url: str = os.getenv(
        "SCHOLAR_PROFILE_URL",
        build_profile_url(os.getenv("SCHOLAR_USER_ID", DEFAULT_SCHOLAR_USER_ID)),
    )
    max_publications: int = int(os.getenv("MAX_PUBLICATIONS", "20"))

    # Browser settings
    headless: bool = _env_bool("BROWSER_HEADLESS", True)
    browser_args: List[str] = _env_list(
        "BROWSER_ARGS", "--no-sandbox,--disable-setuid-sandbox"
    )
    wait_until: str = os.getenv("BROWSER_WAIT_UNTIL", "networkidle")

    # HTTP service
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # Viewer
    api_url: str = os.getenv("SCHOLAR_API_URL", "http://127.0.0.1:8000/api/scholar")
    request_timeout: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        arbitrary_types_allowed = True


settings = Settings()
