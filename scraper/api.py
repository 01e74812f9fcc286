"""
HTTP API serving the scraped Scholar profile.

``GET /api/scholar`` renders the configured profile on every call and
returns the publications, metrics and citation graph as JSON, or a
500 with a single ``error`` field if scraping failed.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import settings
from scraper.sources.data import ScholarResponse
from scraper.sources.scholar_profile import scrape_scholar_profile

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    profile_url: str


def create_app(
    scrape: Optional[Callable[[], ScholarResponse]] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        scrape: Callable producing a ScholarResponse. Defaults to scraping
            settings.scholar_profile_url.

    Returns:
        Configured FastAPI instance.
    """
    scrape = scrape or scrape_scholar_profile

    app = FastAPI(
        title="Scholar Profile API",
        description="Publications, citation metrics and citation graph "
                    "scraped from a Google Scholar profile.",
        version="1.0.0",
    )

    # Sync route so the blocking browser session runs in the threadpool.
    @app.get("/api/scholar")
    def get_scholar_profile() -> JSONResponse:
        response = scrape()
        status_code = 200 if response.ok else 500
        if not response.ok:
            logger.warning(f"Scrape failed: {response.error}")
        return JSONResponse(status_code=status_code, content=response.to_payload())

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", profile_url=settings.scholar_profile_url)

    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the HTTP API server with uvicorn."""
    import uvicorn

    host = host or settings.api_host
    port = port or settings.api_port

    logger.info(f"Starting HTTP API server on {host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level=settings.log_level.lower())
