"""
Headless browser rendering of dynamic pages.

Opens a Playwright Chromium session, navigates to a URL, waits for the
network to go quiet, and hands back the rendered DOM as a BeautifulSoup
document. One session per ``PageRenderer``; always release it with
``close()`` or by using the renderer as a context manager.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from playwright.sync_api import Browser, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from config.settings import settings

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when the browser cannot be launched or the page cannot be rendered."""


class PageRenderer:
    """Renders a URL in headless Chromium and returns a queryable document."""

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_args: Optional[List[str]] = None,
        wait_until: Optional[str] = None,
    ):
        self.headless = settings.headless if headless is None else headless
        self.browser_args = browser_args if browser_args is not None else settings.browser_args
        self.wait_until = wait_until or settings.wait_until
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    def __enter__(self) -> "PageRenderer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_browser(self) -> Browser:
        if self._browser is None:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(
                headless=self.headless,
                args=self.browser_args,
            )
            logger.debug(f"Launched Chromium (headless={self.headless})")
        return self._browser

    def render_document(self, url: str) -> BeautifulSoup:
        """
        Navigate to ``url`` and parse the page once the network is idle.

        No retry, and no timeout beyond Playwright's navigation default.

        Raises:
            RenderError: if launching, navigating or reading the page fails
        """
        try:
            browser = self._ensure_browser()
            page = browser.new_page()
            page.goto(url, wait_until=self.wait_until)
            html = page.content()
        except PlaywrightError as e:
            raise RenderError(f"Failed to render {url}: {e}") from e

        logger.info(f"Rendered {url} ({len(html)} bytes)")
        return BeautifulSoup(html, "html.parser")

    def close(self) -> None:
        """Close the browser and stop Playwright. Safe to call more than once."""
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            self._browser = None
            if self._playwright is not None:
                self._playwright.stop()
                self._playwright = None
