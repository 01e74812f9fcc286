"""
Tests for the headless browser renderer.

Playwright is patched out; no browser is launched.
"""

from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError

from scraper.sources.renderer import PageRenderer, RenderError


@pytest.fixture
def mock_playwright():
    with patch("scraper.sources.renderer.sync_playwright") as mock_sync:
        playwright = MagicMock()
        browser = playwright.chromium.launch.return_value
        page = browser.new_page.return_value
        page.content.return_value = (
            '<html><body><tr class="gsc_a_tr"><a class="gsc_a_at">T</a></tr></body></html>'
        )
        mock_sync.return_value.start.return_value = playwright
        yield playwright, browser, page


class TestPageRenderer:
    def test_render_document(self, mock_playwright):
        playwright, browser, page = mock_playwright

        with PageRenderer(headless=True, browser_args=["--no-sandbox"]) as renderer:
            document = renderer.render_document("https://scholar.example/profile")

        assert document.select_one(".gsc_a_at").get_text() == "T"
        playwright.chromium.launch.assert_called_once_with(headless=True, args=["--no-sandbox"])
        page.goto.assert_called_once_with(
            "https://scholar.example/profile", wait_until="networkidle"
        )

    def test_closes_browser_on_exit(self, mock_playwright):
        playwright, browser, _ = mock_playwright

        with PageRenderer() as renderer:
            renderer.render_document("https://scholar.example/profile")

        browser.close.assert_called_once()
        playwright.stop.assert_called_once()

    def test_navigation_error_wrapped_and_released(self, mock_playwright):
        playwright, browser, page = mock_playwright
        page.goto.side_effect = PlaywrightError("net::ERR_CONNECTION_RESET")

        with pytest.raises(RenderError):
            with PageRenderer() as renderer:
                renderer.render_document("https://scholar.example/profile")

        browser.close.assert_called_once()
        playwright.stop.assert_called_once()

    def test_close_without_render_is_noop(self, mock_playwright):
        playwright, _, _ = mock_playwright

        PageRenderer().close()

        playwright.stop.assert_not_called()

    def test_close_twice(self, mock_playwright):
        playwright, browser, _ = mock_playwright
        renderer = PageRenderer()
        renderer.render_document("https://scholar.example/profile")

        renderer.close()
        renderer.close()

        browser.close.assert_called_once()
        playwright.stop.assert_called_once()

    def test_custom_wait_until(self, mock_playwright):
        _, _, page = mock_playwright

        with PageRenderer(wait_until="load") as renderer:
            renderer.render_document("https://scholar.example/profile")

        page.goto.assert_called_once_with("https://scholar.example/profile", wait_until="load")
