"""
Terminal viewer for a scraped Scholar publication list.

Fetches the profile payload from the HTTP API once, keeps it as the source
list, and re-filters locally whenever the search text or year changes.
Nothing is fetched again after the initial load.
"""

import logging
from typing import List, Optional, Tuple

import requests
from pydantic import ValidationError

from config.settings import settings
from scraper.query import QueryState, filter_publications, unique_years
from scraper.sources.data import PublicationRecord, ScholarResponse

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch results"

HELP_TEXT = """Commands:
  search <text>   filter by title, author or year text
  year <yyyy>     only show publications from that year
  year            clear the year filter
  years           list the years available
  clear           reset search and year
  quit            exit"""


def fetch_profile(
    api_url: Optional[str] = None,
    timeout: Optional[int] = None,
) -> Tuple[List[PublicationRecord], Optional[str]]:
    """
    Fetch the publication list from the scrape endpoint.

    Args:
        api_url: Endpoint URL (defaults to settings.api_url)
        timeout: Request timeout in seconds

    Returns:
        Tuple of (publications, error message if any)
    """
    api_url = api_url or settings.api_url
    timeout = timeout or settings.request_timeout

    try:
        resp = requests.get(api_url, timeout=timeout)
        data = resp.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Fetching {api_url} failed: {e}")
        return [], FETCH_ERROR_MESSAGE

    if not isinstance(data, dict):
        return [], FETCH_ERROR_MESSAGE

    try:
        payload = ScholarResponse.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected payload from {api_url}: {e}")
        return [], FETCH_ERROR_MESSAGE

    if payload.error:
        return [], payload.error
    if not resp.ok:
        logger.error(f"Fetching {api_url} failed: HTTP {resp.status_code}")
        return [], FETCH_ERROR_MESSAGE

    return payload.results or [], None


def format_publication(record: PublicationRecord) -> str:
    lines = [
        record.title,
        f"   Authors: {record.authors}",
        f"   Journal: {record.journal}",
        f"   Publication Date: {record.publication_date}",
    ]
    if record.link:
        lines.append(f"   Link: {record.link}")
    return "\n".join(lines)


def render_publications(records: List[PublicationRecord]) -> str:
    if not records:
        return "No publications match."
    return "\n\n".join(
        f"{i}. {format_publication(record)}" for i, record in enumerate(records, 1)
    )


class PublicationBrowser:
    """Holds the fetched list and the current query; recomputes the view on each change."""

    def __init__(self, publications: List[PublicationRecord]):
        self.publications = list(publications)
        self.state = QueryState()

    @property
    def visible(self) -> List[PublicationRecord]:
        return filter_publications(self.publications, self.state)

    @property
    def years(self) -> List[int]:
        return unique_years(self.publications)

    def handle(self, line: str) -> Tuple[bool, str]:
        """
        Apply one command.

        Returns:
            Tuple of (keep running, text to show)
        """
        command, _, argument = line.strip().partition(" ")
        command = command.lower()

        if command in ("quit", "exit", "q"):
            return False, ""
        if command == "search":
            self.state = self.state.with_search(argument)
        elif command == "year":
            argument = argument.strip()
            if not argument:
                self.state = self.state.with_year(None)
            else:
                try:
                    year = int(argument)
                except ValueError:
                    return True, f"Not a year: {argument}"
                self.state = self.state.with_year(year)
        elif command == "clear":
            self.state = QueryState()
        elif command == "years":
            return True, ", ".join(str(year) for year in self.years) or "No years available."
        else:
            return True, HELP_TEXT

        return True, render_publications(self.visible)


def run(api_url: Optional[str] = None) -> int:
    """Fetch once, then read commands from stdin until quit."""
    publications, error = fetch_profile(api_url)
    if error:
        print(f"Error: {error}")
        return 1

    browser = PublicationBrowser(publications)
    print(render_publications(browser.visible))
    print(f"\n{HELP_TEXT}")

    while True:
        try:
            line = input("\n> ")
        except EOFError:
            break
        keep_running, output = browser.handle(line)
        if not keep_running:
            break
        print(output)

    return 0


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Browse a scraped Scholar publication list")
    parser.add_argument(
        "--api-url",
        default=None,
        help=f"Scrape endpoint (default: {settings.api_url})"
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    sys.exit(run(args.api_url))
