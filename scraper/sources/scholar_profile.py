"""
Scrape a Google Scholar profile page into structured records.

The profile is rendered in a headless browser, then three independent
views are pulled out of the DOM: the publication list, the citation
metrics block, and the citations-per-year histogram.

Scholar's markup is unversioned and changes without notice, so every
field is read through an explicit ``FieldRule`` and degrades to a default
value instead of failing. Only rendering failures abort a scrape.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from config.settings import settings
from .data import (
    HistogramPoint,
    MetricsSnapshot,
    PublicationRecord,
    ScholarProfile,
    ScholarResponse,
)
from .renderer import PageRenderer

logger = logging.getLogger(__name__)

SCRAPE_ERROR_MESSAGE = "Failed to scrape Google Scholar profile"

PUBLICATION_ROW_SELECTOR = ".gsc_a_tr"
METRIC_VALUE_SELECTOR = "#gsc_rsb_st .gsc_rsb_std"
HISTOGRAM_YEAR_SELECTOR = ".gsc_g_t"
HISTOGRAM_CITATIONS_SELECTOR = ".gsc_g_a"

PUBLICATION_LIMIT = 20


@dataclass(frozen=True)
class FieldRule:
    """
    How to read one string field out of a DOM subtree.

    The value is the text (or ``attribute``) of the ``position``-th match of
    ``selector``. A missing match yields ``default``. With ``or_default``
    an empty value also yields ``default``.
    """

    selector: str
    position: int = 0
    default: str = ""
    attribute: Optional[str] = None
    strip: bool = False
    or_default: bool = False

    def resolve(self, node: Tag) -> str:
        matches = node.select(self.selector)
        if self.position >= len(matches):
            return self.default

        element = matches[self.position]
        if self.attribute:
            value = element.get(self.attribute)
            if value is None:
                return self.default
            if isinstance(value, list):
                value = " ".join(value)
        else:
            value = element.get_text()

        if self.strip:
            value = value.strip()
        if self.or_default and not value:
            return self.default
        return value


# Keyed by PublicationRecord attribute. Authors and journal share the
# ".gs_gray" selector: first match is the author list, second the venue.
PUBLICATION_RULES: Dict[str, FieldRule] = {
    "title": FieldRule(".gsc_a_at"),
    "link": FieldRule(".gsc_a_at", attribute="href"),
    "authors": FieldRule(".gs_gray", strip=True),
    "publication_date": FieldRule(".gsc_a_y"),
    "journal": FieldRule(".gs_gray", position=1),
    "citation_count": FieldRule(".gsc_a_c a", default="0", strip=True, or_default=True),
}

# Positions in the statistics table, read row by row: citations, h-index,
# i10-index, each as (all time, since cutoff year).
METRIC_RULES: Dict[str, FieldRule] = {
    name: FieldRule(METRIC_VALUE_SELECTOR, position=position, default="0", or_default=True)
    for position, name in enumerate([
        "citations_all",
        "citations_since_2019",
        "h_index_all",
        "h_index_since_2019",
        "i10_index_all",
        "i10_index_since_2019",
    ])
}


def extract_publication(row: Tag) -> PublicationRecord:
    """Extract one publication row; absent nodes give empty strings ("0" for citations)."""
    return PublicationRecord(
        **{name: rule.resolve(row) for name, rule in PUBLICATION_RULES.items()}
    )


def extract_publications(
    document: BeautifulSoup,
    max_publications: Optional[int] = None,
) -> List[PublicationRecord]:
    """
    Extract the first ``max_publications`` rows of the list, in document order.

    The count never exceeds PUBLICATION_LIMIT, whatever is configured.
    """
    if max_publications is None:
        max_publications = settings.max_publications
    max_publications = min(max_publications, PUBLICATION_LIMIT)

    rows = document.select(PUBLICATION_ROW_SELECTOR)[:max_publications]
    return [extract_publication(row) for row in rows]


def extract_metrics(document: BeautifulSoup) -> MetricsSnapshot:
    """Extract the statistics block; each missing cell reads as "0"."""
    return MetricsSnapshot(
        **{name: rule.resolve(document) for name, rule in METRIC_RULES.items()}
    )


def extract_histogram(document: BeautifulSoup) -> List[HistogramPoint]:
    """
    Pair the graph's year labels with its bar values by index.

    The year labels drive the length: extra bar values are dropped and
    missing ones read as "0".
    """
    years = [el.get_text() or "" for el in document.select(HISTOGRAM_YEAR_SELECTOR)]
    citations = [el.get_text() or "0" for el in document.select(HISTOGRAM_CITATIONS_SELECTOR)]

    return [
        HistogramPoint(year=year, citations=citations[i] if i < len(citations) else "0")
        for i, year in enumerate(years)
    ]


def extract_profile(
    document: BeautifulSoup,
    max_publications: Optional[int] = None,
) -> ScholarProfile:
    """Run all three extractions over the same rendered document."""
    return ScholarProfile(
        publications=extract_publications(document, max_publications),
        metrics=extract_metrics(document),
        histogram=extract_histogram(document),
    )


def scrape_scholar_profile(
    url: Optional[str] = None,
    renderer_factory: Callable[[], PageRenderer] = PageRenderer,
    max_publications: Optional[int] = None,
) -> ScholarResponse:
    """
    Render a Scholar profile and extract its publications, metrics and graph.

    Args:
        url: Profile URL (defaults to settings.scholar_profile_url)
        renderer_factory: Callable returning a renderer context manager
        max_publications: Row cap (defaults to settings.max_publications)

    Returns:
        ScholarResponse with all three data fields, or with only ``error``
        set if the page could not be rendered. Never partial.
    """
    url = url or settings.scholar_profile_url

    try:
        with renderer_factory() as renderer:
            document = renderer.render_document(url)
            profile = extract_profile(document, max_publications)
    except Exception:
        logger.exception("Error scraping Google Scholar profile")
        return ScholarResponse.failure(SCRAPE_ERROR_MESSAGE)

    logger.info(
        f"Scraped {len(profile.publications)} publications and "
        f"{len(profile.histogram)} graph points from {url}"
    )
    return ScholarResponse.from_profile(profile)


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=settings.log_level)

    url = sys.argv[1] if len(sys.argv) > 1 else settings.scholar_profile_url
    print(f"Scraping: {url}")

    response = scrape_scholar_profile(url)

    if not response.ok:
        print(f"Error: {response.error}")
        sys.exit(1)

    metrics = response.metrics
    print(f"\nCitations: {metrics.citations_all} (since 2019: {metrics.citations_since_2019})")
    print(f"h-index: {metrics.h_index_all} (since 2019: {metrics.h_index_since_2019})")
    print(f"i10-index: {metrics.i10_index_all} (since 2019: {metrics.i10_index_since_2019})")

    print(f"\n{'='*60}")
    print(f"{len(response.results)} Publications")
    print(f"{'='*60}")
    for i, pub in enumerate(response.results, 1):
        print(f"\n{i}. {pub.title}")
        print(f"   Authors: {pub.authors}")
        if pub.journal:
            print(f"   Journal: {pub.journal}")
        print(f"   Date: {pub.publication_date}")
        print(f"   Citations: {pub.citation_count}")
