"""Search and year filtering over an extracted publication list."""

import re
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from scraper.sources.data import PublicationRecord

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class QueryState:
    """What the user is currently searching for."""

    search_term: str = ""
    selected_year: Optional[int] = None

    def with_search(self, search_term: str) -> "QueryState":
        return replace(self, search_term=search_term)

    def with_year(self, selected_year: Optional[int]) -> "QueryState":
        return replace(self, selected_year=selected_year)


def parse_year(publication_date: str) -> Optional[int]:
    """
    Read the year from a date like "2021" or "2021-05".

    Takes the leading integer before the first "-". Returns None when there
    is none, so the record never matches a selected year.
    """
    match = _LEADING_INT.match(publication_date.split("-", 1)[0])
    if not match:
        return None
    return int(match.group(1))


def matches(record: PublicationRecord, state: QueryState) -> bool:
    """True if the record satisfies both the search term and the year filter."""
    term = state.search_term.lower()
    text_match = (
        term in record.title.lower()
        or term in record.authors.lower()
        or term in record.publication_date
    )
    if not text_match:
        return False

    # 0 means no year selected
    if state.selected_year:
        return parse_year(record.publication_date) == state.selected_year
    return True


def filter_publications(
    records: Sequence[PublicationRecord],
    state: QueryState,
) -> List[PublicationRecord]:
    """Return a new list of the records matching ``state``, in source order."""
    return [record for record in records if matches(record, state)]


def unique_years(records: Sequence[PublicationRecord]) -> List[int]:
    """Distinct publication years in first-occurrence order; unparseable dates are skipped."""
    years: List[int] = []
    for record in records:
        year = parse_year(record.publication_date)
        if year is not None and year not in years:
            years.append(year)
    return years
