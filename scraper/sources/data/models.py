"""Data models for scraped Scholar profile information.

Attribute names are snake_case; the JSON wire names consumed by the
publications viewer are camelCase aliases.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PublicationRecord(BaseModel):
    """A single row of the profile's publication list, as rendered."""

    title: str = ""
    link: str = ""
    authors: str = ""
    publication_date: str = Field("", alias="publicationDate")
    journal: str = ""
    citation_count: str = Field("0", alias="citationCount")

    class Config:
        populate_by_name = True


class MetricsSnapshot(BaseModel):
    """The six aggregate numbers of the profile's statistics block."""

    citations_all: str = Field("0", alias="citationsAll")
    citations_since_2019: str = Field("0", alias="citationsSince2019")
    h_index_all: str = Field("0", alias="hIndexAll")
    h_index_since_2019: str = Field("0", alias="hIndexSince2019")
    i10_index_all: str = Field("0", alias="i10IndexAll")
    i10_index_since_2019: str = Field("0", alias="i10IndexSince2019")

    class Config:
        populate_by_name = True


class HistogramPoint(BaseModel):
    """One bar of the citations-per-year graph."""

    year: str = ""
    citations: str = "0"


@dataclass
class ScholarProfile:
    """Everything extracted from one rendered profile page."""

    publications: List[PublicationRecord]
    metrics: MetricsSnapshot
    histogram: List[HistogramPoint]


class ScholarResponse(BaseModel):
    """Payload returned by the scrape endpoint.

    Either the three data fields are set, or only ``error`` is.
    """

    results: Optional[List[PublicationRecord]] = None
    metrics: Optional[MetricsSnapshot] = None
    graph_data: Optional[List[HistogramPoint]] = Field(None, alias="graphData")
    error: Optional[str] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_profile(cls, profile: ScholarProfile) -> "ScholarResponse":
        return cls(
            results=profile.publications,
            metrics=profile.metrics,
            graph_data=profile.histogram,
        )

    @classmethod
    def failure(cls, message: str) -> "ScholarResponse":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with wire names, omitting fields that are not set."""
        return self.model_dump(by_alias=True, exclude_none=True)
