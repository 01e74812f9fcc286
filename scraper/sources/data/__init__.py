"""Data models for scraped Scholar profile information."""

from .models import (
    HistogramPoint,
    MetricsSnapshot,
    PublicationRecord,
    ScholarProfile,
    ScholarResponse,
)

__all__ = [
    "HistogramPoint",
    "MetricsSnapshot",
    "PublicationRecord",
    "ScholarProfile",
    "ScholarResponse",
]
