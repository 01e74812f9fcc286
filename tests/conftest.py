"""
Shared fixtures for the scraper test suite.

Builds static HTML shaped like a rendered Scholar profile so extraction can
be tested without a browser.
"""

from typing import List, Optional

import pytest
from bs4 import BeautifulSoup

from scraper.sources.data import PublicationRecord


def publication_row(
    title: Optional[str] = "Deep Learning for Graphs",
    link: Optional[str] = "/citations?view_op=view_citation&citation_for_view=abc",
    grays: Optional[List[str]] = None,
    year: Optional[str] = "2021",
    citations: Optional[str] = "12",
) -> str:
    """One ``.gsc_a_tr`` row. Pass None to leave a node out."""
    if grays is None:
        grays = ["A Smith, B Jones", "Journal of Machine Learning 12 (3), 2021"]

    parts = ['<tr class="gsc_a_tr"><td class="gsc_a_t">']
    if title is not None:
        href = f' href="{link}"' if link is not None else ""
        parts.append(f'<a class="gsc_a_at"{href}>{title}</a>')
    for gray in grays:
        parts.append(f'<div class="gs_gray">{gray}</div>')
    parts.append("</td>")
    if citations is not None:
        parts.append(f'<td class="gsc_a_c"><a class="gsc_a_ac gs_ibl">{citations}</a></td>')
    else:
        parts.append('<td class="gsc_a_c"></td>')
    if year is not None:
        parts.append(f'<td class="gsc_a_y"><span class="gsc_a_h gsc_a_hc gs_ibl">{year}</span></td>')
    parts.append("</tr>")
    return "".join(parts)


def metrics_block(values: List[str]) -> str:
    cells = []
    labels = ["Citations", "h-index", "i10-index"]
    for i in range(0, len(values), 2):
        pair = "".join(f'<td class="gsc_rsb_std">{v}</td>' for v in values[i:i + 2])
        label = labels[i // 2] if i // 2 < len(labels) else ""
        cells.append(f'<tr><td class="gsc_rsb_sc1">{label}</td>{pair}</tr>')
    return f'<table id="gsc_rsb_st"><tbody>{"".join(cells)}</tbody></table>'


def histogram_block(years: List[str], citations: List[str]) -> str:
    labels = "".join(f'<span class="gsc_g_t">{y}</span>' for y in years)
    bars = "".join(
        f'<a class="gsc_g_a"><span class="gsc_g_al">{c}</span></a>' for c in citations
    )
    return f'<div class="gsc_md_hist_b">{labels}{bars}</div>'


def profile_page(
    rows: Optional[List[str]] = None,
    metrics: Optional[List[str]] = None,
    years: Optional[List[str]] = None,
    citations: Optional[List[str]] = None,
) -> BeautifulSoup:
    body = "".join([
        metrics_block(metrics or []),
        histogram_block(years or [], citations or []),
        f'<table id="gsc_a_t"><tbody id="gsc_a_b">{"".join(rows or [])}</tbody></table>',
    ])
    return BeautifulSoup(f"<html><body>{body}</body></html>", "html.parser")


@pytest.fixture
def full_profile_page() -> BeautifulSoup:
    return profile_page(
        rows=[
            publication_row(),
            publication_row(
                title="Older Work",
                grays=["C Lee"],
                year="2019",
                citations="",
            ),
        ],
        metrics=["1500", "900", "20", "15", "30", "25"],
        years=["2020", "2021", "2022"],
        citations=["100", "200", "300"],
    )


class FakeRenderer:
    """Stands in for PageRenderer; records whether it was closed."""

    def __init__(self, document=None, error: Optional[Exception] = None):
        self.document = document
        self.error = error
        self.rendered_urls: List[str] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def render_document(self, url: str):
        self.rendered_urls.append(url)
        if self.error:
            raise self.error
        return self.document


@pytest.fixture
def sample_publications() -> List[PublicationRecord]:
    return [
        PublicationRecord(
            title="Graph Neural Networks in Practice",
            authors="A Smith, B Jones",
            publication_date="2021-05",
            journal="NeurIPS",
            citation_count="40",
        ),
        PublicationRecord(
            title="Sparse Attention",
            authors="C Lee, A Smith",
            publication_date="2022-01",
            journal="ICML",
            citation_count="7",
        ),
        PublicationRecord(
            title="Protein Folding Benchmarks",
            authors="D Kim",
            publication_date="2021",
            journal="Bioinformatics",
        ),
        PublicationRecord(
            title="Untitled Preprint",
            authors="E Park",
            publication_date="",
        ),
    ]
