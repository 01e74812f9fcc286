"""
Scrape the configured Google Scholar profile and print the result.

This script:
1. Renders the profile page in a headless browser
2. Extracts publications, citation metrics and the citations-per-year graph
3. Prints the JSON payload, or a filtered listing of publications
"""

import json
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from scraper.query import QueryState, filter_publications, unique_years
from scraper.sources.scholar_profile import scrape_scholar_profile
from scraper.viewer import render_publications


def print_listing(response, state: QueryState):
    """Print metrics, the graph and the filtered publications."""
    metrics = response.metrics
    print(f"\n{'='*60}")
    print("Citation metrics            All    Since 2019")
    print(f"  Citations          {metrics.citations_all:>10} {metrics.citations_since_2019:>12}")
    print(f"  h-index            {metrics.h_index_all:>10} {metrics.h_index_since_2019:>12}")
    print(f"  i10-index          {metrics.i10_index_all:>10} {metrics.i10_index_since_2019:>12}")
    print(f"{'='*60}")

    if response.graph_data:
        print("Citations per year:")
        for point in response.graph_data:
            print(f"  {point.year}: {point.citations}")
        print(f"{'='*60}")

    visible = filter_publications(response.results, state)
    print(f"Showing {len(visible)}/{len(response.results)} publications")
    print(f"Years: {', '.join(str(y) for y in unique_years(response.results))}")
    print(f"{'='*60}\n")
    print(render_publications(visible))


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Scrape a Google Scholar profile"
    )
    parser.add_argument(
        "--url",
        default=None,
        help=f"Profile URL (default: {settings.scholar_profile_url})"
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only list publications whose title, authors or date contain this text"
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Only list publications from this year"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON payload instead of a listing"
    )

    args = parser.parse_args()
    logging.basicConfig(level=settings.log_level)

    response = scrape_scholar_profile(args.url)

    if args.json:
        print(json.dumps(response.to_payload(), indent=2))
        sys.exit(0 if response.ok else 1)

    if not response.ok:
        print(f"Error: {response.error}")
        sys.exit(1)

    print_listing(response, QueryState(search_term=args.search, selected_year=args.year))
