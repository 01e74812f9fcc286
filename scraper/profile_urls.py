"""Google Scholar profile URLs."""

from urllib.parse import urlencode

SCHOLAR_CITATIONS_URL = "https://scholar.google.com/citations"

DEFAULT_SCHOLAR_USER_ID = "2clQgooAAAAJ"


def build_profile_url(user_id: str, sort_by: str = "pubdate", language: str = "en") -> str:
    """Build the publication-list URL of a Scholar profile, newest first by default."""
    params = {
        "hl": language,
        "user": user_id,
        "view_op": "list_works",
        "sortby": sort_by,
    }
    return f"{SCHOLAR_CITATIONS_URL}?{urlencode(params)}"
