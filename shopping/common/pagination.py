"""
nextPageToken pagination.

fetch(page_token, page_size) -> {"resources": [...], "nextPageToken": "..."}

The first call passes page_token=None. The walk stops when a page comes back
without a token (or with an empty one, or one it has already followed). Failures from fetch propagate as-is:
whatever was already yielded stays yielded, nothing is retried.
"""

from typing import Callable, Iterator, Optional

DEFAULT_PAGE_SIZE = 50


def iter_pages(fetch: Callable[[Optional[str], int], dict], page_size: int = DEFAULT_PAGE_SIZE) -> Iterator[dict]:
    """Yield each page returned by fetch, following nextPageToken."""
    page_token = None
    seen_tokens = set()

    while True:
        page = fetch(page_token, page_size)
        yield page

        page_token = page.get("nextPageToken")
        # A token we already followed would refetch the same page
        if not page_token or page_token in seen_tokens:
            break
        seen_tokens.add(page_token)


def walk(fetch: Callable[[Optional[str], int], dict], page_size: int = DEFAULT_PAGE_SIZE) -> Iterator[dict]:
    """Yield every resource of every page, in server order."""
    for page in iter_pages(fetch, page_size):
        yield from page.get("resources") or []
