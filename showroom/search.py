from __future__ import annotations
"""In-memory search / sort over mapped listings."""
from typing import List, Optional, Sequence, Tuple

from .models import ViewListing


SORT_LATEST = 'latest'
SORT_PRICE_LOW = 'price-low'
SORT_PRICE_HIGH = 'price-high'

SORT_KEYS: Tuple[str, ...] = (SORT_LATEST, SORT_PRICE_LOW, SORT_PRICE_HIGH)

# message ids for the sort select box
SORT_LABELS = {
    SORT_LATEST: 'sort_latest',
    SORT_PRICE_LOW: 'sort_price_low',
    SORT_PRICE_HIGH: 'sort_price_high',
}

DEFAULT_FEATURED_COUNT = 3


def _year_desc_key(listing: ViewListing):
    # unknown years go last
    if listing.year is None:
        return (1, 0)
    return (0, -listing.year)


def matches(listing: ViewListing, query: str, locale: str) -> bool:
    q = (query or '').strip().lower()
    if not q:
        return True
    return q in listing.title.get(locale).lower()


def filter_and_sort(listings: Sequence[ViewListing], query: Optional[str], sort_key: Optional[str], locale: str) -> List[ViewListing]:
    """Return a new list: title matches for ``locale``, ordered by ``sort_key``.

    Python's sort is stable, so ties keep their fetched order. An unknown
    sort key leaves the fetched order untouched.
    """
    filtered = [c for c in listings if matches(c, query or '', locale)]
    if sort_key == SORT_LATEST:
        filtered.sort(key=_year_desc_key)
    elif sort_key == SORT_PRICE_LOW:
        filtered.sort(key=lambda c: c.price)
    elif sort_key == SORT_PRICE_HIGH:
        filtered.sort(key=lambda c: c.price, reverse=True)
    return filtered


def featured(listings: Sequence[ViewListing], size: int = DEFAULT_FEATURED_COUNT) -> List[ViewListing]:
    """First ``size`` listings in fetched order (not a sorted view)."""
    return list(listings[:max(0, size)])


__all__ = ['SORT_KEYS', 'SORT_LABELS', 'SORT_LATEST', 'SORT_PRICE_LOW', 'SORT_PRICE_HIGH', 'filter_and_sort', 'featured', 'matches']
