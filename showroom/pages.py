from __future__ import annotations
"""Page loaders for home / car list / car detail.

Each loader runs one CMS fetch through a PageLoader and leaves it READY with
the page data, or FAILED with a localized message.
"""
from typing import Any, Dict, Optional

from .client import CmsClient
from .errors import MissingIdentifier, ShowroomError
from .locale import LocaleContext
from .mapper import map_listing, map_listings
from .search import DEFAULT_FEATURED_COUNT, SORT_LATEST, featured, filter_and_sort
from .state import PageLoader


def _describer(ctx: LocaleContext):
    def describe(e: ShowroomError) -> str:
        return ctx.t(e.message_key, **e.params)
    return describe


def load_home(client: CmsClient, ctx: LocaleContext, query: str = '', featured_count: int = DEFAULT_FEATURED_COUNT,
              loader: Optional[PageLoader] = None) -> PageLoader[Dict[str, Any]]:
    loader = loader or PageLoader('home')

    def fetch() -> Dict[str, Any]:
        cars = featured(map_listings(client.list_cars(), client.base_url), featured_count)
        q = (query or '').strip()
        return {
            'cars': filter_and_sort(cars, q, None, ctx.locale) if q else cars,
            'query': q,
        }

    return loader.run(fetch, _describer(ctx))


def load_cars(client: CmsClient, ctx: LocaleContext, query: str = '', sort: str = SORT_LATEST,
              loader: Optional[PageLoader] = None) -> PageLoader[Dict[str, Any]]:
    loader = loader or PageLoader('cars')

    def fetch() -> Dict[str, Any]:
        cars = map_listings(client.list_cars(), client.base_url)
        return {
            'cars': filter_and_sort(cars, query, sort, ctx.locale),
            'total': len(cars),
            'query': (query or '').strip(),
            'sort': sort,
        }

    return loader.run(fetch, _describer(ctx))


def load_car_detail(client: CmsClient, ctx: LocaleContext, car_id: Any,
                    loader: Optional[PageLoader] = None) -> PageLoader[Dict[str, Any]]:
    loader = loader or PageLoader('car_detail')

    def fetch() -> Dict[str, Any]:
        if car_id is None or str(car_id).strip() == '':
            raise MissingIdentifier('detail requested without car id')
        return {'car': map_listing(client.get_car(car_id), client.base_url)}

    return loader.run(fetch, _describer(ctx))


__all__ = ['load_home', 'load_cars', 'load_car_detail']
