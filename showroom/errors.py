from __future__ import annotations
"""Error kinds surfaced by the CMS fetch / mapping pipeline.

Every error carries a ``message_key`` into the message catalog so pages can
show a localized message instead of the raw exception text.
"""
from typing import Any, Optional


class ShowroomError(Exception):
    message_key = 'error_generic'
    http_status = 500

    def __init__(self, detail: str = '', **params: Any):
        super().__init__(detail or self.__class__.__name__)
        self.detail = detail
        self.params = params


class FetchFailure(ShowroomError):
    """Network or HTTP error reaching the CMS."""
    message_key = 'error_fetch'
    http_status = 502


class RequestTimeout(FetchFailure):
    message_key = 'error_timeout'
    http_status = 504


class NotFound(ShowroomError):
    """Requested car id is missing from the CMS."""
    message_key = 'error_not_found'
    http_status = 404

    def __init__(self, car_id: Optional[Any] = None, detail: str = ''):
        super().__init__(detail or f"car not found id={car_id}", id=car_id)
        self.car_id = car_id


class MalformedSpecifications(ShowroomError):
    """Specifications payload present but not decodable into {name: {en, ja}}."""
    message_key = 'error_specifications'
    http_status = 502


class MissingIdentifier(ShowroomError):
    message_key = 'error_missing_id'
    http_status = 404


__all__ = [
    'ShowroomError',
    'FetchFailure',
    'RequestTimeout',
    'NotFound',
    'MalformedSpecifications',
    'MissingIdentifier',
]
