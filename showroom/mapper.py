from __future__ import annotations
"""Raw CMS record -> ViewListing mapping.

Locale fallback rule (applied here only, never in templates):
  missing Japanese text -> the English text
  both missing          -> the field's fixed bilingual placeholder
"""
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import MalformedSpecifications
from .formatting import (
    DEFAULT_SPECIFICATIONS,
    UNKNOWN,
    format_mileage,
    format_price,
    parse_int,
    resolve_specifications,
)
from .logger import Logger
from .models import LocalizedText, ViewListing


log = Logger.bind(__name__)

TITLE_PLACEHOLDER = LocalizedText(en=UNKNOWN, ja=UNKNOWN)
DESCRIPTION_PLACEHOLDER = LocalizedText(
    en='No description available.',
    ja='説明はありません。',
)
SHORT_DESCRIPTION = LocalizedText(
    en='A reliable used car ready for new adventures',
    ja='新しい冒険に備えた信頼できる中古車',
)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value)
    return s if s.strip() else None


def localized(en: Any, ja: Any, placeholder: LocalizedText) -> LocalizedText:
    en_s = _text(en)
    ja_s = _text(ja)
    if en_s is None and ja_s is None:
        return placeholder
    return LocalizedText(en=en_s if en_s is not None else placeholder.en, ja=ja_s if ja_s is not None else en_s)


def unwrap_record(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten a Strapi v4 ``{id, attributes: {...}}`` envelope; flat records pass through."""
    attrs = raw.get('attributes')
    if isinstance(attrs, Mapping):
        rec = dict(attrs)
        rec.setdefault('id', raw.get('id'))
        return rec
    return dict(raw)


def _first_media(image: Any) -> Optional[Mapping[str, Any]]:
    # v4 relation envelope: {"data": {...}} or {"data": [...]}
    if isinstance(image, Mapping) and 'data' in image and 'url' not in image:
        image = image['data']
    if isinstance(image, (list, tuple)):
        image = image[0] if image else None
    if isinstance(image, Mapping):
        attrs = image.get('attributes')
        return attrs if isinstance(attrs, Mapping) else image
    return None


def resolve_image_url(image: Any, base_url: str) -> Optional[str]:
    media = _first_media(image)
    if not media:
        return None
    path = _text(media.get('url'))
    if path is None:
        return None
    path = path.strip()
    if path.startswith(('http://', 'https://')):
        return path
    if path.startswith('//'):
        return 'https:' + path
    if not path.startswith('/'):
        path = '/' + path
    return base_url.rstrip('/') + path


def map_listing(raw: Mapping[str, Any], base_url: str) -> ViewListing:
    """Map one raw record. Raises MalformedSpecifications for a bad specifications payload."""
    rec = unwrap_record(raw)
    year = parse_int(rec.get('year'))
    return ViewListing(
        id=rec.get('id'),
        title=localized(rec.get('title_en'), rec.get('title_ja'), TITLE_PLACEHOLDER),
        price=format_price(rec.get('price')),
        year=year if year else None,
        mileage=LocalizedText(
            en=format_mileage(rec.get('mileage_en')),
            ja=format_mileage(rec.get('mileage_ja') if _text(rec.get('mileage_ja')) is not None else rec.get('mileage_en')),
        ),
        image_url=resolve_image_url(rec.get('image'), base_url),
        short_description=SHORT_DESCRIPTION,
        description=localized(rec.get('description_en'), rec.get('description_ja'), DESCRIPTION_PLACEHOLDER),
        specifications=resolve_specifications(rec.get('specifications')),
    )


def map_listings(records: Iterable[Mapping[str, Any]], base_url: str) -> List[ViewListing]:
    """Map a collection; a malformed specifications payload only affects its own listing."""
    out: List[ViewListing] = []
    for raw in records:
        try:
            out.append(map_listing(raw, base_url))
        except MalformedSpecifications as e:
            rec = unwrap_record(raw)
            log.warn(f"specifications malformed id={rec.get('id')} error={e}")
            listing = map_listing({**rec, 'specifications': None}, base_url)
            out.append(replace(listing, specifications=DEFAULT_SPECIFICATIONS, specifications_error=str(e)))
    return out


__all__ = ['map_listing', 'map_listings', 'resolve_image_url', 'unwrap_record', 'localized', 'SHORT_DESCRIPTION']
