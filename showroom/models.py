from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class LocalizedText:
    """One display string per supported locale. Both members always set."""
    en: str
    ja: str

    def get(self, locale: str) -> str:
        if locale == 'en':
            return self.en
        return self.ja

    def to_dict(self) -> Dict[str, str]:
        return {'en': self.en, 'ja': self.ja}


def _empty_specs() -> Mapping[str, LocalizedText]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ViewListing:
    """Locale-resolved view of one CMS car record.

    price: non-negative integer, currency applied at render time.
    year: None when the CMS has no usable year (shown as N/A).
    mileage: pre-formatted strings ("45,000 km" / "N/A km").
    image_url: absolute URL or None (placeholder is rendered).
    specifications: read-only, ordered name -> LocalizedText.
    specifications_error: set when the payload was malformed and defaults were used.
    """
    id: Any
    title: LocalizedText
    price: int
    year: Optional[int]
    mileage: LocalizedText
    image_url: Optional[str]
    short_description: LocalizedText
    description: LocalizedText
    specifications: Mapping[str, LocalizedText] = field(default_factory=_empty_specs)
    specifications_error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # asdict cannot deep-copy the read-only specifications mapping
        return {
            'id': self.id,
            'title': self.title.to_dict(),
            'price': self.price,
            'year': self.year,
            'mileage': self.mileage.to_dict(),
            'image_url': self.image_url,
            'short_description': self.short_description.to_dict(),
            'description': self.description.to_dict(),
            'specifications': {k: v.to_dict() for k, v in self.specifications.items()},
            'specifications_error': self.specifications_error,
        }


__all__ = ['LocalizedText', 'ViewListing']
