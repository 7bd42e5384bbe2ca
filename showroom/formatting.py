from __future__ import annotations
"""Field formatting helpers for raw CMS values.

Responsibilities:
 - Lenient base-10 integer parsing (leading digits win, junk never raises).
 - Mileage / price display normalisation with fixed fallbacks.
 - Specifications payload resolution: the CMS stores it either as a JSON
   object or as JSON text; both are resolved here exactly once.
"""
import json
import math
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import MalformedSpecifications
from .models import LocalizedText


MILEAGE_FALLBACK = 'N/A km'
UNKNOWN = 'N/A'

DEFAULT_SPECIFICATIONS: Mapping[str, LocalizedText] = MappingProxyType({
    'engine': LocalizedText(en=UNKNOWN, ja=UNKNOWN),
    'transmission': LocalizedText(en=UNKNOWN, ja=UNKNOWN),
    'fuel': LocalizedText(en=UNKNOWN, ja=UNKNOWN),
    'color': LocalizedText(en=UNKNOWN, ja=UNKNOWN),
})

_RE_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(raw: Any) -> Optional[int]:
    """Return the leading base-10 integer of ``raw`` or None ("12abc" -> 12, "abc" -> None)."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return None
        return int(raw)
    m = _RE_LEADING_INT.match(str(raw))
    if not m:
        return None
    return int(m.group(1))


def format_mileage(raw: Any) -> str:
    n = parse_int(raw)
    if not n:
        return MILEAGE_FALLBACK
    return f"{n:,} km"


def format_price(raw: Any) -> int:
    n = parse_int(raw)
    if n is None or n < 0:
        return 0
    return n


def _spec_value(name: str, value: Any) -> LocalizedText:
    if isinstance(value, Mapping):
        en = value.get('en')
        ja = value.get('ja')
        if en is None and ja is None:
            raise MalformedSpecifications(f"specification {name!r} has neither en nor ja")
        en = UNKNOWN if en is None else str(en)
        ja = en if ja is None else str(ja)
        return LocalizedText(en=en, ja=ja)
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return LocalizedText(en=str(value), ja=str(value))
    raise MalformedSpecifications(f"specification {name!r} has unsupported value type {type(value).__name__}")


def resolve_specifications(raw: Any) -> Mapping[str, LocalizedText]:
    """Resolve the specifications payload into a read-only ordered mapping.

    - None / blank text / JSON null: DEFAULT_SPECIFICATIONS
    - mapping: passed through in key order
    - JSON text: decoded, then treated as a mapping
    Anything else raises MalformedSpecifications; no partial result is returned.
    """
    if raw is None:
        return DEFAULT_SPECIFICATIONS
    if isinstance(raw, (str, bytes)):
        text = raw.decode('utf-8') if isinstance(raw, bytes) else raw
        if not text.strip():
            return DEFAULT_SPECIFICATIONS
        try:
            raw = json.loads(text)
        except ValueError as e:
            raise MalformedSpecifications(f"specifications is not valid JSON: {e}") from e
        if raw is None:
            return DEFAULT_SPECIFICATIONS
    if not isinstance(raw, Mapping):
        raise MalformedSpecifications(f"specifications must be an object, got {type(raw).__name__}")
    return MappingProxyType({str(k): _spec_value(str(k), v) for k, v in raw.items()})


__all__ = [
    'DEFAULT_SPECIFICATIONS',
    'MILEAGE_FALLBACK',
    'UNKNOWN',
    'parse_int',
    'format_mileage',
    'format_price',
    'resolve_specifications',
]
