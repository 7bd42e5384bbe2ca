from __future__ import annotations
"""Locale resolution and the per-request locale context.

Only two locales exist. Anything that is not recognisably Japanese and not
exactly ``"en"`` resolves to Japanese, never to English.
"""
from typing import Any, Optional

from .messages import DEFAULT_LOCALE, SUPPORTED_LOCALES, lookup


def resolve_locale(hint: Optional[str]) -> str:
    if isinstance(hint, str):
        if hint.startswith('ja'):
            return 'ja'
        if hint == 'en':
            return 'en'
    return DEFAULT_LOCALE


class LocaleContext:
    """Active locale for one request / page instance.

    Passed explicitly to page loaders and templates instead of a module
    global, so concurrent requests and test cases never share it.
    """

    def __init__(self, hint: Optional[str] = None):
        self.locale = resolve_locale(hint)

    def switch(self, hint: Optional[str]) -> str:
        self.locale = resolve_locale(hint)
        return self.locale

    @property
    def other(self) -> str:
        return next(loc for loc in SUPPORTED_LOCALES if loc != self.locale)

    def t(self, key: str, **params: Any) -> str:
        return lookup(self.locale, key, **params)

    def link(self, path: str = '/', locale: Optional[str] = None) -> str:
        loc = locale or self.locale
        if not path or path == '/':
            return f"/{loc}/"
        if not path.startswith('/'):
            path = '/' + path
        return f"/{loc}{path}"

    def __repr__(self) -> str:
        return f"LocaleContext(locale={self.locale!r})"


__all__ = ['resolve_locale', 'LocaleContext']
