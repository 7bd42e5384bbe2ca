from __future__ import annotations
from flask import current_app, render_template
from typing import Any, Optional

from showroom.client import CmsClient
from showroom.locale import LocaleContext
from showroom.search import DEFAULT_FEATURED_COUNT
from showroom.state import PageLoader


def cms() -> CmsClient:
    return current_app.extensions['cms']


def featured_count() -> int:
    settings = current_app.extensions.get('showroom_config')
    return getattr(settings, 'featured_count', DEFAULT_FEATURED_COUNT)


def render_page(template: str, ctx: LocaleContext, loader: PageLoader, **extra: Any):
    """Render ``template`` when the loader is READY, the error page otherwise."""
    if loader.failed:
        status: Optional[int] = getattr(loader.error, 'http_status', 500)
        return render_template('error.html', ctx=ctx, message=loader.message, **extra), status
    return render_template(template, ctx=ctx, **(loader.value or {}), **extra)
