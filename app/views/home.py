from __future__ import annotations
from flask import redirect, request, url_for

from showroom.locale import LocaleContext
from showroom.messages import DEFAULT_LOCALE
from showroom.pages import load_home

from .common import cms, featured_count, render_page


def register(bp):

    @bp.route('/')
    def index():
        return redirect(url_for('main.home', lng=DEFAULT_LOCALE))

    @bp.route('/<lng>/')
    def home(lng: str):
        ctx = LocaleContext(lng)
        loader = load_home(cms(), ctx, query=request.args.get('q', ''), featured_count=featured_count())
        return render_page('home.html', ctx, loader, page_path='/')
