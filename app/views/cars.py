from __future__ import annotations
from flask import request

from showroom.locale import LocaleContext
from showroom.pages import load_cars
from showroom.search import SORT_KEYS, SORT_LABELS, SORT_LATEST

from .common import cms, render_page


def register(bp):

    @bp.route('/cars', defaults={'lng': None})
    @bp.route('/<lng>/cars')
    def cars(lng):
        ctx = LocaleContext(lng)
        query = request.args.get('q', '')
        sort = request.args.get('sort') or SORT_LATEST
        loader = load_cars(cms(), ctx, query=query, sort=sort)
        return render_page('cars.html', ctx, loader, page_path='/cars', sort_keys=SORT_KEYS, sort_labels=SORT_LABELS)
