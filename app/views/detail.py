from __future__ import annotations

from showroom.locale import LocaleContext
from showroom.pages import load_car_detail

from .common import cms, render_page


def register(bp):

    @bp.route('/cars/<car_id>', defaults={'lng': None})
    @bp.route('/<lng>/cars/<car_id>')
    def car_detail(lng, car_id: str):
        ctx = LocaleContext(lng)
        loader = load_car_detail(cms(), ctx, car_id)
        return render_page('car_detail.html', ctx, loader, page_path=f'/cars/{car_id}')
