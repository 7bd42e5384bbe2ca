"""Command line access to the car catalog.

Usage:
  python run.py list --lang en --q corolla --sort price-low
  python run.py show 3 --lang ja
  python run.py list --json
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from showroom.client import CmsClient
from showroom.config import load_config
from showroom.locale import LocaleContext
from showroom.logger import Logger, setup_logging
from showroom.pages import load_car_detail, load_cars
from showroom.search import SORT_KEYS, SORT_LATEST


def _print_car_line(car, ctx: LocaleContext) -> None:
    year = car.year if car.year is not None else ctx.t('unknown')
    print(f"{car.id}\t{year}\t{ctx.t('car_price', price=f'{car.price:,}')}\t{car.mileage.get(ctx.locale)}\t{car.title.get(ctx.locale)}")


def _print_car_detail(car, ctx: LocaleContext) -> None:
    _print_car_line(car, ctx)
    print(f"  {car.image_url or ctx.t('no_image')}")
    print(f"  {car.description.get(ctx.locale)}")
    for name, value in car.specifications.items():
        print(f"  {name}: {value.get(ctx.locale)}")
    if car.specifications_error:
        print(f"  ! {ctx.t('error_specifications')}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description='Showroom car catalog')
    ap.add_argument('--lang', default=None, help='en or ja (anything else means ja)')
    ap.add_argument('--json', action='store_true', help='Print view models as JSON')
    ap.add_argument('--debug', action='store_true')
    sub = ap.add_subparsers(dest='command', required=True)
    ls = sub.add_parser('list', help='List cars')
    ls.add_argument('--q', default='', help='Title search (active language)')
    ls.add_argument('--sort', default=SORT_LATEST, help='One of: ' + ','.join(SORT_KEYS))
    show = sub.add_parser('show', help='Show one car')
    show.add_argument('id')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)
    ctx = LocaleContext(args.lang)
    with CmsClient(load_config()) as client:
        if args.command == 'list':
            loader = load_cars(client, ctx, query=args.q, sort=args.sort)
        else:
            loader = load_car_detail(client, ctx, args.id)
    if loader.failed:
        Logger.error(loader.message or 'failed')
        return 1
    if args.command == 'list':
        cars = loader.value['cars']
        if args.json:
            print(json.dumps([c.to_dict() for c in cars], ensure_ascii=False, indent=2))
        else:
            for car in cars:
                _print_car_line(car, ctx)
    else:
        car = loader.value['car']
        if args.json:
            print(json.dumps(car.to_dict(), ensure_ascii=False, indent=2))
        else:
            _print_car_detail(car, ctx)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
