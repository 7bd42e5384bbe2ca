from collections import Counter

from showroom.mapper import map_listing, map_listings
from showroom.search import SORT_KEYS, featured, filter_and_sort

from conftest import BASE_URL


def _cars(records):
    return map_listings(records, BASE_URL)


def _car(id_, title_en, price, year, title_ja=None):
    return map_listing({'id': id_, 'title_en': title_en, 'title_ja': title_ja or title_en, 'price': price, 'year': year}, BASE_URL)


def test_query_corolla_price_low(records):
    out = filter_and_sort(_cars(records), 'corolla', 'price-low', 'en')
    assert [c.id for c in out] == [2, 1]
    assert all('corolla' in c.title.en.lower() for c in out)


def test_query_is_trimmed_and_case_insensitive(records):
    out = filter_and_sort(_cars(records), '  COROLLA ', None, 'en')
    assert [c.id for c in out] == [1, 2]


def test_query_matches_active_locale_title_only(records):
    cars = _cars(records)
    assert [c.id for c in filter_and_sort(cars, 'カローラ', None, 'ja')] == [1, 2]
    assert filter_and_sort(cars, 'カローラ', None, 'en') == []
    # description text is not searched
    assert filter_and_sort(cars, 'one owner', None, 'en') == []


def test_latest_is_stable_permutation(records):
    cars = _cars(records)
    out = filter_and_sort(cars, '', 'latest', 'en')
    assert len(out) == len(cars)
    assert Counter(c.id for c in out) == Counter(c.id for c in cars)
    assert [c.year for c in out] == [2021, 2019, 2019, 2018]
    # civic (3) precedes prius (4) in the input, both 2019
    assert [c.id for c in out] == [2, 3, 4, 1]


def test_latest_puts_unknown_year_last():
    cars = [_car(1, 'A', 1, None), _car(2, 'B', 1, 2010), _car(3, 'C', 1, 2020)]
    assert [c.id for c in filter_and_sort(cars, '', 'latest', 'en')] == [3, 2, 1]


def test_price_high_and_ties():
    cars = [_car(1, 'A', 100, 2000), _car(2, 'B', 300, 2000), _car(3, 'C', 100, 2000)]
    assert [c.id for c in filter_and_sort(cars, '', 'price-high', 'en')] == [2, 1, 3]
    assert [c.id for c in filter_and_sort(cars, '', 'price-low', 'en')] == [1, 3, 2]


def test_unknown_sort_key_keeps_order(records):
    cars = _cars(records)
    assert filter_and_sort(cars, '', 'mileage', 'en') == cars


def test_input_not_mutated(records):
    cars = _cars(records)
    before = list(cars)
    out = filter_and_sort(cars, '', 'price-high', 'en')
    assert cars == before
    assert out is not cars


def test_featured_uses_fetched_order(records):
    cars = _cars(records)
    assert [c.id for c in featured(cars)] == [3, 1, 2]
    assert [c.id for c in featured(cars, 10)] == [3, 1, 2, 4]
    assert featured(cars, 0) == []


def test_sort_keys():
    assert SORT_KEYS == ('latest', 'price-low', 'price-high')
