from __future__ import annotations
"""Bilingual UI message catalog.

Templates are ``str.format`` strings keyed by message id. ``lookup`` never
raises: an unknown key is returned verbatim so a missing entry shows up on
the page instead of breaking it.
"""
from typing import Any, Dict

from .logger import Logger


log = Logger.bind(__name__)

SUPPORTED_LOCALES = ('en', 'ja')
DEFAULT_LOCALE = 'ja'

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'site_name': 'Showroom',
        'nav_home': 'Home',
        'nav_cars': 'Cars',
        'switch_language': '日本語',
        # home
        'hero_title': 'Quality used cars from Japan',
        'hero_subtitle': 'Inspected, fairly priced and ready to ship.',
        'search_placeholder': 'Search by make or model',
        'browse_cars': 'Browse cars',
        'showing_results': 'Showing results for: {query}',
        'showing_all': 'all cars',
        'featured_cars': 'Featured cars',
        'view_all_cars': 'View all cars',
        'view_car': 'View car',
        'how_it_works': 'How it works',
        'how_it_works_browse': 'Browse',
        'how_it_works_browse_desc': 'Find the car that fits you from our latest stock.',
        'how_it_works_inspect': 'Inspect',
        'how_it_works_inspect_desc': 'Every car comes with photos, mileage and a full spec sheet.',
        'how_it_works_shipping': 'Ship',
        'how_it_works_shipping_desc': 'We handle paperwork and delivery to your port.',
        'cta_title': 'Looking for a specific car?',
        'cta_subtitle': 'Tell us what you need and we will find it for you.',
        'cta_button': 'Contact us',
        # list
        'cars_title': 'All cars',
        'search_car_placeholder': 'Search cars...',
        'search_button': 'Search',
        'sort_latest': 'Latest',
        'sort_price_low': 'Price: low to high',
        'sort_price_high': 'Price: high to low',
        'view_details': 'View details',
        'no_cars_found': 'No cars found.',
        # car fields
        'car_price': '¥{price}',
        'car_year': 'Year',
        'car_year_value': 'Year {year}',
        'car_mileage': 'Mileage',
        'car_description': 'Description',
        'car_specifications': 'Specifications',
        'contact_seller': 'Contact seller',
        'back_to_cars': 'Back to cars',
        'no_image': 'No Image',
        'unknown': 'N/A',
        'spec_engine': 'Engine',
        'spec_transmission': 'Transmission',
        'spec_fuel': 'Fuel',
        'spec_color': 'Color',
        # states
        'loading_cars': 'Loading cars...',
        'loading_car': 'Loading car details...',
        'error_generic': 'Something went wrong.',
        'error_fetch': 'Could not load cars. Please try again later.',
        'error_timeout': 'The car catalog took too long to respond.',
        'error_not_found': 'Car {id} was not found.',
        'error_specifications': 'Specifications for this car could not be read.',
        'error_missing_id': 'No car was specified.',
    },
    'ja': {
        'site_name': 'ショールーム',
        'nav_home': 'ホーム',
        'nav_cars': '車両一覧',
        'switch_language': 'English',
        # home
        'hero_title': '日本の高品質な中古車',
        'hero_subtitle': '点検済み・適正価格・すぐに発送できます。',
        'search_placeholder': 'メーカーや車種で検索',
        'browse_cars': '車両を探す',
        'showing_results': '検索結果: {query}',
        'showing_all': 'すべての車両',
        'featured_cars': 'おすすめの車両',
        'view_all_cars': 'すべての車両を見る',
        'view_car': '車両を見る',
        'how_it_works': 'ご利用の流れ',
        'how_it_works_browse': '探す',
        'how_it_works_browse_desc': '最新の在庫からぴったりの一台を見つけましょう。',
        'how_it_works_inspect': '確認する',
        'how_it_works_inspect_desc': '写真・走行距離・詳細な仕様をすべて掲載しています。',
        'how_it_works_shipping': '届ける',
        'how_it_works_shipping_desc': '書類手続きから港までの配送まで対応します。',
        'cta_title': 'お探しの車はありますか？',
        'cta_subtitle': 'ご希望をお聞かせください。最適な一台をお探しします。',
        'cta_button': 'お問い合わせ',
        # list
        'cars_title': '車両一覧',
        'search_car_placeholder': '車両を検索...',
        'search_button': '検索',
        'sort_latest': '新しい順',
        'sort_price_low': '価格の安い順',
        'sort_price_high': '価格の高い順',
        'view_details': '詳細を見る',
        'no_cars_found': '該当する車両がありません。',
        # car fields
        'car_price': '{price}円',
        'car_year': '年式',
        'car_year_value': '{year}年式',
        'car_mileage': '走行距離',
        'car_description': '説明',
        'car_specifications': '仕様',
        'contact_seller': '販売店に問い合わせる',
        'back_to_cars': '車両一覧に戻る',
        'no_image': '画像なし',
        'unknown': 'N/A',
        'spec_engine': 'エンジン',
        'spec_transmission': 'トランスミッション',
        'spec_fuel': '燃料',
        'spec_color': '色',
        # states
        'loading_cars': '車両を読み込んでいます...',
        'loading_car': '車両の詳細を読み込んでいます...',
        'error_generic': 'エラーが発生しました。',
        'error_fetch': '車両を読み込めませんでした。しばらくしてから再度お試しください。',
        'error_timeout': '車両カタログの応答がタイムアウトしました。',
        'error_not_found': '車両 {id} は見つかりませんでした。',
        'error_specifications': 'この車両の仕様を読み込めませんでした。',
        'error_missing_id': '車両が指定されていません。',
    },
}


def lookup(locale: str, key: str, **params: Any) -> str:
    table = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    template = table.get(key)
    if template is None:
        log.debug(f"message missing locale={locale} key={key}")
        return key
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        log.warn(f"message params mismatch locale={locale} key={key} params={sorted(params)}")
        return template


__all__ = ['MESSAGES', 'SUPPORTED_LOCALES', 'DEFAULT_LOCALE', 'lookup']
