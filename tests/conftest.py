import copy
from typing import Any, Dict, List, Optional

import pytest

from showroom.config import ShowroomConfig
from showroom.errors import NotFound, ShowroomError


BASE_URL = 'http://cms.test'

CIVIC = {
    'id': 3,
    'title_en': 'Honda Civic',
    'title_ja': 'ホンダ シビック',
    'price': '4200000',
    'year': 2019,
    'mileage_en': '45000',
    'mileage_ja': '45000',
    'image': [{'url': '/uploads/civic.jpg'}],
}

COROLLA = {
    'id': 1,
    'title_en': 'Toyota Corolla',
    'title_ja': 'トヨタ カローラ',
    'price': '3500000',
    'year': 2018,
    'mileage_en': '80000',
    'mileage_ja': '80000',
    'image': [],
    'description_en': 'Clean, one owner.',
    'description_ja': 'ワンオーナー、美車です。',
    'specifications': {
        'engine': {'en': '1.8L', 'ja': '1.8L'},
        'transmission': {'en': 'CVT', 'ja': 'CVT'},
    },
}

COROLLA_FIELDER = {
    'id': 2,
    'title_en': 'Toyota Corolla Fielder',
    'title_ja': 'トヨタ カローラフィールダー',
    'price': 1900000,
    'year': 2021,
    'mileage_en': '12000',
    'mileage_ja': '12000',
    'image': {'url': 'https://cdn.example.com/fielder.jpg'},
    'specifications': '{"fuel": {"en": "Hybrid", "ja": "ハイブリッド"}}',
}

PRIUS = {
    'id': 4,
    'title_en': 'Toyota Prius',
    'title_ja': 'トヨタ プリウス',
    'price': '2800000',
    'year': 2019,
    'mileage_en': '60000',
    'mileage_ja': '60000',
    'specifications': '{not json',
}


def sample_records() -> List[Dict[str, Any]]:
    return copy.deepcopy([CIVIC, COROLLA, COROLLA_FIELDER, PRIUS])


class FakeCmsClient:
    """Stand-in for CmsClient serving records from memory."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None, error: Optional[ShowroomError] = None):
        self.config = ShowroomConfig(base_url=BASE_URL)
        self.records = sample_records() if records is None else records
        self.error = error
        self.calls: List[Any] = []

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def list_cars(self):
        self.calls.append('list')
        if self.error:
            raise self.error
        return copy.deepcopy(self.records)

    def get_car(self, car_id):
        self.calls.append(('get', car_id))
        if self.error:
            raise self.error
        for r in self.records:
            if str(r.get('id')) == str(car_id):
                return copy.deepcopy(r)
        raise NotFound(car_id)

    def close(self):
        self.calls.append('close')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


@pytest.fixture
def records():
    return sample_records()


@pytest.fixture
def fake_cms():
    return FakeCmsClient()
