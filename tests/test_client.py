import logging
from types import SimpleNamespace

import pytest
import requests

from showroom.client import CmsClient
from showroom.config import ShowroomConfig
from showroom.errors import FetchFailure, NotFound, RequestTimeout


class FakeResp(SimpleNamespace):

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:

    def __init__(self, resp=None, exc=None):
        self.resp = resp
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'timeout': timeout})
        if self.exc:
            raise self.exc
        return self.resp

    def close(self):
        pass


def _client(resp=None, exc=None):
    client = CmsClient(ShowroomConfig(base_url='http://cms.test/', timeout=2.5))
    client.session = FakeSession(resp, exc)
    return client


def test_list_cars_request_shape():
    client = _client(FakeResp(status_code=200, payload={'data': [{'id': 1}, {'id': 2}]}))
    assert client.list_cars() == [{'id': 1}, {'id': 2}]
    call = client.session.calls[0]
    assert call['url'] == 'http://cms.test/api/cars'
    assert call['params'] == {'populate': 'image'}
    assert call['timeout'] == 2.5


def test_list_cars_empty_and_non_objects():
    assert _client(FakeResp(status_code=200, payload={'data': None})).list_cars() == []
    assert _client(FakeResp(status_code=200, payload={'data': [{'id': 1}, 'junk']})).list_cars() == [{'id': 1}]


def test_list_cars_bad_payload():
    with pytest.raises(FetchFailure):
        _client(FakeResp(status_code=200, payload={'data': {'id': 1}})).list_cars()
    with pytest.raises(FetchFailure):
        _client(FakeResp(status_code=200, payload=ValueError('no json'))).list_cars()
    with pytest.raises(FetchFailure):
        _client(FakeResp(status_code=200, payload=[1, 2])).list_cars()


def test_get_car():
    client = _client(FakeResp(status_code=200, payload={'data': {'id': 3, 'title_en': 'Civic'}}))
    assert client.get_car(3)['title_en'] == 'Civic'
    assert client.session.calls[0]['url'] == 'http://cms.test/api/cars/3'


def test_get_car_not_found():
    with pytest.raises(NotFound) as ei:
        _client(FakeResp(status_code=404, payload={'data': None})).get_car(99)
    assert ei.value.car_id == 99
    with pytest.raises(NotFound):
        _client(FakeResp(status_code=200, payload={'data': None})).get_car(99)


def test_server_error_is_fetch_failure():
    with pytest.raises(FetchFailure) as ei:
        _client(FakeResp(status_code=500, payload={})).list_cars()
    assert not isinstance(ei.value, NotFound)


def test_timeout_and_connection_errors():
    with pytest.raises(RequestTimeout):
        _client(exc=requests.ReadTimeout('slow')).list_cars()
    with pytest.raises(FetchFailure):
        _client(exc=requests.ConnectionError('refused')).get_car(1)


def test_context_manager_closes_session():
    closed = []
    with _client(FakeResp(status_code=200, payload={'data': []})) as client:
        client.session.close = lambda: closed.append(True)
    assert closed == [True]


def test_list_404_is_fetch_failure():
    with pytest.raises(FetchFailure) as ei:
        _client(FakeResp(status_code=404, payload={})).list_cars()
    assert not isinstance(ei.value, NotFound)


def test_list_404_page_message():
    from showroom.locale import LocaleContext
    from showroom.pages import load_cars
    loader = load_cars(_client(FakeResp(status_code=404, payload={})), LocaleContext('en'))
    assert loader.failed
    assert type(loader.error) is FetchFailure
    assert loader.message == 'Could not load cars. Please try again later.'


def test_request_timing_is_logged(caplog):
    caplog.set_level(logging.DEBUG)
    _client(FakeResp(status_code=200, payload={'data': []})).list_cars()
    assert any('http get url=http://cms.test/api/cars' in r.getMessage() and r.getMessage().endswith('ms')
               for r in caplog.records)
