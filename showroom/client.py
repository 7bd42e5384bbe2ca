from __future__ import annotations
"""HTTP client for the headless CMS car collection.

Endpoints:
  GET {base_url}/api/cars?populate=image        -> {"data": [record, ...]}
  GET {base_url}/api/cars/{id}?populate=image   -> {"data": record}
"""
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter, Retry

from .config import ShowroomConfig
from .errors import FetchFailure, NotFound, RequestTimeout
from .logger import Logger


log = Logger.bind(__name__)

CARS_PATH = '/api/cars'
POPULATE_PARAMS = {'populate': 'image'}


class CmsClient:

    def __init__(self, config: Optional[ShowroomConfig] = None):
        self.config = config or ShowroomConfig()
        self.session = requests.Session()
        retries = Retry(
            total=self.config.max_retries,
            backoff_factor=0.5,
            status_forcelist=(502, 503, 504),
            allowed_methods=("GET", ),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
            "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
        })

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _get_json(self, path: str, car_id: Optional[Any] = None) -> Dict[str, Any]:
        """GET ``path``; a 404 is NotFound only for a single-car lookup (``car_id`` set)."""
        url = self.base_url + path
        done = Logger.time_block(f"http get url={url}")
        log.debug(f"http get start url={url}")
        try:
            resp = self.session.get(url, params=POPULATE_PARAMS, timeout=self.config.timeout)
        except requests.Timeout as e:
            log.warn(f"http get timeout url={url} timeout={self.config.timeout}s")
            raise RequestTimeout(f"timeout after {self.config.timeout}s url={url}") from e
        except requests.RequestException as e:
            log.warn(f"http get fail url={url} error={e}")
            raise FetchFailure(f"request failed url={url}: {e}") from e
        done()
        log.debug(f"http get done url={url} status={resp.status_code}")
        if resp.status_code == 404 and car_id is not None:
            raise NotFound(car_id)
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise FetchFailure(f"cms status={resp.status_code} url={url}") from e
        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchFailure(f"cms returned non-JSON body url={url}") from e
        if not isinstance(payload, dict):
            raise FetchFailure(f"cms returned unexpected payload type={type(payload).__name__} url={url}")
        return payload

    def list_cars(self) -> List[Dict[str, Any]]:
        payload = self._get_json(CARS_PATH)
        data = payload.get('data')
        if data is None:
            return []
        if not isinstance(data, list):
            raise FetchFailure(f"cms list payload 'data' is {type(data).__name__}, expected list")
        records = [r for r in data if isinstance(r, dict)]
        if len(records) != len(data):
            log.warn(f"cms list dropped non-object records count={len(data) - len(records)}")
        log.info(f"cms list records={len(records)}")
        return records

    def get_car(self, car_id: Any) -> Dict[str, Any]:
        path = f"{CARS_PATH}/{quote(str(car_id), safe='')}"
        payload = self._get_json(path, car_id=car_id)
        data = payload.get('data')
        if not isinstance(data, dict):
            raise NotFound(car_id)
        return data

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


__all__ = ['CmsClient']
