"""
Cliente HTTP base para comunicacao com o GeoNetwork.
"""

import requests
from requests.adapters import HTTPAdapter
from requests.cookies import RequestsCookieJar
from typing import Dict, Optional

from ..config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, DEFAULT_POOL_SIZE
from .exceptions import TransportError


class ThreadSafeCookieJar(RequestsCookieJar):
    """Cookie jar cuja iteracao respeita o lock interno do CookieJar."""

    def __iter__(self):
        with self._cookies_lock:
            cookies = list(super().__iter__())
        return iter(cookies)


class GeonetworkHttpClient:
    """Cliente HTTP configurado para o GeoNetwork."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, pool_size: int = DEFAULT_POOL_SIZE):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.session.cookies = ThreadSafeCookieJar()

        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    @property
    def cookies(self) -> ThreadSafeCookieJar:
        return self.session.cookies

    def get(self, url: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        return self._request("GET", url, params=params, **kwargs)

    def post(self, url: str, data=None, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        return self._request("POST", url, data=data, json=json, **kwargs)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} falhou: {e}") from e

    def close(self):
        self.session.close()
