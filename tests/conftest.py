"""Shared test fixtures."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from email.message import Message
from types import SimpleNamespace
from typing import Any

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from geonetwork_lib import CatalogSettings, GeonetworkHttpClient, SessionManager

ENDPOINT = "http://cat.example.org/geonetwork"


@dataclass
class Reply:
    status: int = 200
    body: str = ""
    set_cookies: tuple[str, ...] = ()
    error: Exception | None = None
    entered: threading.Event | None = None
    gate: threading.Event | None = None


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: Any
    kwargs: dict[str, Any] = field(default_factory=dict)


class FakeCatalogAdapter(BaseAdapter):
    """Transport adapter answering from canned replies keyed by method and URL."""

    def __init__(self) -> None:
        super().__init__()
        self.replies: dict[tuple[str, str], list[Reply]] = {}
        self.sent: list[SentRequest] = []

    def add(self, method: str, url: str, **reply: Any) -> Reply:
        r = Reply(**reply)
        self.replies.setdefault((method, url), []).append(r)
        return r

    def calls(self, method: str, url: str) -> list[SentRequest]:
        return [s for s in self.sent if s.method == method and s.url.split("?")[0] == url]

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        url = request.url.split("?")[0]
        self.sent.append(
            SentRequest(request.method, request.url, dict(request.headers), request.body,
                        {"timeout": timeout})
        )
        queue = self.replies.get((request.method, url))
        if not queue:
            reply = Reply(status=404, body="<error>not found</error>")
        elif len(queue) > 1:
            reply = queue.pop(0)
        else:
            reply = queue[0]

        if reply.entered is not None:
            reply.entered.set()
        if reply.gate is not None:
            reply.gate.wait(5)
        if reply.error is not None:
            raise reply.error

        headers = Message()
        for cookie in reply.set_cookies:
            headers["Set-Cookie"] = cookie

        resp = requests.Response()
        resp.status_code = reply.status
        resp._content = reply.body.encode("utf-8")
        resp.encoding = "utf-8"
        resp.headers = CaseInsensitiveDict({"Content-Type": "application/xml"})
        resp.url = request.url
        resp.request = request
        resp.raw = SimpleNamespace(_original_response=SimpleNamespace(msg=headers))
        return resp

    def close(self) -> None:
        pass


@pytest.fixture
def config_map() -> dict[str, str]:
    return {
        "csw.endpoint.url": ENDPOINT,
        "csw.endpoint.user": "admin",
        "csw.endpoint.pass": "secret",
    }


@pytest.fixture
def settings(config_map: dict[str, str]) -> CatalogSettings:
    return CatalogSettings.from_mapping(
        {**config_map, "csw.identifier.parent": "parent-uuid"}
    )


@pytest.fixture
def adapter() -> FakeCatalogAdapter:
    return FakeCatalogAdapter()


@pytest.fixture
def http_client(adapter: FakeCatalogAdapter) -> GeonetworkHttpClient:
    client = GeonetworkHttpClient(timeout=5)
    client.session.mount("http://cat.example.org", adapter)
    yield client
    client.close()


@pytest.fixture
def session(settings: CatalogSettings, http_client: GeonetworkHttpClient) -> SessionManager:
    return SessionManager(settings, http_client)
