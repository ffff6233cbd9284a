"""Shared fixtures: an in-process fake of the store's HTTP API."""

import io
import urllib.error
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

import pytest

from owlim.client import RepositoryClient

BASE_URL = "http://store.example:8080/openrdf-sesame"


class FakeResponse:
    """Minimal stand-in for http.client.HTTPResponse."""

    def __init__(self, body: bytes):
        self._buf = io.BytesIO(body)
        self.closed = False
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        return self._buf.read(size)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@dataclass
class Recorded:
    method: str
    url: str
    headers: dict
    body: bytes | None
    timeout: float

    @property
    def path(self):
        return urlsplit(self.url).path

    @property
    def params(self):
        return {k: v[0] for k, v in parse_qs(urlsplit(self.url).query).items()}

    def header(self, name):
        return self.headers.get(name.capitalize())


class FakeStore:
    """Routes requests by (method, path) and records every call."""

    def __init__(self):
        self.requests: list[Recorded] = []
        self.routes: dict[tuple[str, str], tuple[int, bytes]] = {}
        self.responses: list[FakeResponse] = []

    def route(self, method, path, body=b"", status=200):
        self.routes[(method, "/openrdf-sesame" + path)] = (status, body)

    def __call__(self, req, timeout=None, context=None):
        data = req.data
        if data is not None and not isinstance(data, bytes):
            data = data.read()
        rec = Recorded(
            method=req.get_method(),
            url=req.full_url,
            headers=dict(req.header_items()),
            body=data,
            timeout=timeout,
        )
        self.requests.append(rec)

        key = (rec.method, rec.path)
        if key not in self.routes:
            raise urllib.error.URLError("connection refused")
        status, body = self.routes[key]
        if status >= 400:
            raise urllib.error.HTTPError(req.full_url, status, "Server Error", {}, io.BytesIO(body))
        resp = FakeResponse(body)
        self.responses.append(resp)
        return resp


@pytest.fixture
def store(monkeypatch):
    fake = FakeStore()
    monkeypatch.setattr("owlim.transport.urllib.request.urlopen", fake)
    return fake


@pytest.fixture
def client():
    return RepositoryClient.from_url(BASE_URL)
