"""
Pytest configuration for the font search bridge tests.
Puts python-bridge/ on sys.path and provides an in-memory stand-in for the
Roblox upstream services.
"""
import os
import sys
from urllib.parse import parse_qs, urlparse

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(TESTS_DIR)
BRIDGE_DIR = os.path.join(PROJECT_ROOT, "python-bridge")
if BRIDGE_DIR not in sys.path:
    sys.path.insert(0, BRIDGE_DIR)

os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from settings import Settings


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """
    Async session double. Each route is a callable taking the parsed query
    params and returning a FakeResponse (or raising). Every request URL is
    recorded in `calls` as (route, params). Requests the double cannot
    serve are kept in `unexpected` and answered with a 404, so the client
    cannot turn them into a quietly skipped batch; the `upstream` fixture
    fails the test for them.
    """

    def __init__(self, listing=None, thumbnails=None, details=None):
        self.routes = {"listing": listing, "thumbnails": thumbnails, "details": details}
        self.calls = []
        self.headers_seen = []
        self.closed = False
        self.unexpected = []

    async def get(self, url, headers=None, timeout=None):
        parsed = urlparse(url)
        params = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        if "/marketplace/" in parsed.path:
            route = "listing"
        elif parsed.path.endswith("/assets"):
            route = "thumbnails"
        elif parsed.path.endswith("/items/details"):
            route = "details"
        else:
            self.unexpected.append(f"Unexpected URL: {url}")
            return FakeResponse(status_code=404, text="no route")
        self.calls.append((route, params))
        self.headers_seen.append(headers)
        handler = self.routes[route]
        if handler is None:
            self.unexpected.append(f"No handler configured for {route}")
            return FakeResponse(status_code=404, text="no handler")
        return handler(params)

    def calls_to(self, route):
        return [params for name, params in self.calls if name == route]

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True
        return False


def ids_from(params) -> list[int]:
    return [int(x) for x in params["assetIds"].split(",")]


def listing_of(font_ids):
    return lambda params: FakeResponse(body={"data": [{"id": i} for i in font_ids]})


def thumbnails_from(previews):
    def handler(params):
        return FakeResponse(body={"data": [
            {"targetId": i, "state": "Completed", "imageUrl": previews.get(i)}
            for i in ids_from(params)
        ]})
    return handler


def details_from(names):
    def handler(params):
        return FakeResponse(body={"data": [
            {"asset": {"id": i, "name": names[i]}} for i in ids_from(params) if i in names
        ]})
    return handler


def failing(status_code=500):
    return lambda params: FakeResponse(status_code=status_code, text="upstream error")


@pytest.fixture
def cfg():
    """Settings with sequential thumbnail batches for predictable call order."""
    return Settings(PREVIEW_CONCURRENCY=1)


@pytest.fixture
def upstream():
    """Helpers to build a FakeSession and its route handlers."""
    sessions = []

    def make_session(**routes):
        session = FakeSession(**routes)
        sessions.append(session)
        return session

    class Upstream:
        Session = staticmethod(make_session)
        Response = FakeResponse
        listing = staticmethod(listing_of)
        thumbnails = staticmethod(thumbnails_from)
        details = staticmethod(details_from)
        fail = staticmethod(failing)
        ids = staticmethod(ids_from)

    yield Upstream

    unexpected = [msg for session in sessions for msg in session.unexpected]
    if unexpected:
        pytest.fail("; ".join(unexpected))
