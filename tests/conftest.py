import json

import pytest

from core.config import Settings
from tools import Dispatcher


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeHTTP:
    """Stands in for requests.request; records calls and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def reply(self, status_code=200, payload=None, text=None):
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.responses.append(FakeResponse(status_code, text))

    def fail(self, exc):
        self.responses.append(exc)

    def __call__(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "body": json.loads(data) if data is not None else None,
                "timeout": timeout,
            }
        )
        r = self.responses.pop(0) if self.responses else FakeResponse(200, "{}")
        if isinstance(r, Exception):
            raise r
        return r


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr("core.rogerroger_api.requests.request", fake)
    return fake


@pytest.fixture
def settings():
    return Settings(api_key="rr_test", base_url="https://crm.example")


@pytest.fixture
def dispatcher(settings):
    return Dispatcher(settings)
