import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else ""

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Answers queued responses per (method, url) and records every call."""

    def __init__(self):
        self.queues = {}
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def add(self, method, url, *responses):
        self.queues.setdefault((method, url), []).extend(responses)

    def request(self, method, url, headers=None, timeout=None, params=None, json=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "params": params, "json": json})
        queue = self.queues.get((method, url))
        if not queue:
            raise requests.ConnectionError(f"no response for {method} {url}")
        res = queue.pop(0)
        if isinstance(res, Exception):
            raise res
        if isinstance(res, FakeResponse):
            return res
        return FakeResponse(res)

    def get(self, url, timeout=None, **kwargs):
        return self.request("GET", url, timeout=timeout, **kwargs)

    def count(self, method, url):
        return sum(1 for c in self.calls if c["method"] == method and c["url"] == url)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in ["HOYOLAB_CONFIG", "HOYOLAB_HEALTHCHECK", "HOYOLAB_ALREADY_SIGNED_RETCODE"]:
        monkeypatch.delenv(k, raising=False)
