import pytest
import requests

from smlbox_uploader.config import Config


class FakeResponse:
    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")
        self.reason = reason


class FakeSession:
    """Answers GETs from a url -> response map and records every call"""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append((url, headers))
        if url not in self.responses:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        return self.responses[url]

    @property
    def urls(self):
        return [url for url, _ in self.calls]


@pytest.fixture
def config():
    return Config(
        base_url="https://smlbox.net",
        cookie_username="user",
        cookie_password="secret",
        m3u_url="https://example.com/list.m3u",
    )


@pytest.fixture
def session():
    return FakeSession()
