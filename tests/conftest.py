import pytest
import requests
from eth_account import Account

import settings

# Well-known throwaway key from the web3 docs
PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
ADDRESS = Account.from_key(PRIVATE_KEY).address


class FakeUserAgent:
    random = "Mozilla/5.0 (pytest)"


class FakeResponse:
    def __init__(self, data, status_code=200):
        self.data = data
        self.status_code = status_code
        self.content = b"{}" if data is not None else b""

    def json(self):
        if self.data is None:
            raise ValueError("no json")
        return self.data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Replays queued responses and records every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    monkeypatch.setattr("models.browser.UserAgent", FakeUserAgent)
    monkeypatch.setattr("time.sleep", lambda *_: None)
    monkeypatch.setattr(settings, "API_RETRY_DELAY", 0)
    monkeypatch.setattr(settings, "SLEEP_BETWEEN_ACTIONS", [0, 0])
    monkeypatch.setattr(settings, "SLEEP_BETWEEN_WALLETS", [0, 0])
    monkeypatch.setattr(settings, "SLEEP_BETWEEN_TASKS", 0)
    monkeypatch.setattr(settings, "USE_PROXY", False)
