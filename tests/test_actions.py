import json

import pytest
from conftest import PRIVATE_KEY

import settings
from models.account import Account
from modules.actions import ActionHandler, parse_tx_count
from modules.pharos import Pharos
from modules.pharos_api_client import PharosApiClient
from modules.transfer import Transfer
from modules.zenith import Zenith

MENU = [
    "Login",
    "Check-in",
    "Check Balance",
    "Claim PHRS",
    "Claim USDC",
    "Swap PHRS > USDC",
    "Swap PHRS > USDT",
    "Add LP PHRS-USDC",
    "Add LP PHRS-USDT",
    "Random Transfer",
    "Social Task",
    "Unlimited Faucet",
    "Set Tx Count",
]


def test_action_map_labels():
    action_map = ActionHandler([], []).get_action_map()

    assert list(action_map) == MENU
    assert set(ActionHandler.STANDALONE) <= set(action_map)


@pytest.mark.parametrize(
    "value, expected",
    [("3", 3), ("0", 5), ("-2", 5), ("abc", 5), (None, 5), ("", 5)],
)
def test_parse_tx_count(value, expected):
    assert parse_tx_count(value, 5) == expected


def test_tx_count_defaults_to_settings():
    assert ActionHandler([], []).tx_count == settings.TX_COUNT
    assert ActionHandler([], [], tx_count=2).tx_count == 2


@pytest.mark.parametrize("action", ["Check-in", "Claim PHRS", "Social Task"])
def test_token_runners_skip_without_token(action):
    handler = ActionHandler([], [])

    assert handler.get_action_map()[action](Account("w", PRIVATE_KEY), 1, 1) is False


def test_runners_skip_without_private_key():
    handler = ActionHandler([], [])

    assert handler.login(Account("w", ""), 1, 1) is False
    assert handler.swap(Account("w", ""), 1, 1, "0x0") is False


def test_get_proxy_cycles(monkeypatch):
    monkeypatch.setattr(settings, "USE_PROXY", True)
    handler = ActionHandler([], ["http://a", "http://b"])

    assert [handler.get_proxy(i) for i in range(1, 5)] == [
        "http://a",
        "http://b",
        "http://a",
        "http://b",
    ]


def test_login_saves_token(monkeypatch, tmp_path):
    path = tmp_path / "wallet.json"
    monkeypatch.setattr(settings, "WALLETS_FILE", str(path))
    monkeypatch.setattr(Pharos, "login", lambda self: "fresh-jwt")

    account = Account("main", PRIVATE_KEY)
    handler = ActionHandler([account], [])

    assert handler.login(account, 1, 1) is True
    assert account.token == "fresh-jwt"
    assert json.loads(path.read_text())["wallets"][0]["token"] == "fresh-jwt"


def test_swap_runs_tx_count_times(monkeypatch):
    swaps = []

    def fake_swap(self, token, amount):
        swaps.append((token, amount))
        return len(swaps) != 2  # second swap fails

    monkeypatch.setattr(Zenith, "swap", fake_swap)
    handler = ActionHandler([], [], tx_count=3)

    assert handler.swap(Account("w", PRIVATE_KEY), 1, 1, "0xToken") == 2
    assert len(swaps) == 3
    assert all(token == "0xToken" for token, _ in swaps)


def test_random_transfer_verifies_with_token(monkeypatch):
    verified = []

    monkeypatch.setattr(Transfer, "send_random", lambda self, amount: (1, "0xhash"))
    monkeypatch.setattr(
        PharosApiClient,
        "verify_task",
        lambda self, task_id, tx_hash=None: verified.append((task_id, tx_hash)),
    )
    handler = ActionHandler([], [], tx_count=2)

    assert handler.random_transfer(Account("w", PRIVATE_KEY, "jwt"), 1, 1) == 2
    assert verified == [(103, "0xhash"), (103, "0xhash")]


def test_random_transfer_without_token_skips_verification(monkeypatch):
    monkeypatch.setattr(Transfer, "send_random", lambda self, amount: (None, None))

    def fail(*args, **kwargs):
        raise AssertionError("should not verify")

    monkeypatch.setattr(PharosApiClient, "verify_task", fail)
    handler = ActionHandler([], [], tx_count=2)

    assert handler.random_transfer(Account("w", PRIVATE_KEY), 1, 1) == 0


def test_set_tx_count(monkeypatch):
    class Prompt:
        def __init__(self, answer):
            self.answer = answer

        def ask(self):
            return self.answer

    handler = ActionHandler([], [], tx_count=5)

    monkeypatch.setattr("questionary.text", lambda *a, **kw: Prompt("8"))
    handler.set_tx_count()
    assert handler.tx_count == 8

    monkeypatch.setattr("questionary.text", lambda *a, **kw: Prompt("zero"))
    handler.set_tx_count()
    assert handler.tx_count == 8
