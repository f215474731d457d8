from types import SimpleNamespace

from conftest import PRIVATE_KEY

from modules.transfer import Transfer

MAIN_WALLET = "0x000000000000000000000000000000000000dEaD"


def make_transfer(monkeypatch, balance, gas_price=10):
    wallet = Transfer(PRIVATE_KEY, "[1/1]")
    sent = []

    monkeypatch.setattr(wallet, "get_balance", lambda *_: balance)
    monkeypatch.setattr(
        wallet,
        "transfer",
        lambda to, value, tx_label, gas_price=None: sent.append((to, value, gas_price)) or 1,
    )
    wallet.web3 = SimpleNamespace(eth=SimpleNamespace(gas_price=gas_price))
    return wallet, sent


def test_sweep_sends_balance_minus_gas(monkeypatch):
    wallet, sent = make_transfer(monkeypatch, balance=1_000_000)

    assert wallet.sweep(MAIN_WALLET) == 1
    assert sent == [(MAIN_WALLET, 1_000_000 - 21000 * 10, 10)]


def test_sweep_skips_empty_wallet(monkeypatch):
    wallet, sent = make_transfer(monkeypatch, balance=0)

    assert wallet.sweep(MAIN_WALLET) is None
    assert sent == []


def test_sweep_skips_when_gas_exceeds_balance(monkeypatch):
    wallet, sent = make_transfer(monkeypatch, balance=21000 * 10)

    assert wallet.sweep(MAIN_WALLET) is None
    assert sent == []
