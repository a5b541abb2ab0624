"""Unit tests for the development bank stub"""

import importlib.util
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

SERVER_PATH = Path(__file__).resolve().parents[2] / "mock" / "bank_server" / "main.py"


@pytest.fixture
def bank_server():
    """Fresh stub module per test so balances and tokens start clean"""
    spec = importlib.util.spec_from_file_location("atm_bank_stub_server", SERVER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _authorize(client: TestClient) -> str:
    response = client.post("/bank/authorize", json={"pin": "1234", "card_number": "card_rich"})
    assert response.status_code == 200
    return response.json()["token"]


def test_reauthorizing_card_keeps_one_live_token(bank_server):
    """Attempts that never reach charge do not pile up tokens"""
    client = TestClient(bank_server.app)

    for _ in range(5):
        token = _authorize(client)

    assert bank_server.TOKENS == {token: "card_rich"}
    assert bank_server.CARD_TOKENS == {"card_rich": token}


def test_replaced_token_cannot_charge(bank_server):
    client = TestClient(bank_server.app)
    old_token = _authorize(client)
    new_token = _authorize(client)

    response = client.post("/bank/charge", json={"token": old_token, "amount": 50, "currency": "PLN"})
    assert response.status_code == 401

    response = client.post("/bank/charge", json={"token": new_token, "amount": 50, "currency": "PLN"})
    assert response.status_code == 200
    assert bank_server.TOKENS == {}
    assert bank_server.CARD_TOKENS == {}


def test_charge_insufficient_funds(bank_server):
    client = TestClient(bank_server.app)
    response = client.post("/bank/authorize", json={"pin": "4321", "card_number": "card_poor"})
    token = response.json()["token"]

    response = client.post("/bank/charge", json={"token": token, "amount": 50, "currency": "PLN"})

    assert response.status_code == 402
