import sqlite3

import pytest
from fastapi.testclient import TestClient

import tracker.api as api
from tracker.settings import Settings


@pytest.fixture
def client(tmp_path):
    settings = Settings(data_dir=tmp_path, db_path=tmp_path / "t.sqlite")
    return TestClient(api.create_app(settings))


def test_api_test_route(client):
    response = client.get("/api/test")

    assert response.status_code == 200
    assert response.json() == {"body": "testing successful"}


def test_get_empty_collection(client):
    response = client.get("/api/transaction")

    assert response.status_code == 200
    assert response.json() == []


def test_post_then_get_round_trip(client):
    body = {
        "name": "mobile",
        "description": "d",
        "dateTime": "2025-09-07T10:30",
        "price": 20000,
    }
    created = client.post("/api/transaction", json=body)

    assert created.status_code == 200
    created_json = created.json()
    assert isinstance(created_json["id"], int)
    assert {k: created_json[k] for k in body} == body

    listed = client.get("/api/transaction")
    assert listed.status_code == 200
    assert listed.json() == [created_json]


def test_post_accepts_numeric_price_string(client):
    response = client.post(
        "/api/transaction",
        json={
            "name": "",
            "description": "refund",
            "dateTime": "2025-09-07T10:30",
            "price": "-200",
        },
    )

    assert response.status_code == 200
    assert response.json()["price"] == -200
    assert response.json()["name"] == ""


@pytest.mark.parametrize("price", [None, "abc", 10**400])
def test_post_with_unstorable_price_returns_error_envelope(client, price):
    response = client.post(
        "/api/transaction",
        json={"name": "x", "description": "y", "dateTime": "", "price": price},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create transaction"}
    assert client.get("/api/transaction").json() == []


def test_get_store_failure_returns_error_envelope(client, monkeypatch):
    def boom(_db_path):
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(api, "list_txns", boom)

    response = client.get("/api/transaction")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch transactions"}


def test_post_store_failure_returns_error_envelope(client, monkeypatch):
    def boom(_db_path, **_kwargs):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(api, "create_txn", boom)

    response = client.post(
        "/api/transaction",
        json={"name": "x", "description": "y", "dateTime": "", "price": 1},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create transaction"}


def test_cors_allows_any_origin(client):
    response = client.get(
        "/api/transaction", headers={"Origin": "http://localhost:3000"}
    )

    assert response.headers["access-control-allow-origin"] == "*"
