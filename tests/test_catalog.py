from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from main import app
from services.catalog_service.service import FruitService
from services.catalog_service.catalog import (
    StockStatus,
    filter_fruits,
    is_low_stock,
    max_orderable,
    stock_status,
)


def _fruit(name, description=""):
    return SimpleNamespace(name=name, description=description)


FRUITS = [
    _fruit("Apel Fuji", "Manis dan renyah"),
    _fruit("Mangga Harum Manis", "Dari Probolinggo"),
    _fruit("Jeruk Medan", "Segar, banyak air"),
]


@pytest.mark.parametrize("query", ["", None])
def test_empty_query_returns_everything_in_order(query):
    assert filter_fruits(FRUITS, query) == FRUITS


def test_filter_matches_name_or_description_ignoring_case():
    assert filter_fruits(FRUITS, "APEL") == [FRUITS[0]]
    assert filter_fruits(FRUITS, "manis") == [FRUITS[0], FRUITS[1]]
    assert filter_fruits(FRUITS, "probolinggo") == [FRUITS[1]]
    assert filter_fruits(FRUITS, "durian") == []


def test_filter_is_substring_not_word_match():
    assert filter_fruits(FRUITS, "ngga har") == [FRUITS[1]]


def test_whitespace_query_is_matched_literally():
    apel, jeruk = _fruit("Apel Fuji", "Manis"), _fruit("Jeruk", "Segar")
    assert filter_fruits([apel, jeruk], " ") == [apel]
    assert filter_fruits([apel, jeruk], "   ") == []


@pytest.mark.parametrize(
    "stock,expected",
    [
        (0, StockStatus.OUT_OF_STOCK),
        (1, StockStatus.LOW_STOCK),
        (10, StockStatus.LOW_STOCK),
        (11, StockStatus.AVAILABLE),
    ],
)
def test_stock_status_thresholds(stock, expected):
    assert stock_status(stock) is expected


def test_dashboard_low_stock_includes_empty():
    assert is_low_stock(0)
    assert is_low_stock(10)
    assert not is_low_stock(11)


def test_max_orderable_caps_at_hundred():
    assert max_orderable(5) == 5
    assert max_orderable(250) == 100
    assert max_orderable(0) == 0


def test_create_and_read_back_exact_fields(client, make_fruit):
    created = make_fruit(name="Apel", price=15000, stock=50)

    resp = client.get(f"/fruits/{created['id']}")
    assert resp.status_code == 200
    fruit = resp.json()
    assert fruit["name"] == "Apel"
    assert fruit["price"] == 15000
    assert fruit["stock"] == 50
    assert fruit["stock_status"] == "available"
    assert fruit["orderable"] is True
    assert fruit["max_orderable"] == 50


def test_numeric_strings_are_parsed(client, admin_headers):
    resp = client.post(
        "/fruits/",
        json={"name": "Pir", "price": "12500.5", "stock": "7"},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["price"] == 12500.5
    assert body["stock"] == 7
    assert body["stock_status"] == "low_stock"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Pir", "price": "murah", "stock": 5},
        {"name": "Pir", "price": 1000, "stock": "1.5kg"},
        {"name": "Pir", "price": 1000, "stock": -1},
        {"name": "Pir", "price": "inf", "stock": 5},
        {"name": "Pir", "price": "NaN", "stock": 5},
        {"name": "Pir", "price": 1000, "stock": 2**31},
    ],
)
def test_invalid_numbers_are_rejected(client, admin_headers, payload):
    resp = client.post("/fruits/", json=payload, headers=admin_headers)
    assert resp.status_code == 422
    assert resp.json()["title"] == "Error"


def test_search_lists_newest_first(client, make_fruit):
    apel = make_fruit(name="Apel", description="merah")
    jeruk = make_fruit(name="Jeruk", description="Segar dan manis")
    mangga = make_fruit(name="Mangga", description="Manis sekali")

    ids = [f["id"] for f in client.get("/fruits/").json()]
    assert ids == [mangga["id"], jeruk["id"], apel["id"]]

    ids = [f["id"] for f in client.get("/fruits/", params={"query": "MANIS"}).json()]
    assert ids == [mangga["id"], jeruk["id"]]


def test_update_fruit(client, make_fruit, admin_headers):
    fruit = make_fruit(stock=50)
    resp = client.put(
        f"/fruits/{fruit['id']}",
        json={"name": "Apel Malang", "price": 18000, "stock": 0, "image": "", "description": "Habis"},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Apel Malang"
    assert body["stock_status"] == "out_of_stock"
    assert body["orderable"] is False


def test_update_missing_fruit(client, admin_headers):
    resp = client.put(
        "/fruits/999",
        json={"name": "X", "price": 1, "stock": 1},
        headers=admin_headers,
    )
    assert resp.status_code == 404
    assert resp.json() == {"title": "Error", "description": "Buah tidak ditemukan"}


def test_delete_requires_confirmation(client, make_fruit, admin_headers):
    fruit = make_fruit()

    resp = client.delete(f"/fruits/{fruit['id']}", headers=admin_headers)
    assert resp.status_code == 400
    assert client.get(f"/fruits/{fruit['id']}").status_code == 200

    resp = client.delete(f"/fruits/{fruit['id']}", params={"confirm": "true"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "Berhasil"

    assert client.get(f"/fruits/{fruit['id']}").status_code == 404
    assert client.get("/fruits/").json() == []


def test_delete_refused_while_orders_reference_fruit(client, make_fruit, admin_headers, place_order):
    fruit = make_fruit()
    assert place_order(fruit["id"], quantity=2).status_code == 201

    resp = client.delete(f"/fruits/{fruit['id']}", params={"confirm": "true"}, headers=admin_headers)
    assert resp.status_code == 409
    assert client.get(f"/fruits/{fruit['id']}").status_code == 200


def test_catalog_writes_need_admin(client, customer_headers):
    payload = {"name": "Apel", "price": 15000, "stock": 50}

    assert client.post("/fruits/", json=payload).status_code == 401
    resp = client.post("/fruits/", json=payload, headers=customer_headers)
    assert resp.status_code == 403
    assert resp.json()["title"] == "Error"
    assert client.delete("/fruits/1", params={"confirm": "true"}, headers=customer_headers).status_code == 403


@pytest.mark.parametrize("fruit_id", ["99999999999999999999", str(2**31), "0", "-1"])
def test_out_of_range_fruit_id_is_rejected(client, fruit_id):
    resp = client.get(f"/fruits/{fruit_id}")
    assert resp.status_code == 422
    assert resp.json()["title"] == "Error"


def test_out_of_range_id_on_admin_routes(client, admin_headers):
    huge = "99999999999999999999"
    resp = client.put(
        f"/fruits/{huge}",
        json={"name": "X", "price": 1, "stock": 1},
        headers=admin_headers,
    )
    assert resp.status_code == 422
    resp = client.delete(f"/fruits/{huge}", params={"confirm": "true"}, headers=admin_headers)
    assert resp.status_code == 422


def test_unexpected_error_returns_generic_notification(client, monkeypatch):
    async def broken_listing(db, query=None):
        raise RuntimeError("database went away")

    monkeypatch.setattr(FruitService, "list_fruits", staticmethod(broken_listing))
    resp = TestClient(app, raise_server_exceptions=False).get("/fruits/")
    assert resp.status_code == 500
    assert resp.json() == {
        "title": "Error",
        "description": "Terjadi kesalahan yang tidak terduga",
    }
