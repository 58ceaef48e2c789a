import asyncio
import os
import tempfile

# Settings are read at import time, so the environment goes first
_db_dir = tempfile.mkdtemp(prefix="freshfruits-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_db_dir}/test.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_EMAILS", "admin@freshfruits.id")
os.environ.setdefault("ORDER_RATE_LIMIT", "1000/minute")

import pytest
from fastapi.testclient import TestClient

from main import app
from shared.config.database import Base, engine

ADMIN_EMAIL = "admin@freshfruits.id"
CUSTOMER_EMAIL = "budi@freshfruits.id"
PASSWORD = "rahasia123"


async def _reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client():
    asyncio.run(_reset_database())
    with TestClient(app) as test_client:
        yield test_client


def _sign_in(client, email, full_name):
    resp = client.post(
        "/auth/register",
        json={"email": email, "password": PASSWORD, "full_name": full_name},
    )
    assert resp.status_code == 201, resp.text
    resp = client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def admin_headers(client):
    return _sign_in(client, ADMIN_EMAIL, "Admin Toko")


@pytest.fixture
def customer_headers(client):
    return _sign_in(client, CUSTOMER_EMAIL, "Budi Santoso")


@pytest.fixture
def make_fruit(client, admin_headers):
    def _make(name="Apel", price=15000, stock=50, description="Apel merah segar", image="https://img.example/apel.jpg"):
        resp = client.post(
            "/fruits/",
            json={
                "name": name,
                "price": price,
                "stock": stock,
                "image": image,
                "description": description,
            },
            headers=admin_headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def place_order(client):
    def _place(fruit_id, quantity=1, customer_name="Siti", contact="+62 812-3456-7890"):
        return client.post(
            "/orders/",
            json={
                "fruit_id": fruit_id,
                "quantity": quantity,
                "customer_name": customer_name,
                "contact": contact,
            },
        )
    return _place
