import asyncio
from datetime import datetime, timedelta, timezone

from sqlalchemy import update

from services.auth_service.models import RevokedToken, User
from shared.config.database import AsyncSessionLocal
from shared.security.access import AdminGate, Principal, evaluate_admin_gate

from conftest import ADMIN_EMAIL, CUSTOMER_EMAIL, PASSWORD


async def _set_role(email, role):
    async with AsyncSessionLocal() as db:
        await db.execute(update(User).where(User.email == email).values(role=role))
        await db.commit()


async def _add_revocation(jti, expires_at):
    async with AsyncSessionLocal() as db:
        db.add(RevokedToken(jti=jti, expires_at=expires_at))
        await db.commit()


async def _revocation_exists(jti):
    async with AsyncSessionLocal() as db:
        return await db.get(RevokedToken, jti) is not None


def test_admin_gate_states():
    admin = Principal(user_id=1, email=ADMIN_EMAIL, role="admin")
    customer = Principal(user_id=2, email=CUSTOMER_EMAIL, role="customer")

    assert evaluate_admin_gate(None, loading=True) is AdminGate.LOADING
    assert evaluate_admin_gate(admin, loading=True) is AdminGate.LOADING
    assert evaluate_admin_gate(admin) is AdminGate.GRANTED
    assert evaluate_admin_gate(customer) is AdminGate.REDIRECT
    assert evaluate_admin_gate(None) is AdminGate.REDIRECT


def test_sign_up_assigns_roles(client):
    resp = client.post(
        "/auth/register",
        json={"email": CUSTOMER_EMAIL, "password": PASSWORD, "full_name": "Budi Santoso"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["role"] == "customer"
    assert body["full_name"] == "Budi Santoso"
    assert "hashed_password" not in body

    resp = client.post(
        "/auth/register",
        json={"email": ADMIN_EMAIL.upper(), "password": PASSWORD, "full_name": "Admin"},
    )
    assert resp.status_code == 201
    assert resp.json()["role"] == "admin"


def test_duplicate_email(client, customer_headers):
    resp = client.post(
        "/auth/register",
        json={"email": CUSTOMER_EMAIL, "password": PASSWORD, "full_name": "Budi"},
    )
    assert resp.status_code == 409
    assert resp.json() == {"title": "Error", "description": "Email sudah terdaftar"}


def test_short_password_rejected(client):
    resp = client.post(
        "/auth/register",
        json={"email": CUSTOMER_EMAIL, "password": "123", "full_name": "Budi"},
    )
    assert resp.status_code == 422


def test_wrong_password(client, customer_headers):
    resp = client.post("/auth/login", json={"email": CUSTOMER_EMAIL, "password": "salah-sekali"})
    assert resp.status_code == 401
    assert resp.json()["title"] == "Error"


def test_session_reports_gate(client, admin_headers, customer_headers):
    assert client.get("/auth/session").json() == {
        "authenticated": False,
        "email": None,
        "role": None,
        "admin_gate": "redirect",
    }

    body = client.get("/auth/session", headers=customer_headers).json()
    assert body["authenticated"] is True
    assert body["role"] == "customer"
    assert body["admin_gate"] == "redirect"

    body = client.get("/auth/session", headers=admin_headers).json()
    assert body["role"] == "admin"
    assert body["admin_gate"] == "granted"


def test_me(client, customer_headers):
    resp = client.get("/auth/me", headers=customer_headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == CUSTOMER_EMAIL

    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"}).status_code == 401


def test_sign_out_revokes_token(client, admin_headers):
    assert client.get("/dashboard/stats", headers=admin_headers).status_code == 200

    resp = client.post("/auth/logout", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "Berhasil"

    assert client.get("/auth/me", headers=admin_headers).status_code == 401
    assert client.get("/dashboard/stats", headers=admin_headers).status_code == 401
    assert client.get("/auth/session", headers=admin_headers).json()["authenticated"] is False


def test_role_change_applies_to_existing_token(client, customer_headers):
    assert client.get("/auth/session", headers=customer_headers).json()["admin_gate"] == "redirect"
    assert client.get("/dashboard/stats", headers=customer_headers).status_code == 403

    asyncio.run(_set_role(CUSTOMER_EMAIL, "admin"))

    body = client.get("/auth/session", headers=customer_headers).json()
    assert body["role"] == "admin"
    assert body["admin_gate"] == "granted"
    assert client.get("/dashboard/stats", headers=customer_headers).status_code == 200

    asyncio.run(_set_role(CUSTOMER_EMAIL, "customer"))
    assert client.get("/dashboard/stats", headers=customer_headers).status_code == 403


def test_sign_out_prunes_expired_revocations(client, customer_headers):
    now = datetime.now(timezone.utc)
    asyncio.run(_add_revocation("stale", now - timedelta(hours=2)))
    asyncio.run(_add_revocation("still-valid", now + timedelta(hours=2)))

    assert client.post("/auth/logout", headers=customer_headers).status_code == 200

    assert asyncio.run(_revocation_exists("stale")) is False
    assert asyncio.run(_revocation_exists("still-valid")) is True
    assert client.get("/auth/me", headers=customer_headers).status_code == 401
