"""Integration tests for applications, risk score, tenants and auth endpoints."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from suddenlyspaces.main import app
from suddenlyspaces.api.risk import get_risk_scores
from suddenlyspaces.db import crud
from suddenlyspaces.services.synthetic import RiskScoreGenerator, tenant_display_fields


async def _listing(client, **overrides):
    data = {
        "title": "Loft",
        "location": "1 Main St",
        "city": "Boston",
        "rentAmount": 1500,
        "propertyType": "RESIDENTIAL",
        "leaseType": "YEARLY",
    }
    data.update(overrides)
    r = await client.post("/api/properties", json=data)
    assert r.status_code == 201, r.text
    return r.json()


async def _apply(client, property_id):
    return await client.post("/api/applications", json={"propertyId": property_id})


# ── Applications ─────────────────────────────────────────

@pytest.mark.asyncio
async def test_tenant_applies(clients):
    prop = await _listing(clients.owner)
    r = await _apply(clients.tenant, prop["id"])
    assert r.status_code == 201
    data = r.json()
    assert data["status"] == "PENDING"
    assert 0 <= data["riskScore"] <= 100
    assert data["tenantId"] == clients.ids["tenant"]
    assert data["tenant"]["name"] == "Tina Tenant"
    assert data["property"]["id"] == prop["id"]


@pytest.mark.asyncio
async def test_apply_uses_injected_risk_scores(clients):
    seeded = RiskScoreGenerator(seed=42)
    expected = RiskScoreGenerator(seed=42).score()
    app.dependency_overrides[get_risk_scores] = lambda: seeded

    prop = await _listing(clients.owner)
    r = await _apply(clients.tenant, prop["id"])
    assert r.json()["riskScore"] == expected


@pytest.mark.asyncio
async def test_only_tenants_apply(clients):
    prop = await _listing(clients.owner)
    r = await _apply(clients.other_owner, prop["id"])
    assert r.status_code == 403
    r = await _apply(clients.anon, prop["id"])
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_apply_to_missing_or_unavailable_property(clients):
    r = await _apply(clients.tenant, "nope")
    assert r.status_code == 404

    prop = await _listing(clients.owner, isAvailable=False)
    r = await _apply(clients.tenant, prop["id"])
    assert r.status_code == 400
    assert r.json() == {"message": "Property is not available"}


@pytest.mark.asyncio
async def test_repeat_applications_are_accepted(clients):
    prop = await _listing(clients.owner)
    assert (await _apply(clients.tenant, prop["id"])).status_code == 201
    assert (await _apply(clients.tenant, prop["id"])).status_code == 201


@pytest.mark.asyncio
async def test_list_applications_by_role(clients):
    mine = await _listing(clients.owner, title="Mine")
    theirs = await _listing(clients.other_owner, title="Theirs")
    await _apply(clients.tenant, mine["id"])
    await _apply(clients.tenant, theirs["id"])

    r = await clients.tenant.get("/api/applications")
    assert r.status_code == 200
    assert {a["property"]["title"] for a in r.json()} == {"Mine", "Theirs"}

    r = await clients.owner.get("/api/applications")
    assert [a["property"]["title"] for a in r.json()] == ["Mine"]

    r = await clients.anon.get("/api/applications")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_owner_reviews_application(clients):
    prop = await _listing(clients.owner)
    application = (await _apply(clients.tenant, prop["id"])).json()

    r = await clients.other_owner.patch(
        f"/api/applications/{application['id']}", json={"status": "APPROVED"},
    )
    assert r.status_code == 403

    r = await clients.tenant.patch(
        f"/api/applications/{application['id']}", json={"status": "APPROVED"},
    )
    assert r.status_code == 403

    r = await clients.owner.patch(
        f"/api/applications/{application['id']}", json={"status": "APPROVED"},
    )
    assert r.status_code == 200
    assert r.json()["status"] == "APPROVED"

    r = await clients.owner.patch("/api/applications/nope", json={"status": "REJECTED"})
    assert r.status_code == 404

    r = await clients.owner.patch(
        f"/api/applications/{application['id']}", json={"status": "MAYBE"},
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_owner_view_embeds_applications(clients):
    prop = await _listing(clients.owner)
    await _apply(clients.tenant, prop["id"])

    r = await clients.owner.get("/api/properties/my-properties")
    [listed] = r.json()["properties"]
    assert len(listed["applications"]) == 1
    assert listed["applications"][0]["tenant"] == {
        "id": clients.ids["tenant"], "name": "Tina Tenant", "email": "tenant@test.com",
    }


@pytest.mark.asyncio
async def test_delete_property_removes_applications(clients):
    prop = await _listing(clients.owner)
    await _apply(clients.tenant, prop["id"])
    await _apply(clients.tenant, prop["id"])

    r = await clients.owner.delete(f"/api/properties/{prop['id']}")
    assert r.status_code == 200

    async with clients.session_factory() as db:
        assert await crud.count_applications_for_property(db, prop["id"]) == 0

    r = await clients.tenant.get("/api/applications")
    assert r.json() == []


# ── Risk score ───────────────────────────────────────────

@pytest.mark.asyncio
async def test_risk_score(clients):
    r = await clients.anon.get("/api/risk-score", params={"tenantId": "t-1"})
    assert r.status_code == 200
    data = r.json()
    assert data["tenantId"] == "t-1"
    assert 0 <= data["riskScore"] <= 100

    r = await clients.anon.get("/api/risk-score")
    assert r.json()["tenantId"] is None


@pytest.mark.asyncio
async def test_risk_score_is_not_fixed(clients):
    scores = set()
    for _ in range(30):
        r = await clients.anon.get("/api/risk-score")
        scores.add(r.json()["riskScore"])
    assert all(0 <= s <= 100 for s in scores)
    assert len(scores) > 1


@pytest.mark.asyncio
async def test_unexpected_error_is_opaque_500(clients):
    class Broken(RiskScoreGenerator):
        def score(self) -> int:
            raise RuntimeError("db password is hunter2")

    app.dependency_overrides[get_risk_scores] = lambda: Broken()
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/api/risk-score")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}


# ── Tenants ──────────────────────────────────────────────

@pytest.mark.asyncio
async def test_tenants_list(clients):
    r = await clients.anon.get("/api/tenants")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    [tenant] = body["data"]
    tenant_id = clients.ids["tenant"]
    synthetic = tenant_display_fields(tenant_id)
    assert tenant == {
        "id": tenant_id,
        "name": "Tina Tenant",
        "email": "tenant@test.com",
        "phone": synthetic["phone"],
        "lastActivity": synthetic["last_activity"],
        "propertiesViewed": synthetic["properties_viewed"],
        "applicationsSubmitted": synthetic["applications_submitted"],
        "status": synthetic["status"],
    }

    again = (await clients.anon.get("/api/tenants")).json()["data"][0]
    assert again == tenant


# ── Auth ─────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_login_me_logout(clients):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.post("/api/auth/login", json={"email": "owner@test.com", "password": "wrong"})
        assert r.status_code == 401

        r = await ac.post("/api/auth/login", json={"email": "owner@test.com", "password": "testpass123"})
        assert r.status_code == 200
        assert r.json()["role"] == "OWNER"

        r = await ac.get("/api/auth/me")
        assert r.status_code == 200
        assert r.json()["email"] == "owner@test.com"

        r = await ac.post("/api/auth/logout")
        assert r.status_code == 200

        r = await ac.get("/api/auth/me")
        assert r.status_code == 401
