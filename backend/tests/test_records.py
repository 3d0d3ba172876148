"""
API tests for plots, document upload, notifications and sample-data reset
"""
import pytest
from httpx import AsyncClient

from app.core.config import settings


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Request-ID" in response.headers


@pytest.mark.asyncio
async def test_api_health(client: AsyncClient):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_list_plots(client: AsyncClient, citizen_headers):
    response = await client.get("/api/v1/plots", headers=citizen_headers)

    assert response.status_code == 200
    plots = response.json()
    assert [p["plot_id"] for p in plots] == ["PLOT123"]
    assert plots[0]["area"] == 1000
    assert plots[0]["location"] == {"lat": 28.7041, "lng": 77.1025}
    assert len(plots[0]["boundaries"]) == 3


@pytest.mark.asyncio
async def test_list_plots_by_owner(client: AsyncClient, officer_headers, other_citizen):
    owned = await client.get(
        "/api/v1/plots", params={"ownerEmail": settings.DEMO_CITIZEN_EMAIL}, headers=officer_headers
    )
    none = await client.get(
        "/api/v1/plots", params={"ownerEmail": other_citizen.email}, headers=officer_headers
    )

    assert len(owned.json()) == 1
    assert none.json() == []


@pytest.mark.asyncio
async def test_get_plot(client: AsyncClient, citizen_headers):
    response = await client.get("/api/v1/plots/PLOT123", headers=citizen_headers)

    assert response.status_code == 200
    assert response.json()["current_owner_email"] == settings.DEMO_CITIZEN_EMAIL


@pytest.mark.asyncio
async def test_get_plot_not_found(client: AsyncClient, citizen_headers):
    response = await client.get("/api/v1/plots/NOPE", headers=citizen_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PLOT_NOT_FOUND"


@pytest.mark.asyncio
async def test_plots_require_auth(client: AsyncClient):
    response = await client.get("/api/v1/plots")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_upload_document(client: AsyncClient, citizen_headers, store):
    response = await client.post(
        "/api/v1/documents/upload",
        files={"file": ("deed.pdf", b"%PDF-1.4 sample", "application/pdf")},
        headers=citizen_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["file_name"] == "deed.pdf"
    assert data["size"] == len(b"%PDF-1.4 sample")
    assert store.documents.get(data["document_id"]) is not None

    notifications = await client.get("/api/v1/notifications", headers=citizen_headers)
    assert [n["message"] for n in notifications.json()] == ["Document uploaded successfully"]


@pytest.mark.asyncio
async def test_upload_without_file(client: AsyncClient, citizen_headers):
    response = await client.post("/api/v1/documents/upload", headers=citizen_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "No file uploaded"


@pytest.mark.asyncio
async def test_notifications_are_per_user(
    client: AsyncClient, citizen_headers, officer_headers
):
    await client.post(
        "/api/v1/applications",
        json={"application_type": "mutation", "plot_id": "PLOT123", "documents": ["deed.pdf"]},
        headers=citizen_headers
    )

    mine = await client.get("/api/v1/notifications", headers=citizen_headers)
    theirs = await client.get("/api/v1/notifications", headers=officer_headers)

    assert len(mine.json()) == 1
    assert theirs.json() == []


@pytest.mark.asyncio
async def test_reset_requires_admin(client: AsyncClient, officer_headers):
    response = await client.post("/api/v1/sample/reset", headers=officer_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_reset_restores_seed_state(
    client: AsyncClient, citizen_headers, admin_headers, other_citizen, store
):
    await client.post(
        "/api/v1/applications",
        json={"application_type": "mutation", "plot_id": "PLOT123", "documents": ["deed.pdf"]},
        headers=citizen_headers
    )

    response = await client.post("/api/v1/sample/reset", headers=admin_headers)

    assert response.status_code == 200
    removed = response.json()["removed"]
    assert removed["applications"] == 1
    assert removed["users"] == 1
    assert store.applications.count() == 0
    assert store.notifications.count() == 0
    assert store.users.get_by_email(other_citizen.email) is None
    assert store.users.get_by_email(settings.DEMO_CITIZEN_EMAIL) is not None
    assert store.plots.get("PLOT123") is not None

    # Seed accounts survive, so existing tokens keep working
    after = await client.get("/api/v1/applications", headers=citizen_headers)
    assert after.status_code == 200
    assert after.json() == []
