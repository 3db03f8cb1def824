"""Integration tests for the resource API."""

from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from app.modules.resources.models import Resource
from app.modules.tenants.models import Tenant


pytestmark = pytest.mark.integration

RESOURCES_URL = "/api/v1/resources"


class TestCreateResource:
    """Tests for POST /api/v1/resources."""

    async def test_admin_creates_resource(self, admin_client: AsyncClient, tenant: Tenant):
        """Tenant admins can add resources to their tenant."""
        response = await admin_client.post(RESOURCES_URL, json={"name": "  Board Room  "})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Board Room"
        assert data["tenant_id"] == str(tenant.id)
        assert UUID(data["id"])

    async def test_regular_user_is_forbidden(self, authenticated_client: AsyncClient):
        """Only admins manage resources."""
        response = await authenticated_client.post(RESOURCES_URL, json={"name": "Board Room"})

        assert response.status_code == 403
        assert response.json()["code"] == "insufficient_role"

    async def test_tenant_comes_from_session(
        self, admin_client: AsyncClient, other_tenant: Tenant
    ):
        """A tenant_id in the body is rejected."""
        response = await admin_client.post(
            RESOURCES_URL,
            json={"name": "Board Room", "tenant_id": str(other_tenant.id)},
        )

        assert response.status_code == 422

    async def test_blank_name_is_rejected(self, admin_client: AsyncClient):
        response = await admin_client.post(RESOURCES_URL, json={"name": "   "})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "name"


class TestReadResources:
    """Tests for GET /api/v1/resources and GET /api/v1/resources/{id}."""

    async def test_list_is_ordered_by_id(
        self, admin_client: AsyncClient, foreign_resource: Resource
    ):
        """All of the tenant's resources, none of another's, in ID order."""
        for name in ("Room C", "Room A", "Room B"):
            await admin_client.post(RESOURCES_URL, json={"name": name})

        response = await admin_client.get(RESOURCES_URL)

        assert response.status_code == 200
        ids = [UUID(r["id"]) for r in response.json()]
        assert len(ids) == 3
        assert ids == sorted(ids)
        assert foreign_resource.id not in ids

    async def test_get_resource(self, authenticated_client: AsyncClient, resource: Resource):
        response = await authenticated_client.get(f"{RESOURCES_URL}/{resource.id}")

        assert response.status_code == 200
        assert response.json()["name"] == resource.name

    async def test_get_other_tenants_resource(
        self, authenticated_client: AsyncClient, foreign_resource: Resource
    ):
        """A resource of another tenant reads as missing."""
        response = await authenticated_client.get(f"{RESOURCES_URL}/{foreign_resource.id}")

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    async def test_get_unknown_resource(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get(f"{RESOURCES_URL}/{uuid4()}")

        assert response.status_code == 404

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get(RESOURCES_URL)

        assert response.status_code == 401
