"""Resource service for business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from app.core.errors import NotFoundError
from app.modules.resources.models import Resource
from app.modules.resources.repos import ResourceRepo
from app.modules.resources.schemas import ResourceCreate


logger = structlog.get_logger()


class ResourceService:
    """Service for tenant-scoped resource management."""

    def __init__(self, repo: ResourceRepo) -> None:
        self.repo = repo

    async def create_resource(self, data: ResourceCreate, tenant_id: UUID) -> Resource:
        """Create a resource owned by the given tenant.

        Callers are expected to have checked the TENANT_ADMIN role.
        """
        resource = await self.repo.create(Resource(name=data.name, tenant_id=tenant_id))
        logger.info(
            "resource_created",
            resource_id=str(resource.id),
            tenant_id=str(tenant_id),
        )
        return resource

    async def get_resource(self, resource_id: UUID, tenant_id: UUID) -> Resource:
        """Get a resource within a tenant.

        Raises:
            NotFoundError: If the resource does not exist in the tenant
        """
        resource = await self.repo.get_by_id(resource_id, tenant_id)
        if not resource:
            raise NotFoundError(
                "Resource not found",
                resource="resource",
                resource_id=str(resource_id),
            )
        return resource

    async def list_resources(self, tenant_id: UUID) -> list[Resource]:
        """List the tenant's resources in ascending ID order."""
        return await self.repo.list_by_tenant(tenant_id)


# Type alias for dependency injection
ResourceSvc = Annotated[ResourceService, Depends(ResourceService)]
