"""Resource repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select

from app.api.dependencies import DBSession
from app.modules.resources.models import Resource


class ResourceRepository:
    """Repository for Resource database operations.

    Every read is scoped to a tenant; a resource of another tenant is
    indistinguishable from one that does not exist.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, resource: Resource) -> Resource:
        """Create a new resource.

        Args:
            resource: Resource instance to create

        Returns:
            The created resource with ID populated
        """
        self.session.add(resource)
        await self.session.flush()
        await self.session.refresh(resource)
        return resource

    async def get_by_id(self, resource_id: UUID, tenant_id: UUID) -> Resource | None:
        """Get a resource by ID within a tenant.

        Args:
            resource_id: The resource's UUID
            tenant_id: The tenant to scope the lookup to

        Returns:
            Resource if found in the tenant, None otherwise
        """
        stmt = select(Resource).where(
            Resource.id == resource_id,
            Resource.tenant_id == tenant_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: UUID) -> list[Resource]:
        """List a tenant's resources in ascending ID order."""
        stmt = (
            select(Resource)
            .where(Resource.tenant_id == tenant_id)
            .order_by(Resource.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


# Type alias for dependency injection
ResourceRepo = Annotated[ResourceRepository, Depends(ResourceRepository)]
