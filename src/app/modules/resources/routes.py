"""Resource API routes."""

from uuid import UUID

from fastapi import status

from app.core.auth.dependencies import CurrentPrincipal
from app.core.permissions import UserRole, require_role
from app.modules.resources import router
from app.modules.resources.schemas import ResourceCreate, ResourceResponse
from app.modules.resources.services import ResourceSvc


@router.post(
    "",
    response_model=ResourceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create resource",
    description="Create a bookable resource in the caller's tenant. Requires TENANT_ADMIN.",
)
async def create_resource(
    data: ResourceCreate,
    principal: CurrentPrincipal,
    service: ResourceSvc,
) -> ResourceResponse:
    """Create a resource."""
    require_role(principal, UserRole.TENANT_ADMIN)
    resource = await service.create_resource(data, principal.tenant_id)
    return ResourceResponse.model_validate(resource)


@router.get(
    "",
    response_model=list[ResourceResponse],
    summary="List resources",
    description="List all resources in the caller's tenant, ordered by ID.",
)
async def list_resources(
    principal: CurrentPrincipal,
    service: ResourceSvc,
) -> list[ResourceResponse]:
    """List resources in tenant."""
    resources = await service.list_resources(principal.tenant_id)
    return [ResourceResponse.model_validate(r) for r in resources]


@router.get(
    "/{resource_id}",
    response_model=ResourceResponse,
    summary="Get resource by ID",
    description="Get a resource of the caller's tenant.",
)
async def get_resource(
    resource_id: UUID,
    principal: CurrentPrincipal,
    service: ResourceSvc,
) -> ResourceResponse:
    """Get resource by ID."""
    resource = await service.get_resource(resource_id, principal.tenant_id)
    return ResourceResponse.model_validate(resource)
