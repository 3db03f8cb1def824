"""Resources module: bookable entities owned by a tenant."""

from fastapi import APIRouter


router = APIRouter(prefix="/resources", tags=["resources"])

# Import routes to register them (must be after router is defined)
from app.modules.resources import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "resources",
    "version": "1.0.0",
    "description": "Tenant-scoped bookable resources",
    "dependencies": ["tenants"],
}
