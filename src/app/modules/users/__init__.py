"""Users module: tenant members and their roles."""

from fastapi import APIRouter


router = APIRouter(prefix="/users", tags=["users"])

# Import routes to register them (must be after router is defined)
from app.modules.users import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "users",
    "version": "1.0.0",
    "description": "Tenant members and roles",
    "dependencies": ["tenants"],
}
