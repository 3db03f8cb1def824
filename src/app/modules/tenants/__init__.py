"""Tenants module - the isolation boundary for users, resources and bookings.

Tenants have no HTTP routes; they are created by provisioning tooling
such as ``scripts/seed.py``.
"""

# Module metadata
__module_info__ = {
    "name": "tenants",
    "version": "1.0.0",
    "description": "Tenant records, the isolation boundary for all other data",
    "dependencies": [],
}
