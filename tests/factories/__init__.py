"""Test factories for generating test data."""

from tests.factories.resource import ResourceFactory
from tests.factories.tenant import TenantFactory
from tests.factories.user import UserFactory, bearer_headers


__all__ = [
    "ResourceFactory",
    "TenantFactory",
    "UserFactory",
    "bearer_headers",
]
