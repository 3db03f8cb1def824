#!/usr/bin/env python
"""
Generate demo tenants, users and resources for development.

Prints an access token for every seeded user so the API can be
exercised straight away:

    python scripts/seed.py --create-tables
"""

import argparse
import asyncio
import sys


# Add src to path for imports
sys.path.insert(0, "src")

from app.core.auth.backend import create_access_token
from app.core.database import Base, async_engine, async_session_factory
from app.core.permissions.roles import UserRole
from app.modules.bookings.models import Booking  # noqa: F401
from app.modules.resources.models import Resource
from app.modules.tenants.models import Tenant
from app.modules.tenants.repos import TenantRepository
from app.modules.users.models import User
from app.modules.users.repos import UserRepository


DEMO_TENANTS = [
    {
        "name": "Acme Corporation",
        "domain": "acme.com",
        "resources": ["Board Room", "Focus Room 1"],
    },
    {
        "name": "Tech Startup Inc",
        "domain": "techstartup.com",
        "resources": ["Main Hall"],
    },
]


async def create_tables() -> None:
    """Create all tables that do not exist yet."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created")


async def seed_demo() -> None:
    """Create demo tenants, each with an admin, a user and resources."""
    async with async_session_factory() as session:
        tenants = TenantRepository(session)
        users = UserRepository(session)

        for data in DEMO_TENANTS:
            if await tenants.get_by_name(data["name"]):
                print(f"Tenant already exists: {data['name']}")
                continue

            tenant = await tenants.create(Tenant(name=data["name"]))
            print(f"\n{tenant.name} ({tenant.id})")

            for local_part, role in (
                ("admin", UserRole.TENANT_ADMIN),
                ("user", UserRole.TENANT_USER),
            ):
                user = await users.create(
                    User(
                        email=f"{local_part}@{data['domain']}",
                        full_name=f"{data['name']} {local_part.title()}",
                        role=role,
                        tenant_id=tenant.id,
                    )
                )
                token = create_access_token(user.id, tenant.id)
                print(f"  {role.value:<13} {user.email}")
                print(f"    token: {token}")

            for name in data["resources"]:
                session.add(Resource(name=name, tenant_id=tenant.id))
                print(f"  resource: {name}")

        await session.commit()


async def main(create: bool) -> None:
    """Run the seeding."""
    if create:
        await create_tables()
    await seed_demo()
    await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create database tables before seeding",
    )
    args = parser.parse_args()

    asyncio.run(main(args.create_tables))
