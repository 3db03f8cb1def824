"""User database models."""

from sqlalchemy import Boolean, Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_ROLE_LENGTH
from app.core.database.base import Base, TenantMixin, TimestampMixin, UUIDMixin
from app.core.permissions.roles import UserRole


class User(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """User model representing a member of exactly one tenant.

    Attributes:
        email: Email address, unique within the tenant
        full_name: User's full name
        role: TENANT_ADMIN or TENANT_USER; fixed at creation
        is_active: Whether the user may act on the API
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),
    )

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=MAX_ROLE_LENGTH,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        default=UserRole.TENANT_USER,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, tenant_id={self.tenant_id})>"
