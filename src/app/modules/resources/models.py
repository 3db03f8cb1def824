"""Resource database models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import MAX_NAME_LENGTH
from app.core.database.base import Base, TenantMixin, TimestampMixin, UUIDMixin


class Resource(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """A bookable entity, such as a meeting room, owned by one tenant.

    A resource is only visible and bookable within its own tenant.
    """

    __tablename__ = "resources"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Resource(id={self.id}, name={self.name}, tenant_id={self.tenant_id})>"
