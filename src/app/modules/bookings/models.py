"""Booking database models."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database.base import (
    Base,
    TenantMixin,
    TimestampMixin,
    UTCDateTime,
    UUIDMixin,
)
from app.modules.bookings.intervals import TimeInterval


if TYPE_CHECKING:
    from app.modules.resources.models import Resource


class Booking(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """A reservation of a resource by a user for ``[start_time, end_time)``.

    Bookings are created only by admission and changed only by
    cancellation, which flips ``cancelled`` to True for good. Rows are
    never deleted.

    Attributes:
        resource_id: The booked resource
        user_id: The owner; the only user allowed to cancel
        start_time: Inclusive start instant (UTC)
        end_time: Exclusive end instant (UTC)
        cancelled: Whether the booking was cancelled
    """

    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_resource_active", "resource_id", "cancelled"),
        Index("ix_bookings_owner_start", "tenant_id", "user_id", "start_time"),
    )

    resource_id: Mapped[UUID] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_time: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
    )
    end_time: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
    )
    cancelled: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Relationships
    resource: Mapped["Resource"] = relationship(
        "Resource",
        lazy="selectin",
    )

    @property
    def interval(self) -> TimeInterval[datetime]:
        """The booked time range as a half-open interval."""
        return TimeInterval(self.start_time, self.end_time)

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, resource_id={self.resource_id}, "
            f"start={self.start_time}, end={self.end_time}, cancelled={self.cancelled})>"
        )
