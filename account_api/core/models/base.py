from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -----------------------------------------------------------
# Base Configuration (SQLAlchemy 2.0)
# -----------------------------------------------------------
class Base(DeclarativeBase):
    """Declarative base shared by every table."""
    pass


class TimestampedBase(Base):
    """Abstract base which provides the surrogate key
    and the created_at / updated_at columns."""
    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def touch(self) -> None:
        """Refresh updated_at explicitly, even when no column changed."""
        self.updated_at = utcnow()
