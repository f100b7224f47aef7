from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import relationship, mapped_column, Mapped

from account_api.core.models import TimestampedBase
from .enums import Status
from .user_role import user_roles


class Role(TimestampedBase):
    """Named role granted to users through the user_roles junction."""
    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(20), unique=True, index=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(8), default=Status.ACTIVE.value, nullable=False)

    users: Mapped[List["User"]] = relationship(
        secondary=user_roles,
        back_populates="roles",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Role(id='{self.id}', name='{self.name}', status='{self.status}')>"
