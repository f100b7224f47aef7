from typing import List

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from account_api.core.models import TimestampedBase
from .enums import Status
from .user_role import user_roles


class User(TimestampedBase):
    """Core application user model."""
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(25), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(8), default=Status.ACTIVE.value, nullable=False)

    # One-to-one, owned: created with the user and deleted with it
    detail_id: Mapped[int] = mapped_column(
        ForeignKey("user_details.id"), unique=True, nullable=False
    )
    details: Mapped["UserDetails"] = relationship(
        cascade="all, delete-orphan",
        single_parent=True,
        lazy="selectin",
    )

    roles: Mapped[List["Role"]] = relationship(
        secondary=user_roles,
        back_populates="users",
        order_by="Role.id",
        lazy="selectin",
    )

    @property
    def role_names(self) -> List[str]:
        return [role.name for role in self.roles]

    def __repr__(self):
        return f"<User(id='{self.id}', username='{self.username}', status='{self.status}')>"
