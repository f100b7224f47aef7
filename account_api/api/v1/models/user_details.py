from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from account_api.core.models import Base


class UserDetails(Base):
    """Profile data owned by exactly one User."""
    __tablename__ = "user_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    lastname: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def to_claims(self) -> dict:
        """Shallow copy embedded in the signin claim payload."""
        return {"id": self.id, "name": self.name, "lastname": self.lastname}

    def __repr__(self):
        return f"<UserDetails(id='{self.id}', name='{self.name}', lastname='{self.lastname}')>"
