from sqlalchemy import Column, ForeignKey, Table

from account_api.core.models import Base


# Association table linking a User to a Role.
# The composite primary key ensures a user holds a given role row only once.
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)
