import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.api.v1.models import Role
from account_api.utils.data_from_json import get_data_from_json

logger = logging.getLogger(__name__)

ROLES_FILE = "roles.json"


async def seed_default_roles(db: AsyncSession) -> int:
    """
    Insert the roles listed in db/data/roles.json that are not stored yet.

    Returns the number of roles created.
    """
    created = 0
    for item in get_data_from_json(ROLES_FILE):
        result = await db.execute(select(Role).where(Role.name == item["name"]))
        if result.scalars().first() is not None:
            continue
        db.add(Role(name=item["name"], description=item["description"]))
        created += 1

    if created:
        await db.commit()
        logger.info("Seeded %d default role(s)", created)
    return created
