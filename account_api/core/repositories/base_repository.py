import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from account_api.core.models import Base, ConflictError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    async def get_by_id(self, db: AsyncSession, item_id: Any) -> Optional[T]:
        result = await db.execute(select(self.model).filter(self.model.id == item_id))
        return result.scalars().first()

    async def get_by_id_and_status(self, db: AsyncSession, item_id: Any, status: str) -> Optional[T]:
        result = await db.execute(
            select(self.model).filter(self.model.id == item_id, self.model.status == status)
        )
        return result.scalars().first()

    async def get_all_by_status(self, db: AsyncSession, status: str) -> List[T]:
        result = await db.execute(
            select(self.model).filter(self.model.status == status).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def save(self, db: AsyncSession, item: T) -> T:
        """
        Add the item and commit.

        A unique or foreign key violation rolls the session back and is
        reported as a ConflictError.
        """
        db.add(item)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning("Saving %s failed: %s", self.model.__name__, e.orig)
            raise ConflictError(f"{self.model.__name__} violates a unique constraint") from e
        await db.refresh(item)
        return item

    async def delete(self, db: AsyncSession, item: T) -> bool:
        try:
            await db.delete(item)
            await db.commit()
            return True
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError(f"{self.model.__name__} could not be deleted") from e
