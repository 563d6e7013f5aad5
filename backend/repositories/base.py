from __future__ import annotations

from typing import ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository bound to one model class.

    No commits are performed here - commit responsibility is left to the
    service layer.
    """

    model: ClassVar[Type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, entity: T) -> T:
        """Add an entity to the session (not committed)."""
        self.session.add(entity)
        return entity

    async def get_by_id(self, id_value: str | int) -> Optional[T]:
        """Get an entity by its primary key."""
        return await self.session.get(self.model, id_value)  # type: ignore[return-value]

    async def list(self, limit: int = 100, offset: int = 0) -> List[T]:
        """List entities with pagination (store order)."""
        stmt = select(self.model).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())  # type: ignore[arg-type]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
