from typing import Any, Optional, Type, TypeVar, Generic
from sqlalchemy import Select, select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.v1_0.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def add(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        try:
            await session.flush()
        except IntegrityError:
            await session.rollback()
            raise
        return entity

    async def get_by_id(self, id_: Any, session: AsyncSession) -> Optional[ModelT]:
        stmt: Select = select(self.model).where(self.model.id == id_)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def count(self, session: AsyncSession) -> int:
        return int(await session.scalar(select(func.count()).select_from(self.model)) or 0)

    async def update_fields(
        self,
        entity: ModelT,
        data: dict[str, Any],
        session: AsyncSession,
        *,
        allow: set[str] | None = None,
    ) -> ModelT:
        for k, v in data.items():
            if allow and k not in allow:
                continue
            setattr(entity, k, v)
        await session.flush()
        return entity

    async def delete(self, entity: ModelT, session: AsyncSession) -> None:
        await session.delete(entity)
        await session.flush()
