from typing import Optional, List, Tuple
from sqlalchemy import Row, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.v1_0.models import Customer, customer_stats
from app.v1_0.models.base import utcnow
from app.v1_0.schemas import CustomerCreate, CustomerUpdate
from .base_repository import BaseRepository

class CustomerRepository(BaseRepository[Customer]):
    EDITABLE_FIELDS = {"first_name", "last_name", "email", "phone", "address", "notes"}

    def __init__(self):
        super().__init__(Customer)

    async def create_customer(self, payload: CustomerCreate, session: AsyncSession) -> Customer:
        c = Customer(**payload.to_row())
        await self.add(c, session)
        return c

    async def get_customer_by_id(self, customer_id: int, session: AsyncSession) -> Optional[Customer]:
        return await super().get_by_id(customer_id, session)

    async def update_customer(self, customer_id: int, payload: CustomerUpdate, session: AsyncSession) -> Optional[Customer]:
        c = await self.get_customer_by_id(customer_id, session)
        if not c:
            return None

        data = payload.changes()
        # updated_at se refresca aunque no cambie ningún campo
        data["updated_at"] = utcnow()
        return await self.update_fields(c, data, session, allow=self.EDITABLE_FIELDS | {"updated_at"})

    async def delete_customer(self, customer_id: int, session: AsyncSession) -> bool:
        c = await self.get_customer_by_id(customer_id, session)
        if not c:
            return False
        await self.delete(c, session)
        return True

    async def list_with_stats(self, session: AsyncSession) -> List[Row]:
        stmt = select(customer_stats).order_by(customer_stats.c.id.desc())
        return list((await session.execute(stmt)).all())

    async def list_with_stats_paginated(
    self, offset: int, limit: int, session: AsyncSession
    ) -> Tuple[List[Row], int]:
        stmt = (
            select(customer_stats)
            .order_by(customer_stats.c.id.desc())
            .offset(offset)
            .limit(limit)
        )
        items: List[Row] = list((await session.execute(stmt)).all())
        total: int = (await session.scalar(select(func.count(Customer.id)))) or 0
        return items, total

    async def get_with_stats(self, customer_id: int, session: AsyncSession) -> Optional[Row]:
        stmt = select(customer_stats).where(customer_stats.c.id == customer_id)
        return (await session.execute(stmt)).first()
