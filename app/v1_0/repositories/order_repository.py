from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.v1_0.models import Order
from .base_repository import BaseRepository

class OrderRepository(BaseRepository[Order]):
    def __init__(self) -> None:
        super().__init__(Order)

    async def list_total_amounts(self, session: AsyncSession) -> List[Optional[float]]:
        """
        Projection of orders.total_amount only, one value per order.
        """
        res = await session.execute(select(Order.total_amount))
        return list(res.scalars().all())
