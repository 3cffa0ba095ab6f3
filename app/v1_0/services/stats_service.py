from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreFailureError
from app.core.logger import logger
from app.utils.tx import maybe_begin
from app.v1_0.repositories import CustomerRepository, OrderRepository
from app.v1_0.entities import DashboardStatsDTO
from app.v1_0.helper.money import round_currency, sum_amounts

class StatsService:
    """
    Dashboard snapshot recomputed from the store on every call.

    The customer count and the order amounts come from two separate
    queries, so the snapshot is not guaranteed to be a single instant.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        order_repository: OrderRepository,
    ) -> None:
        self.customer_repository = customer_repository
        self.order_repository = order_repository

    async def get_stats(self, db: AsyncSession) -> DashboardStatsDTO:
        logger.debug("[StatsService] Computing dashboard stats")
        try:
            async with maybe_begin(db):
                total_customers = await self.customer_repository.count(db)
                amounts = await self.order_repository.list_total_amounts(db)
        except SQLAlchemyError as e:
            logger.error(f"[StatsService] Stats query failed: {e}", exc_info=True)
            raise StoreFailureError("Failed to compute dashboard stats") from e

        total_orders = len(amounts)
        total_revenue = sum_amounts(amounts)
        avg_order_value = total_revenue / total_orders if total_orders > 0 else 0.0

        return DashboardStatsDTO(
            total_customers=total_customers,
            total_orders=total_orders,
            total_revenue=round_currency(total_revenue),
            avg_order_value=round_currency(avg_order_value),
        )
