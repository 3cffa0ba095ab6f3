from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from app.storage.database.db_connector import get_db
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.entities import DashboardStatsDTO
from app.v1_0.services import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get(
    "",
    response_model=DashboardStatsDTO,
    status_code=status.HTTP_200_OK,
    summary="Get dashboard statistics",
    description="Total customers, orders, revenue and average order value.",
)
@inject
async def get_dashboard_stats(
    db: AsyncSession = Depends(get_db),
    service: StatsService = Depends(
        Provide[ApplicationContainer.api_container.stats_service]
    ),
) -> DashboardStatsDTO:
    logger.info("[StatsRouter] get_stats")
    return await service.get_stats(db)
