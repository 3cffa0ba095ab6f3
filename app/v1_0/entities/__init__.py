from .base import CamelDTO
from .customer_DTO import CustomerDTO, CustomerStatsDTO, CustomerStatsPageDTO, DeleteResultDTO
from .stats_DTO import DashboardStatsDTO


__all__ = [
    "CamelDTO",
    "CustomerDTO", "CustomerStatsDTO", "CustomerStatsPageDTO", "DeleteResultDTO",
    "DashboardStatsDTO",
]
