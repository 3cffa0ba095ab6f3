from .customer_service import CustomerService
from .stats_service import StatsService
__all__=[
    "CustomerService",
    "StatsService",
    ]
