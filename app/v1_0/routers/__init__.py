from .customer_router import router as customer_router
from .stats_router import router as stats_router
defined_routers = [
    customer_router,
    stats_router,
    ]
