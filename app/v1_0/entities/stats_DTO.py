from .base import CamelDTO

class DashboardStatsDTO(CamelDTO):
    total_customers: int
    total_orders: int
    total_revenue: float
    avg_order_value: float
