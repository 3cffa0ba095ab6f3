from .base import Base
from .customer import Customer
from .order import Order
from .customer_stats import customer_stats
__all__ = [
    "Base",
    "Customer",
    "Order",
    "customer_stats",
]
