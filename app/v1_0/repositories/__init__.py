from .base_repository import BaseRepository
from .customer_repository import CustomerRepository
from .order_repository import OrderRepository
__all__ = [
    "BaseRepository",
    "CustomerRepository",
    "OrderRepository",
]
