from datetime import datetime
from typing import List, Optional
from .base import CamelDTO

class CustomerDTO(CamelDTO):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    balance: float = 0.0
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class CustomerStatsDTO(CamelDTO):
    """A customer_stats row: base contact fields plus order totals."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    balance: float = 0.0
    total_orders: int = 0
    total_spent: float = 0.0
    last_order_date: Optional[datetime] = None

class CustomerStatsPageDTO(CamelDTO):
    items: List[CustomerStatsDTO]
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

class DeleteResultDTO(CamelDTO):
    success: bool
    message: str
