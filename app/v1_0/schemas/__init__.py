from .customer_schema import CustomerCreate, CustomerUpdate
__all__ = [
    "CustomerCreate", "CustomerUpdate",
]
