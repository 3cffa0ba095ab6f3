"""
customer_stats: read-time projection of every customer joined to its order totals.

It is a selectable rather than a stored view, so each query recomputes
the totals from ``orders`` and they can never go stale.
"""
from sqlalchemy import Select, func, select, literal

from .customer import Customer
from .order import Order


def customer_stats_select() -> Select:
    return (
        select(
            Customer.id.label("id"),
            (Customer.first_name + literal(" ") + Customer.last_name).label("customer_name"),
            Customer.first_name.label("first_name"),
            Customer.last_name.label("last_name"),
            Customer.email.label("email"),
            Customer.phone.label("phone"),
            Customer.balance.label("balance"),
            func.count(Order.id).label("total_orders"),
            func.coalesce(func.sum(Order.total_amount), 0).label("total_spent"),
            func.max(Order.created_at).label("last_order_date"),
        )
        .select_from(Customer)
        .outerjoin(Order, Order.customer_id == Customer.id)
        .group_by(
            Customer.id,
            Customer.first_name,
            Customer.last_name,
            Customer.email,
            Customer.phone,
            Customer.balance,
        )
    )


customer_stats = customer_stats_select().subquery("customer_stats")
