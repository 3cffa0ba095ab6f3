from dependency_injector import containers, providers
from app.v1_0.repositories import (
    CustomerRepository,
    OrderRepository,
    )
from app.v1_0.services import (
    CustomerService,
    StatsService,
    )

class APIContainer(containers.DeclarativeContainer):
    customer_repository = providers.Singleton(CustomerRepository)
    order_repository = providers.Singleton(OrderRepository)

    customer_service = providers.Singleton(
        CustomerService,
        customer_repository = customer_repository
    )
    stats_service = providers.Singleton(
        StatsService,
        customer_repository = customer_repository,
        order_repository = order_repository
    )
