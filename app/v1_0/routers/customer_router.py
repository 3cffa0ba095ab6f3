from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from app.storage.database.db_connector import get_db
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import CustomerCreate, CustomerUpdate
from app.v1_0.entities import CustomerDTO, CustomerStatsDTO, CustomerStatsPageDTO, DeleteResultDTO
from app.v1_0.services import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])

@router.get(
    "",
    response_model=List[CustomerStatsDTO],
    summary="Get all customers",
)
@inject
async def list_customers(
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.debug("[CustomerRouter] list_all")
    return await service.list_all(db)

@router.get(
    "/page",
    response_model=CustomerStatsPageDTO,
    summary="List customers paginated",
)
@inject
async def list_customers_paginated(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.debug(f"[CustomerRouter] list_paginated page={page}")
    return await service.list_paginated(page, db)

@router.get(
    "/{customer_id}",
    response_model=CustomerDTO,
    summary="Get customer by ID",
    responses={404: {"description": "Customer not found"}},
)
@inject
async def get_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.debug(f"[CustomerRouter] get id={customer_id}")
    return await service.get(customer_id, db)

@router.get(
    "/{customer_id}/stats",
    response_model=CustomerStatsDTO,
    summary="Get customer with order totals",
    responses={404: {"description": "Customer not found"}},
)
@inject
async def get_customer_stats(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.debug(f"[CustomerRouter] get_stats id={customer_id}")
    return await service.get_stats(customer_id, db)

@router.post(
    "",
    response_model=CustomerDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer",
)
@inject
async def create_customer(
    request: CustomerCreate,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> CustomerDTO:
    logger.info(
        "[CustomerRouter] create payload=%s",
        request.model_dump(),
    )
    return await service.create(payload=request, db=db)

@router.put(
    "/{customer_id}",
    response_model=CustomerDTO,
    summary="Update a customer",
    responses={404: {"description": "Customer not found"}},
)
@inject
async def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> CustomerDTO:
    logger.info(
        "[CustomerRouter] update id=%s data=%s",
        customer_id,
        data.model_dump(exclude_unset=True),
    )
    return await service.update_partial(
        customer_id=customer_id,
        payload=data,
        db=db,
    )

@router.delete(
    "",
    response_model=DeleteResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Delete a customer",
    responses={404: {"description": "Customer not found"}},
)
@inject
async def delete_customer(
    customer_id: int = Query(..., alias="id", description="Customer ID"),
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> DeleteResultDTO:
    logger.warning(
        "[CustomerRouter] delete id=%s",
        customer_id,
    )
    return await service.delete(customer_id=customer_id, db=db)
