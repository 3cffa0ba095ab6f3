from typing import List
from math import ceil
from sqlalchemy import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AppError, CreateFailedError, NotFoundError, StoreFailureError
from app.core.logger import logger
from app.core.settings import settings
from app.utils.tx import maybe_begin
from app.v1_0.schemas import CustomerCreate, CustomerUpdate
from app.v1_0.repositories import CustomerRepository
from app.v1_0.models import Customer
from app.v1_0.models.customer import CUSTOMER_ID_MIN, CUSTOMER_ID_MAX
from app.v1_0.entities import CustomerDTO, CustomerStatsDTO, CustomerStatsPageDTO, DeleteResultDTO
from app.v1_0.helper.money import to_amount

def _to_dto(c: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=c.id,
        first_name=c.first_name,
        last_name=c.last_name,
        email=c.email,
        phone=c.phone,
        address=c.address,
        balance=to_amount(c.balance),
        notes=c.notes,
        created_at=c.created_at,
        updated_at=c.updated_at,
    )

def _to_stats_dto(row: Row) -> CustomerStatsDTO:
    m = row._mapping
    return CustomerStatsDTO(
        id=m["id"],
        name=m["customer_name"],
        email=m["email"],
        phone=m["phone"],
        balance=to_amount(m["balance"]),
        total_orders=int(m["total_orders"] or 0),
        total_spent=to_amount(m["total_spent"]),
        last_order_date=m["last_order_date"],
    )

class CustomerService:
    def __init__(self, customer_repository: CustomerRepository) -> None:
        self.customer_repository = customer_repository
        self.PAGE_SIZE = settings.PAGE_SIZE

    def _not_found(self, customer_id: int) -> NotFoundError:
        return NotFoundError(f"Customer with ID {customer_id} not found")

    def _check_id(self, customer_id: int) -> None:
        """
        Ids outside the PK range cannot exist; answer NOT_FOUND without a store call.
        """
        if not CUSTOMER_ID_MIN <= customer_id <= CUSTOMER_ID_MAX:
            raise self._not_found(customer_id)

    async def _require(self, customer_id: int, db: AsyncSession) -> Customer:
        """
        Ensure a customer exists or raise NotFoundError.
        """
        c = await self.customer_repository.get_customer_by_id(customer_id, db)
        if not c:
            raise self._not_found(customer_id)
        return c

    async def list_all(self, db: AsyncSession) -> List[CustomerStatsDTO]:
        """
        List every customer from the customer_stats projection, newest id first.

        Unbounded; use list_paginated when the table is large.

        Raises:
            StoreFailureError: If the query fails.
        """
        logger.debug("[CustomerService] List all customers")
        try:
            async with maybe_begin(db):
                rows = await self.customer_repository.list_with_stats(db)
        except SQLAlchemyError as e:
            logger.error(f"[CustomerService] List failed: {e}", exc_info=True)
            raise StoreFailureError("Failed to fetch customers") from e
        return [_to_stats_dto(r) for r in rows]

    async def list_paginated(self, page: int, db: AsyncSession) -> CustomerStatsPageDTO:
        """
        List customer_stats rows one page at a time (PAGE_SIZE per page, 1-based).
        """
        page_size = self.PAGE_SIZE
        offset = max(page - 1, 0) * page_size
        logger.debug(f"[CustomerService] List page={page} size={page_size}")

        try:
            async with maybe_begin(db):
                items, total = await self.customer_repository.list_with_stats_paginated(
                    offset=offset, limit=page_size, session=db
                )
        except SQLAlchemyError as e:
            logger.error(f"[CustomerService] List page failed: {e}", exc_info=True)
            raise StoreFailureError("Failed to fetch customers") from e

        total = int(total or 0)
        total_pages = max(1, ceil(total / page_size)) if total else 1

        return CustomerStatsPageDTO(
            items=[_to_stats_dto(r) for r in items],
            page=page,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )

    async def get(self, customer_id: int, db: AsyncSession) -> CustomerDTO:
        """
        Retrieve a single customer row by its identifier.

        Raises:
            NotFoundError: If no row matches.
            StoreFailureError: If the query fails.
        """
        logger.debug(f"[CustomerService] Get customer ID={customer_id}")
        self._check_id(customer_id)
        try:
            async with maybe_begin(db):
                c = await self._require(customer_id, db)
            return _to_dto(c)
        except SQLAlchemyError as e:
            logger.error(f"[CustomerService] Get failed ID={customer_id}: {e}", exc_info=True)
            raise StoreFailureError("Failed to fetch customer") from e

    async def get_stats(self, customer_id: int, db: AsyncSession) -> CustomerStatsDTO:
        logger.debug(f"[CustomerService] Get stats ID={customer_id}")
        self._check_id(customer_id)
        try:
            async with maybe_begin(db):
                row = await self.customer_repository.get_with_stats(customer_id, db)
        except SQLAlchemyError as e:
            logger.error(f"[CustomerService] Get stats failed ID={customer_id}: {e}", exc_info=True)
            raise StoreFailureError("Failed to fetch customer") from e
        if row is None:
            raise self._not_found(customer_id)
        return _to_stats_dto(row)

    async def create(self, payload: CustomerCreate, db: AsyncSession) -> CustomerDTO:
        """
        Create a new customer. Balance and timestamps take their defaults.

        Args:
            payload: Validated CustomerCreate data.
            db: Active async database session.

        Returns:
            CustomerDTO of the inserted row, including its new id.

        Raises:
            CreateFailedError: If the store rejects the insert. Not retried.
        """
        logger.info("[CustomerService] Creating customer: %s", payload.model_dump())

        if not db.in_transaction():
            await db.begin()
        try:
            c = await self.customer_repository.create_customer(payload, db)
            dto = _to_dto(c)
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.error("[CustomerService] Create failed: %s", e, exc_info=True)
            raise CreateFailedError("Failed to create customer") from e

        logger.info("[CustomerService] Customer created ID=%s", dto.id)
        return dto

    async def update_partial(
        self,
        customer_id: int,
        payload: CustomerUpdate,
        db: AsyncSession,
    ) -> CustomerDTO:
        """
        Apply only the fields present in the payload; updated_at is always refreshed.

        Raises:
            NotFoundError: If the customer does not exist.
            StoreFailureError: If the update fails.
        """
        logger.info(
            "[CustomerService] Update customer ID=%s data=%s",
            customer_id,
            payload.model_dump(exclude_unset=True),
        )
        self._check_id(customer_id)

        if not db.in_transaction():
            await db.begin()
        try:
            c = await self.customer_repository.update_customer(customer_id, payload, db)
            if not c:
                raise self._not_found(customer_id)
            dto = _to_dto(c)
            await db.commit()
        except AppError:
            await db.rollback()
            raise
        except Exception as e:
            await db.rollback()
            logger.error(
                "[CustomerService] Update failed ID=%s: %s",
                customer_id,
                e,
                exc_info=True,
            )
            raise StoreFailureError("Failed to update customer") from e

        return dto

    async def delete(self, customer_id: int, db: AsyncSession) -> DeleteResultDTO:
        """
        Delete a customer by its identifier.

        A missing row is NOT_FOUND; any other store rejection (for example
        orders still referencing the customer) is STORE_FAILURE.
        """
        logger.warning("[CustomerService] Delete customer ID=%s", customer_id)
        self._check_id(customer_id)

        if not db.in_transaction():
            await db.begin()
        try:
            ok = await self.customer_repository.delete_customer(customer_id, db)
            if not ok:
                raise self._not_found(customer_id)
            await db.commit()
        except AppError:
            await db.rollback()
            raise
        except Exception as e:
            await db.rollback()
            logger.error(
                "[CustomerService] Delete failed ID=%s: %s",
                customer_id,
                e,
                exc_info=True,
            )
            raise StoreFailureError("Failed to delete customer") from e

        return DeleteResultDTO(success=True, message="Customer deleted successfully")
