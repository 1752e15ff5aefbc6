"""Service for recording and editing transactions."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from components.core.errors import NotFoundError, ValidationError
from components.core.money import ZERO
from components.core.schemas import PaginatedResponse, validate_pagination
from components.transaction import schemas
from components.transaction.repository import TransactionRepository

logger = logging.getLogger(__name__)


def _validate_fields(amount: Decimal, category: str) -> None:
    if amount is None or amount < ZERO:
        raise ValidationError("Amount must be non-negative.")
    if not category:
        raise ValidationError("Category must not be empty.")


class TransactionService:

    def __init__(self, transaction_repository: TransactionRepository):
        self.transaction_repository = transaction_repository

    async def create_transaction(
        self,
        user_id: int,
        amount: Decimal,
        category: str,
        date: date,
        description: Optional[str],
        type: schemas.TransactionType,
    ) -> schemas.Transaction:
        _validate_fields(amount, category)
        try:
            type = schemas.TransactionType(type)
        except ValueError:
            raise ValidationError(f"Unknown transaction type: {type}") from None

        transaction = await self.transaction_repository.save(
            schemas.TransactionCreate(
                user_id=user_id,
                amount=amount,
                category=category,
                date=date,
                description=description,
                type=type,
            )
        )
        logger.info("User %s recorded %s transaction %s", user_id, type.value, transaction.id)
        return transaction

    async def get_transaction(self, transaction_id: int) -> Optional[schemas.Transaction]:
        return await self.transaction_repository.find_by_id(transaction_id)

    async def get_transaction_by_user_id_and_transaction_id(
        self, user_id: int, transaction_id: int
    ) -> Optional[schemas.Transaction]:
        return await self.transaction_repository.find_by_user_id_and_transaction_id(user_id, transaction_id)

    async def update_transaction(
        self,
        transaction_id: int,
        user_id: int,
        amount: Decimal,
        category: str,
        date: date,
        description: Optional[str],
    ) -> bool:
        """Replace the editable fields; owner and type never change."""
        transaction = await self.transaction_repository.find_by_user_id_and_transaction_id(
            user_id, transaction_id
        )
        if transaction is None:
            raise NotFoundError(f"Transaction {transaction_id} not found for user {user_id}.")
        _validate_fields(amount, category)

        updated = transaction.model_copy(
            update={"amount": amount, "category": category, "date": date, "description": description}
        )
        return await self.transaction_repository.update(updated)

    async def delete_transaction(self, user_id: int, transaction_id: int) -> bool:
        transaction = await self.transaction_repository.find_by_user_id_and_transaction_id(
            user_id, transaction_id
        )
        if transaction is None:
            return False
        return await self.transaction_repository.delete(transaction_id)

    async def get_filtered_transactions(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        category: Optional[str] = None,
        type: Optional[schemas.TransactionType] = None,
    ) -> List[schemas.Transaction]:
        if date_from and date_to and date_from > date_to:
            raise ValidationError("Start date must not be after end date.")
        return await self.transaction_repository.find_filtered(user_id, date_from, date_to, category, type)

    async def get_paginated_transactions_for_user(
        self, user_id: int, page: int, size: int
    ) -> PaginatedResponse[schemas.Transaction]:
        offset = validate_pagination(page, size)
        transactions = await self.transaction_repository.find_paginated(user_id, offset, size)
        total = await self.transaction_repository.count_by_user_id(user_id)
        return PaginatedResponse[schemas.Transaction].build(transactions, total, page, size)
