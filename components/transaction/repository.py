"""Repository for transaction operations."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.transaction.models import Transaction
from components.transaction import schemas


class TransactionRepository(ABC):
    """Persistence contract for transactions."""

    @abstractmethod
    async def save(self, transaction: schemas.TransactionCreate) -> schemas.Transaction:
        ...

    @abstractmethod
    async def update(self, transaction: schemas.Transaction) -> bool:
        ...

    @abstractmethod
    async def delete(self, transaction_id: int) -> bool:
        ...

    @abstractmethod
    async def find_by_id(self, transaction_id: int) -> Optional[schemas.Transaction]:
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> List[schemas.Transaction]:
        ...

    @abstractmethod
    async def find_by_user_id_and_transaction_id(
        self, user_id: int, transaction_id: int
    ) -> Optional[schemas.Transaction]:
        ...

    @abstractmethod
    async def find_filtered(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        category: Optional[str] = None,
        type: Optional[schemas.TransactionType] = None,
    ) -> List[schemas.Transaction]:
        """Transactions of the user matching every filter that is not None; dates inclusive."""

    @abstractmethod
    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Transaction]:
        ...

    @abstractmethod
    async def count_by_user_id(self, user_id: int) -> int:
        ...


class SqlTransactionRepository(TransactionRepository):
    """Transaction repository backed by a SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def save(self, transaction: schemas.TransactionCreate) -> schemas.Transaction:
        """Create a new transaction."""
        db_transaction = Transaction(
            user_id=transaction.user_id,
            amount=transaction.amount,
            category=transaction.category,
            date=transaction.date,
            description=transaction.description,
            type=transaction.type.value,
        )
        self.session.add(db_transaction)
        await self.session.commit()
        await self.session.refresh(db_transaction)
        return schemas.Transaction.model_validate(db_transaction)

    async def update(self, transaction: schemas.Transaction) -> bool:
        """Update the mutable fields of a transaction."""
        db_transaction = await self.session.get(Transaction, transaction.id)
        if not db_transaction:
            return False

        db_transaction.amount = transaction.amount
        db_transaction.category = transaction.category
        db_transaction.date = transaction.date
        db_transaction.description = transaction.description

        await self.session.commit()
        return True

    async def delete(self, transaction_id: int) -> bool:
        """Delete transaction by ID."""
        db_transaction = await self.session.get(Transaction, transaction_id)
        if not db_transaction:
            return False

        await self.session.delete(db_transaction)
        await self.session.commit()
        return True

    async def find_by_id(self, transaction_id: int) -> Optional[schemas.Transaction]:
        """Get transaction by ID."""
        db_transaction = await self.session.get(Transaction, transaction_id)
        return schemas.Transaction.model_validate(db_transaction) if db_transaction else None

    async def find_by_user_id(self, user_id: int) -> List[schemas.Transaction]:
        """Get all transactions of a user."""
        return await self.find_filtered(user_id)

    async def find_by_user_id_and_transaction_id(
        self, user_id: int, transaction_id: int
    ) -> Optional[schemas.Transaction]:
        """Get a transaction only if it belongs to the user."""
        result = await self.session.execute(
            select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
        )
        db_transaction = result.scalar_one_or_none()
        return schemas.Transaction.model_validate(db_transaction) if db_transaction else None

    async def find_filtered(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        category: Optional[str] = None,
        type: Optional[schemas.TransactionType] = None,
    ) -> List[schemas.Transaction]:
        """Get transactions of a user with optional filtering."""
        query = select(Transaction).where(Transaction.user_id == user_id)

        if date_from:
            query = query.where(Transaction.date >= date_from)
        if date_to:
            query = query.where(Transaction.date <= date_to)
        if category:
            query = query.where(Transaction.category == category)
        if type:
            query = query.where(Transaction.type == type.value)

        result = await self.session.execute(query.order_by(Transaction.id))
        return [schemas.Transaction.model_validate(t) for t in result.scalars().all()]

    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Transaction]:
        """Get one page of a user's transactions."""
        result = await self.session.execute(
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.id)
            .offset(offset)
            .limit(limit)
        )
        return [schemas.Transaction.model_validate(t) for t in result.scalars().all()]

    async def count_by_user_id(self, user_id: int) -> int:
        """Count a user's transactions."""
        result = await self.session.execute(
            select(func.count(Transaction.id)).where(Transaction.user_id == user_id)
        )
        return result.scalar_one()
