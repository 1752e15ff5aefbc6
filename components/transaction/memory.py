"""In-memory transaction repository."""

import itertools
from datetime import date
from typing import Dict, List, Optional

from components.transaction import schemas
from components.transaction.repository import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """Dictionary-backed transaction store."""

    def __init__(self) -> None:
        self._transactions: Dict[int, schemas.Transaction] = {}
        self._ids = itertools.count(1)

    async def save(self, transaction: schemas.TransactionCreate) -> schemas.Transaction:
        stored = schemas.Transaction(id=next(self._ids), **transaction.model_dump())
        self._transactions[stored.id] = stored
        return stored

    async def update(self, transaction: schemas.Transaction) -> bool:
        if transaction.id not in self._transactions:
            return False
        self._transactions[transaction.id] = transaction
        return True

    async def delete(self, transaction_id: int) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    async def find_by_id(self, transaction_id: int) -> Optional[schemas.Transaction]:
        return self._transactions.get(transaction_id)

    async def find_by_user_id(self, user_id: int) -> List[schemas.Transaction]:
        return [t for t in self._ordered() if t.user_id == user_id]

    async def find_by_user_id_and_transaction_id(
        self, user_id: int, transaction_id: int
    ) -> Optional[schemas.Transaction]:
        transaction = self._transactions.get(transaction_id)
        if transaction is None or transaction.user_id != user_id:
            return None
        return transaction

    async def find_filtered(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        category: Optional[str] = None,
        type: Optional[schemas.TransactionType] = None,
    ) -> List[schemas.Transaction]:
        return [
            t for t in self._ordered()
            if t.user_id == user_id
            and (date_from is None or t.date >= date_from)
            and (date_to is None or t.date <= date_to)
            and (category is None or t.category == category)
            and (type is None or t.type == type)
        ]

    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Transaction]:
        transactions = await self.find_by_user_id(user_id)
        return transactions[offset:offset + limit]

    async def count_by_user_id(self, user_id: int) -> int:
        return len(await self.find_by_user_id(user_id))

    def _ordered(self) -> List[schemas.Transaction]:
        return [self._transactions[key] for key in sorted(self._transactions)]
