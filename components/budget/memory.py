"""In-memory budget repository."""

import itertools
from typing import Dict, Optional

from components.budget import schemas
from components.budget.repository import BudgetRepository


class InMemoryBudgetRepository(BudgetRepository):
    """Budgets keyed by owning user."""

    def __init__(self) -> None:
        self._budgets: Dict[int, schemas.Budget] = {}
        self._ids = itertools.count(1)

    async def save(self, budget: schemas.BudgetCreate) -> bool:
        if budget.user_id in self._budgets:
            return False
        self._budgets[budget.user_id] = schemas.Budget(id=next(self._ids), **budget.model_dump())
        return True

    async def update(self, budget: schemas.Budget) -> bool:
        current = self._budgets.get(budget.user_id)
        if current is None or current.id != budget.id:
            return False
        self._budgets[budget.user_id] = budget
        return True

    async def find_by_user_id(self, user_id: int) -> Optional[schemas.Budget]:
        return self._budgets.get(user_id)
