"""Repository for budget operations."""

from abc import ABC, abstractmethod
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.models import Budget
from components.budget import schemas


class BudgetRepository(ABC):
    """Persistence contract for budgets; at most one budget per user."""

    @abstractmethod
    async def save(self, budget: schemas.BudgetCreate) -> bool:
        ...

    @abstractmethod
    async def update(self, budget: schemas.Budget) -> bool:
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Optional[schemas.Budget]:
        ...


class SqlBudgetRepository(BudgetRepository):
    """Budget repository backed by a SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def save(self, budget: schemas.BudgetCreate) -> bool:
        """Create the budget of a user."""
        self.session.add(
            Budget(
                user_id=budget.user_id,
                monthly_limit=budget.monthly_limit,
                current_expenses=budget.current_expenses,
            )
        )
        await self.session.commit()
        return True

    async def update(self, budget: schemas.Budget) -> bool:
        """Update limit and cached expenses of an existing budget."""
        db_budget = await self.session.get(Budget, budget.id)
        if not db_budget:
            return False

        db_budget.monthly_limit = budget.monthly_limit
        db_budget.current_expenses = budget.current_expenses
        await self.session.commit()
        return True

    async def find_by_user_id(self, user_id: int) -> Optional[schemas.Budget]:
        """Get the budget of a user."""
        result = await self.session.execute(
            select(Budget).where(Budget.user_id == user_id)
        )
        db_budget = result.scalar_one_or_none()
        return schemas.Budget.model_validate(db_budget) if db_budget else None
