"""Budget engine: monthly limits and expense aggregation."""

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from components.budget import schemas
from components.budget.repository import BudgetRepository
from components.core.errors import NotFoundError, RepositoryError, ValidationError
from components.core.money import ZERO, YearMonth, round_money, sum_amounts
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import TransactionType

logger = logging.getLogger(__name__)


class BudgetService:
    """
    Monthly budget management.

    Expenses are always recomputed from transactions; the budget's
    `current_expenses` column is a display cache and is never read here.
    """

    def __init__(
        self,
        budget_repository: BudgetRepository,
        transaction_repository: TransactionRepository,
        today: Callable[[], date] = date.today,
    ):
        self.budget_repository = budget_repository
        self.transaction_repository = transaction_repository
        self.today = today

    async def set_monthly_budget(self, user_id: int, limit: Decimal) -> schemas.Budget:
        """Create the user's budget or replace its limit."""
        if limit is None or limit <= ZERO:
            raise ValidationError("Monthly limit must be positive.")

        existing = await self.budget_repository.find_by_user_id(user_id)
        if existing is not None:
            success = await self.budget_repository.update(existing.model_copy(update={"monthly_limit": limit}))
        else:
            success = await self.budget_repository.save(
                schemas.BudgetCreate(user_id=user_id, monthly_limit=limit, current_expenses=ZERO)
            )

        budget = await self.budget_repository.find_by_user_id(user_id) if success else None
        if budget is None:
            raise RepositoryError(f"Budget for user {user_id} could not be saved.")
        logger.info("User %s set monthly budget to %s", user_id, limit)
        return budget

    async def get_budget(self, user_id: int) -> Optional[schemas.Budget]:
        return await self.budget_repository.find_by_user_id(user_id)

    async def calculate_expenses_for_month(self, user_id: int, year_month: YearMonth) -> Decimal:
        """Sum of the user's EXPENSE transactions dated within the month."""
        transactions = await self.transaction_repository.find_filtered(
            user_id,
            year_month.first_day,
            year_month.last_day,
            None,
            TransactionType.EXPENSE,
        )
        return sum_amounts(t.amount for t in transactions)

    async def get_budget_data(self, user_id: int) -> schemas.BudgetData:
        budget = await self.get_budget(user_id)
        if budget is None:
            raise NotFoundError("No budget set for the user.")

        month = YearMonth.of(self.today())
        expenses = await self.calculate_expenses_for_month(user_id, month)
        return schemas.BudgetData(
            budget=budget,
            month=str(month),
            current_expenses=expenses,
            remaining=budget.monthly_limit - expenses,
            formatted_budget=f"Budget: {round_money(expenses)}/{round_money(budget.monthly_limit)}",
        )
