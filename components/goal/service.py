"""Goal engine: savings goals, balances and progress."""

import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, List, Optional

from components.core.errors import NotFoundError, ValidationError
from components.core.money import ZERO, sum_amounts
from components.core.schemas import PaginatedResponse, validate_pagination
from components.goal import schemas
from components.goal.repository import GoalRepository
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import TransactionType

logger = logging.getLogger(__name__)


class BalanceWindow(str, Enum):
    """Which transactions count toward a goal's balance."""
    ALL_TIME = "all_time"  # the user's whole history, shared by every goal
    GOAL_PERIOD = "goal_period"  # only transactions between start_time and end_date


def _validate_fields(goal_name: str, target_amount: Decimal, duration: int) -> None:
    if not goal_name:
        raise ValidationError("Goal name must not be empty.")
    if target_amount is None or target_amount <= ZERO:
        raise ValidationError("Target amount must be positive.")
    if duration is None or duration <= 0:
        raise ValidationError("Duration must be a positive integer.")


class GoalService:

    def __init__(
        self,
        goal_repository: GoalRepository,
        transaction_repository: TransactionRepository,
        balance_window: BalanceWindow = BalanceWindow.ALL_TIME,
        today: Callable[[], date] = date.today,
    ):
        self.goal_repository = goal_repository
        self.transaction_repository = transaction_repository
        self.balance_window = BalanceWindow(balance_window)
        self.today = today

    async def create_goal(
        self,
        user_id: int,
        goal_name: str,
        target_amount: Decimal,
        duration: int,
        start_time: Optional[date] = None,
    ) -> schemas.Goal:
        _validate_fields(goal_name, target_amount, duration)
        await self._ensure_unique_name(user_id, goal_name)

        goal = await self.goal_repository.save(
            schemas.GoalCreate(
                user_id=user_id,
                goal_name=goal_name,
                target_amount=target_amount,
                duration=duration,
                start_time=start_time or self.today(),
            )
        )
        logger.info("User %s created goal %s (%s)", user_id, goal.id, goal_name)
        return goal

    async def get_goal(self, goal_id: int) -> Optional[schemas.Goal]:
        return await self.goal_repository.find_by_id(goal_id)

    async def get_goal_by_user_id_and_goal_id(self, user_id: int, goal_id: int) -> Optional[schemas.Goal]:
        return await self.goal_repository.find_by_user_id_and_goal_id(user_id, goal_id)

    async def get_goals_by_user_id(self, user_id: int) -> List[schemas.Goal]:
        return await self.goal_repository.find_by_user_id(user_id)

    async def get_paginated_goals_for_user(
        self, user_id: int, page: int, size: int
    ) -> PaginatedResponse[schemas.Goal]:
        offset = validate_pagination(page, size)
        goals = await self.goal_repository.find_paginated(user_id, offset, size)
        total = await self.goal_repository.count_by_user_id(user_id)
        return PaginatedResponse[schemas.Goal].build(goals, total, page, size)

    async def update_goal(
        self,
        goal_id: int,
        user_id: int,
        goal_name: str,
        target_amount: Decimal,
        duration: int,
    ) -> bool:
        goal = await self.goal_repository.find_by_user_id_and_goal_id(user_id, goal_id)
        if goal is None:
            raise NotFoundError(f"Goal {goal_id} not found for user {user_id}.")
        _validate_fields(goal_name, target_amount, duration)
        if goal_name != goal.goal_name:
            await self._ensure_unique_name(user_id, goal_name)

        updated = goal.model_copy(
            update={"goal_name": goal_name, "target_amount": target_amount, "duration": duration}
        )
        return await self.goal_repository.update(updated)

    async def delete_goal(self, user_id: int, goal_id: int) -> bool:
        goal = await self.goal_repository.find_by_user_id_and_goal_id(user_id, goal_id)
        if goal is None:
            return False
        deleted = await self.goal_repository.delete(goal_id)
        if deleted:
            logger.info("User %s deleted goal %s", user_id, goal_id)
        return deleted

    async def calculate_total_balance(self, user_id: int, goal: schemas.Goal) -> Decimal:
        """
        Net savings (income minus expense) counted toward the goal.

        With BalanceWindow.ALL_TIME every goal of a user sees the same
        balance. With BalanceWindow.GOAL_PERIOD only transactions dated
        inside the goal's own period count.
        """
        if self.balance_window is BalanceWindow.GOAL_PERIOD:
            transactions = await self.transaction_repository.find_filtered(
                user_id, goal.start_time, goal.end_date
            )
        else:
            transactions = await self.transaction_repository.find_by_user_id(user_id)

        income = sum_amounts(t.amount for t in transactions if t.type == TransactionType.INCOME)
        expense = sum_amounts(t.amount for t in transactions if t.type == TransactionType.EXPENSE)
        return income - expense

    def calculate_progress(self, goal: schemas.Goal, total_balance: Optional[Decimal]) -> Decimal:
        return goal.calculate_progress(total_balance)

    async def _ensure_unique_name(self, user_id: int, goal_name: str) -> None:
        goals = await self.goal_repository.find_by_user_id(user_id)
        if any(g.goal_name == goal_name for g in goals):
            raise ValidationError(f"Goal '{goal_name}' already exists.")
