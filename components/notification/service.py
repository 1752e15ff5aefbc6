"""Notification engine: budget and goal status messages."""

import logging

from components.budget.repository import BudgetRepository
from components.budget.service import BudgetService
from components.core.errors import EmailDeliveryError
from components.core.money import HUNDRED, ZERO, YearMonth
from components.goal.service import GoalService
from components.notification.email_sink import EmailSink
from components.user.repository import UserRepository

logger = logging.getLogger(__name__)

NO_BUDGET_MESSAGE = "No budget set for user."
NO_GOALS_MESSAGE = "No goals set."
BUDGET_SUBJECT = "Budget Notification"
GOAL_SUBJECT = "Goal Notification"


class NotificationService:
    """
    Composes status messages and emails them to the user.

    Message generation depends only on the repositories. Email delivery is
    best-effort: a missing user, a missing address or a failing sink is
    logged and the message is still returned.
    """

    def __init__(
        self,
        budget_repository: BudgetRepository,
        user_repository: UserRepository,
        budget_service: BudgetService,
        goal_service: GoalService,
        email_sink: EmailSink,
    ):
        self.budget_repository = budget_repository
        self.user_repository = user_repository
        self.budget_service = budget_service
        self.goal_service = goal_service
        self.email_sink = email_sink

    async def fetch_budget_notification(self, user_id: int) -> str:
        budget = await self.budget_repository.find_by_user_id(user_id)
        if budget is None:
            return NO_BUDGET_MESSAGE

        month = YearMonth.of(self.budget_service.today())
        expenses = await self.budget_service.calculate_expenses_for_month(user_id, month)
        remaining = budget.monthly_limit - expenses
        if remaining < ZERO:
            message = f"🚨 Budget exceeded! Limit: {budget.monthly_limit}, Expenses: {expenses}"
        else:
            message = f"✅ Budget is under control. Remaining budget: {remaining}"

        await self._send(user_id, BUDGET_SUBJECT, message)
        return message

    async def fetch_goal_notification(self, user_id: int) -> str:
        goals = await self.goal_service.get_goals_by_user_id(user_id)
        if not goals:
            return NO_GOALS_MESSAGE

        lines = []
        for goal in goals:
            total_balance = await self.goal_service.calculate_total_balance(user_id, goal)
            progress = goal.calculate_progress(total_balance)
            if progress >= HUNDRED:
                lines.append(
                    f"🎉 Goal achieved: '{goal.goal_name}'! "
                    f"Target: {goal.target_amount}, Balance: {total_balance}"
                )
            else:
                lines.append(f"⏳ Goal '{goal.goal_name}' progress: {progress}%")
        message = "\n".join(lines).strip()

        await self._send(user_id, GOAL_SUBJECT, message)
        return message

    async def _send(self, user_id: int, subject: str, body: str) -> None:
        user = await self.user_repository.find_by_id(user_id)
        if user is None or not user.email:
            logger.warning("No email address for user %s, %s not sent", user_id, subject)
            return
        try:
            await self.email_sink.send_email(user.email, subject, body)
        except EmailDeliveryError:
            logger.exception("Failed to send %s to user %s", subject, user_id)
