"""Explicit wiring of repositories and services."""

from dataclasses import dataclass
from datetime import date
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.repository import BudgetRepository, SqlBudgetRepository
from components.budget.service import BudgetService
from components.core.config import Settings
from components.goal.repository import GoalRepository, SqlGoalRepository
from components.goal.service import BalanceWindow, GoalService
from components.notification.email_sink import EmailSink
from components.notification.service import NotificationService
from components.report.service import ReportService
from components.transaction.repository import SqlTransactionRepository, TransactionRepository
from components.transaction.service import TransactionService
from components.user.repository import SqlUserRepository, UserRepository
from components.user.service import AdminService, UserService


@dataclass
class Services:
    """Every service of the application, sharing one set of repositories."""
    users: UserService
    admin: AdminService
    transactions: TransactionService
    budgets: BudgetService
    goals: GoalService
    reports: ReportService
    notifications: NotificationService


def build_services(
    user_repository: UserRepository,
    transaction_repository: TransactionRepository,
    budget_repository: BudgetRepository,
    goal_repository: GoalRepository,
    email_sink: EmailSink,
    balance_window: BalanceWindow = BalanceWindow.ALL_TIME,
    today: Callable[[], date] = date.today,
) -> Services:
    """Construct the services over the given repositories."""
    budgets = BudgetService(budget_repository, transaction_repository, today=today)
    goals = GoalService(goal_repository, transaction_repository, balance_window=balance_window, today=today)
    return Services(
        users=UserService(user_repository),
        admin=AdminService(user_repository, transaction_repository),
        transactions=TransactionService(transaction_repository),
        budgets=budgets,
        goals=goals,
        reports=ReportService(transaction_repository),
        notifications=NotificationService(budget_repository, user_repository, budgets, goals, email_sink),
    )


def build_sql_services(session: AsyncSession, settings: Settings, email_sink: EmailSink) -> Services:
    """Construct the services over SQL repositories sharing one session."""
    return build_services(
        user_repository=SqlUserRepository(session),
        transaction_repository=SqlTransactionRepository(session),
        budget_repository=SqlBudgetRepository(session),
        goal_repository=SqlGoalRepository(session),
        email_sink=email_sink,
        balance_window=BalanceWindow(settings.GOAL_BALANCE_WINDOW),
    )
