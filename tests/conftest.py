"""Shared fixtures for the finance tracker tests."""

from datetime import date
from decimal import Decimal
from typing import List, Tuple

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from components.budget.memory import InMemoryBudgetRepository
from components.core.config import Settings
from components.core.database import DatabaseManager
from components.core.errors import EmailDeliveryError
from components.core.init_db import create_tables, drop_tables
from components.core.services import Services, build_services
from components.goal.memory import InMemoryGoalRepository
from components.notification.email_sink import EmailSink
from components.transaction.memory import InMemoryTransactionRepository
from components.transaction.schemas import TransactionCreate, TransactionType
from components.user.memory import InMemoryUserRepository
from components.user.schemas import UserCreate

TODAY = date(2025, 3, 15)


class RecordingEmailSink(EmailSink):
    """Keeps every sent email in memory."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str, str]] = []

    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        self.sent.append((recipient, subject, body))


class FailingEmailSink(EmailSink):
    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        raise EmailDeliveryError("SMTP server unavailable")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def transaction_repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def budget_repository() -> InMemoryBudgetRepository:
    return InMemoryBudgetRepository()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def email_sink() -> RecordingEmailSink:
    return RecordingEmailSink()


@pytest.fixture
def services(
    user_repository, transaction_repository, budget_repository, goal_repository, email_sink
) -> Services:
    """All services over in-memory repositories, with 'today' pinned to TODAY."""
    return build_services(
        user_repository=user_repository,
        transaction_repository=transaction_repository,
        budget_repository=budget_repository,
        goal_repository=goal_repository,
        email_sink=email_sink,
        today=lambda: TODAY,
    )


@pytest.fixture
async def user(user_repository):
    return await user_repository.save(
        UserCreate(name="Alice", email="alice@example.com", password="hashed-secret")
    )


@pytest.fixture
def add_transaction(transaction_repository):
    """Factory storing a transaction for a user."""

    async def _add(user_id, amount, type, on=TODAY, category="General", description=None):
        return await transaction_repository.save(
            TransactionCreate(
                user_id=user_id,
                amount=Decimal(amount),
                category=category,
                date=on,
                description=description,
                type=TransactionType(type),
            )
        )

    return _add


@pytest.fixture
async def db_session():
    """AsyncSession on a fresh in-memory SQLite schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db_manager = DatabaseManager(Settings(), engine=engine)
    await create_tables(engine)
    async with db_manager.get_db() as session:
        yield session
    await drop_tables(engine)
    await db_manager.dispose()
