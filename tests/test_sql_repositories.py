"""Tests for the SQLAlchemy repositories on an in-memory SQLite database."""

from datetime import date
from decimal import Decimal

import pytest

from components.budget.repository import SqlBudgetRepository
from components.budget.schemas import BudgetCreate
from components.core.config import Settings
from components.core.errors import ConflictError
from components.core.services import build_sql_services
from components.goal.repository import SqlGoalRepository
from components.goal.schemas import GoalCreate
from components.transaction.repository import SqlTransactionRepository
from components.transaction.schemas import TransactionCreate, TransactionType
from components.user.repository import SqlUserRepository
from components.user.schemas import Role, UserCreate

from conftest import RecordingEmailSink


@pytest.fixture
async def stored_user(db_session):
    return await SqlUserRepository(db_session).save(
        UserCreate(name="Alice", email="alice@example.com", password="hashed-secret")
    )


class TestSqlUserRepository:
    async def test_save_sets_defaults(self, db_session, stored_user) -> None:
        assert stored_user.id is not None
        assert stored_user.blocked is False
        assert stored_user.role is Role.USER
        assert stored_user.version == 1

    async def test_update_checks_and_bumps_version(self, db_session, stored_user) -> None:
        repo = SqlUserRepository(db_session)
        assert await repo.update(stored_user.model_copy(update={"blocked": True})) is True

        reloaded = await repo.find_by_id(stored_user.id)
        assert reloaded.blocked is True
        assert reloaded.version == 2

        # Writing again with the version read before the first update fails
        assert await repo.update(stored_user.model_copy(update={"name": "Stale"})) is False
        assert (await repo.find_by_id(stored_user.id)).name == "Alice"

    async def test_find_by_email_and_count(self, db_session, stored_user) -> None:
        repo = SqlUserRepository(db_session)
        assert (await repo.find_by_email("alice@example.com")).id == stored_user.id
        assert await repo.find_by_email("nobody@example.com") is None
        assert await repo.count() == 1
        assert [u.id for u in await repo.find_all(0, 10)] == [stored_user.id]

    async def test_delete(self, db_session, stored_user) -> None:
        repo = SqlUserRepository(db_session)
        assert await repo.delete(stored_user.id) is True
        assert await repo.find_by_id(stored_user.id) is None
        assert await repo.delete(stored_user.id) is False


class TestSqlTransactionRepository:
    async def _seed(self, repo, user_id):
        rows = [
            ("10.00", "Food", date(2025, 3, 1), TransactionType.EXPENSE),
            ("20.00", "Rent", date(2025, 3, 31), TransactionType.EXPENSE),
            ("500.00", "Salary", date(2025, 3, 5), TransactionType.INCOME),
            ("7.00", "Food", date(2025, 4, 1), TransactionType.EXPENSE),
        ]
        for amount, category, on, type in rows:
            await repo.save(
                TransactionCreate(
                    user_id=user_id, amount=Decimal(amount), category=category, date=on, type=type
                )
            )

    async def test_find_filtered(self, db_session, stored_user) -> None:
        repo = SqlTransactionRepository(db_session)
        await self._seed(repo, stored_user.id)

        march_expenses = await repo.find_filtered(
            stored_user.id, date(2025, 3, 1), date(2025, 3, 31), None, TransactionType.EXPENSE
        )
        assert sorted(t.amount for t in march_expenses) == [Decimal("10.00"), Decimal("20.00")]

        food = await repo.find_filtered(stored_user.id, category="Food")
        assert len(food) == 2
        assert len(await repo.find_by_user_id(stored_user.id)) == 4

    async def test_ownership_lookup_and_pagination(self, db_session, stored_user) -> None:
        repo = SqlTransactionRepository(db_session)
        await self._seed(repo, stored_user.id)
        first = (await repo.find_by_user_id(stored_user.id))[0]

        assert await repo.find_by_user_id_and_transaction_id(stored_user.id, first.id) is not None
        assert await repo.find_by_user_id_and_transaction_id(stored_user.id + 1, first.id) is None
        assert len(await repo.find_paginated(stored_user.id, 2, 10)) == 2
        assert await repo.count_by_user_id(stored_user.id) == 4

    async def test_update_and_delete(self, db_session, stored_user) -> None:
        repo = SqlTransactionRepository(db_session)
        await self._seed(repo, stored_user.id)
        first = (await repo.find_by_user_id(stored_user.id))[0]

        assert await repo.update(first.model_copy(update={"category": "Dining"})) is True
        assert (await repo.find_by_id(first.id)).category == "Dining"
        assert await repo.delete(first.id) is True
        assert await repo.find_by_id(first.id) is None


class TestSqlBudgetAndGoalRepositories:
    async def test_budget_round_trip(self, db_session, stored_user) -> None:
        repo = SqlBudgetRepository(db_session)
        assert await repo.save(BudgetCreate(user_id=stored_user.id, monthly_limit=Decimal("500"))) is True

        budget = await repo.find_by_user_id(stored_user.id)
        assert budget.monthly_limit == Decimal("500")
        assert await repo.update(budget.model_copy(update={"monthly_limit": Decimal("800")})) is True
        assert (await repo.find_by_user_id(stored_user.id)).monthly_limit == Decimal("800")

    async def test_goal_round_trip(self, db_session, stored_user) -> None:
        repo = SqlGoalRepository(db_session)
        goal = await repo.save(
            GoalCreate(
                user_id=stored_user.id,
                goal_name="Vacation",
                target_amount=Decimal("3000"),
                duration=6,
                start_time=date(2025, 1, 1),
            )
        )
        assert await repo.find_by_user_id_and_goal_id(stored_user.id, goal.id) is not None
        assert await repo.find_by_user_id_and_goal_id(stored_user.id + 1, goal.id) is None
        assert await repo.update(goal.model_copy(update={"duration": 12})) is True
        assert (await repo.find_by_id(goal.id)).duration == 12
        assert await repo.count_by_user_id(stored_user.id) == 1
        assert await repo.delete(goal.id) is True
        assert await repo.find_by_user_id(stored_user.id) == []


class TestSqlServices:
    async def test_budget_notification_end_to_end(self, db_session, stored_user) -> None:
        sink = RecordingEmailSink()
        services = build_sql_services(db_session, Settings(), sink)

        await services.budgets.set_monthly_budget(stored_user.id, Decimal("500"))
        await services.transactions.create_transaction(
            stored_user.id, Decimal("600"), "Rent", date.today(), None, TransactionType.EXPENSE
        )

        message = await services.notifications.fetch_budget_notification(stored_user.id)
        assert message.startswith("🚨 Budget exceeded!")
        assert sink.sent[0][0] == "alice@example.com"
        assert "Budget exceeded" in sink.sent[0][2]

    async def test_stale_account_update_raises_conflict(self, db_session, stored_user) -> None:
        services = build_sql_services(db_session, Settings(), RecordingEmailSink())
        await services.admin.block_or_unblock_user(stored_user.id, True)
        with pytest.raises(ConflictError):
            await services.users.update_own_account(stored_user.id, "Alice", None, stored_user.version)
