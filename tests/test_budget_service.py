"""Tests for the budget engine."""

from datetime import date
from decimal import Decimal

import pytest

from components.core.errors import NotFoundError, ValidationError
from components.core.money import YearMonth


class TestSetMonthlyBudget:
    async def test_creates_budget_with_zero_expenses(self, services, user) -> None:
        budget = await services.budgets.set_monthly_budget(user.id, Decimal("500"))
        assert budget.user_id == user.id
        assert budget.monthly_limit == Decimal("500")
        assert budget.current_expenses == Decimal("0")

    async def test_second_call_overwrites_instead_of_duplicating(self, services, user) -> None:
        first = await services.budgets.set_monthly_budget(user.id, Decimal("500"))
        second = await services.budgets.set_monthly_budget(user.id, Decimal("750.50"))
        assert second.id == first.id
        assert (await services.budgets.get_budget(user.id)).monthly_limit == Decimal("750.50")

    @pytest.mark.parametrize("limit", [Decimal("0"), Decimal("-1"), None])
    async def test_non_positive_limit_is_rejected(self, services, user, limit) -> None:
        with pytest.raises(ValidationError, match="must be positive"):
            await services.budgets.set_monthly_budget(user.id, limit)
        assert await services.budgets.get_budget(user.id) is None

    async def test_budgets_are_per_user(self, services) -> None:
        await services.budgets.set_monthly_budget(1, Decimal("100"))
        await services.budgets.set_monthly_budget(2, Decimal("200"))
        assert (await services.budgets.get_budget(1)).monthly_limit == Decimal("100")
        assert (await services.budgets.get_budget(2)).monthly_limit == Decimal("200")


class TestCalculateExpensesForMonth:
    async def test_no_transactions_gives_zero(self, services, user) -> None:
        assert await services.budgets.calculate_expenses_for_month(user.id, YearMonth(2025, 3)) == Decimal("0")

    async def test_sums_only_expenses_inside_month(self, services, user, add_transaction) -> None:
        await add_transaction(user.id, "10.10", "EXPENSE", on=date(2025, 3, 1))
        await add_transaction(user.id, "20.20", "EXPENSE", on=date(2025, 3, 31))
        await add_transaction(user.id, "999", "INCOME", on=date(2025, 3, 10))
        await add_transaction(user.id, "50", "EXPENSE", on=date(2025, 2, 28))
        await add_transaction(user.id, "50", "EXPENSE", on=date(2025, 4, 1))

        total = await services.budgets.calculate_expenses_for_month(user.id, YearMonth(2025, 3))
        assert total == Decimal("30.30")

    async def test_ignores_other_users(self, services, user, add_transaction) -> None:
        await add_transaction(user.id, "5", "EXPENSE")
        await add_transaction(user.id + 1, "7", "EXPENSE")
        assert await services.budgets.calculate_expenses_for_month(user.id, YearMonth(2025, 3)) == Decimal("5")

    async def test_result_is_independent_of_insertion_order(self, services, user, add_transaction) -> None:
        amounts = ["0.10", "0.20", "0.30", "1000.05"]
        for amount in reversed(amounts):
            await add_transaction(user.id, amount, "EXPENSE")
        assert await services.budgets.calculate_expenses_for_month(user.id, YearMonth(2025, 3)) == Decimal("1000.65")


class TestGetBudgetData:
    async def test_joins_budget_with_current_month(self, services, user, add_transaction) -> None:
        await services.budgets.set_monthly_budget(user.id, Decimal("500"))
        await add_transaction(user.id, "120.5", "EXPENSE")

        data = await services.budgets.get_budget_data(user.id)
        assert data.month == "2025-03"
        assert data.current_expenses == Decimal("120.5")
        assert data.remaining == Decimal("379.5")
        assert data.formatted_budget == "Budget: 120.50/500.00"

    async def test_remaining_may_be_negative(self, services, user, add_transaction) -> None:
        await services.budgets.set_monthly_budget(user.id, Decimal("100"))
        await add_transaction(user.id, "150", "EXPENSE")
        assert (await services.budgets.get_budget_data(user.id)).remaining == Decimal("-50")

    async def test_stored_expense_cache_is_not_trusted(
        self, services, user, budget_repository, add_transaction
    ) -> None:
        budget = await services.budgets.set_monthly_budget(user.id, Decimal("100"))
        await budget_repository.update(budget.model_copy(update={"current_expenses": Decimal("99")}))
        await add_transaction(user.id, "10", "EXPENSE")
        assert (await services.budgets.get_budget_data(user.id)).current_expenses == Decimal("10")

    async def test_missing_budget_raises_not_found(self, services, user) -> None:
        with pytest.raises(NotFoundError):
            await services.budgets.get_budget_data(user.id)
