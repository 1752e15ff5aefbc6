"""Report engine: income/expense totals and category breakdowns."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from components.core.errors import ValidationError
from components.core.money import ZERO, sum_amounts
from components.report import schemas
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import Transaction, TransactionType


def _check_range(date_from: date, date_to: date) -> None:
    if date_from is None or date_to is None:
        raise ValidationError("Both start and end dates are required.")
    if date_from > date_to:
        raise ValidationError("Start date must not be after end date.")


def _build_report(
    user_id: int,
    transactions: List[Transaction],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> schemas.Report:
    return schemas.Report(
        user_id=user_id,
        total_income=sum_amounts(t.amount for t in transactions if t.type == TransactionType.INCOME),
        total_expense=sum_amounts(t.amount for t in transactions if t.type == TransactionType.EXPENSE),
        date_from=date_from,
        date_to=date_to,
    )


class ReportService:
    """Builds transient reports; nothing here is persisted."""

    def __init__(self, transaction_repository: TransactionRepository):
        self.transaction_repository = transaction_repository

    async def generate_user_report(self, user_id: int) -> schemas.Report:
        transactions = await self.transaction_repository.find_by_user_id(user_id)
        return _build_report(user_id, transactions)

    async def generate_report_by_date(self, user_id: int, date_from: date, date_to: date) -> schemas.Report:
        _check_range(date_from, date_to)
        transactions = await self.transaction_repository.find_filtered(user_id, date_from, date_to)
        return _build_report(user_id, transactions, date_from, date_to)

    async def analyze_expenses_by_category(
        self, user_id: int, date_from: date, date_to: date
    ) -> Dict[str, Decimal]:
        """Sum of EXPENSE amounts per category; categories without expenses are absent."""
        _check_range(date_from, date_to)
        transactions = await self.transaction_repository.find_filtered(
            user_id, date_from, date_to, None, TransactionType.EXPENSE
        )
        totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
        for transaction in transactions:
            totals[transaction.category] += transaction.amount
        return dict(totals)
