"""Pydantic schemas for reports."""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, computed_field


class Report(BaseModel):
    """Income and expense totals of a user; balance is always derived."""
    user_id: int
    total_income: Decimal = Field(default=Decimal("0"), ge=0)
    total_expense: Decimal = Field(default=Decimal("0"), ge=0)
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @computed_field
    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense
