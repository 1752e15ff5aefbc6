"""Pydantic schemas for transaction data validation."""

from datetime import date as Date
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TransactionBase(BaseModel):
    """Base transaction schema."""
    user_id: int
    amount: Decimal = Field(ge=0)
    category: str = Field(min_length=1)
    date: Date
    description: Optional[str] = None
    type: TransactionType


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    pass


class Transaction(TransactionBase):
    """Schema for a stored transaction."""
    id: int

    class Config:
        from_attributes = True

    def is_within_date_range(self, date_from: Date, date_to: Date) -> bool:
        """Inclusive on both ends."""
        return date_from <= self.date <= date_to
