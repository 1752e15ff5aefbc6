"""Pydantic schemas for budget data validation."""

from decimal import Decimal
from pydantic import BaseModel, Field


class BudgetBase(BaseModel):
    """Base budget schema."""
    user_id: int
    monthly_limit: Decimal = Field(gt=0)
    current_expenses: Decimal = Field(default=Decimal("0"), ge=0)


class BudgetCreate(BudgetBase):
    """Schema for budget creation."""
    pass


class Budget(BudgetBase):
    """Schema for a stored budget."""
    id: int

    class Config:
        from_attributes = True


class BudgetData(BaseModel):
    """Budget joined with the expenses of the current month."""
    budget: Budget
    month: str
    current_expenses: Decimal
    remaining: Decimal
    formatted_budget: str
