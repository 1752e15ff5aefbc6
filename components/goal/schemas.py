"""Pydantic schemas for goal data validation."""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from components.core.money import HUNDRED, ZERO, add_months, to_percent

MAX_PROGRESS = HUNDRED.quantize(Decimal("0.01"))
MIN_PROGRESS = ZERO.quantize(Decimal("0.01"))


class GoalBase(BaseModel):
    """Base goal schema."""
    user_id: int
    goal_name: str = Field(min_length=1)
    target_amount: Decimal = Field(gt=0)
    duration: int = Field(gt=0)
    start_time: date


class GoalCreate(GoalBase):
    """Schema for goal creation."""
    pass


class Goal(GoalBase):
    """Schema for a stored goal."""
    id: int

    class Config:
        from_attributes = True

    @property
    def end_date(self) -> date:
        return add_months(self.start_time, self.duration)

    def calculate_progress(self, total_balance: Optional[Decimal]) -> Decimal:
        """
        Percentage of the target covered by total_balance.

        Always two decimal places and clamped to [0.00, 100.00]; 0.00 when
        either the balance or the target is missing or the target is zero.
        """
        if total_balance is None or not self.target_amount:
            return MIN_PROGRESS
        progress = to_percent(total_balance, self.target_amount)
        return max(MIN_PROGRESS, min(MAX_PROGRESS, progress))
