"""Budget model for the database."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from components.core.database import Base


class Budget(Base):
    """Budget model storing a user's monthly spending limit."""
    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    monthly_limit = Column(Numeric(12, 2), nullable=False)
    current_expenses = Column(Numeric(12, 2), nullable=False, default=0)  # Display cache only

    user = relationship("User", back_populates="budget")
