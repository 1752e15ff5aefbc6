"""Goal model for the database."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import relationship

from components.core.database import Base


class Goal(Base):
    """Goal model storing a savings target."""
    __tablename__ = "goals"
    __table_args__ = (UniqueConstraint("user_id", "goal_name", name="uq_goals_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    goal_name = Column(String(100), nullable=False)
    target_amount = Column(Numeric(12, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # Months
    start_time = Column(Date, nullable=False)

    user = relationship("User", back_populates="goals")
