"""User model for the database."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from components.core.database import Base


class User(Base):
    """User model representing an account holder in the system."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    password = Column(String(255), nullable=False)  # Opaque, hashed elsewhere
    blocked = Column(Boolean, nullable=False, default=False)
    role = Column(String(20), nullable=False, default="USER")
    version = Column(Integer, nullable=False, default=1)

    transactions = relationship("Transaction", back_populates="user", cascade="all, delete-orphan")
    budget = relationship("Budget", back_populates="user", uselist=False, cascade="all, delete-orphan")
    goals = relationship("Goal", back_populates="user", cascade="all, delete-orphan")
