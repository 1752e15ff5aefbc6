"""Pydantic schemas for user data validation."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class UserBase(BaseModel):
    """Base user schema."""
    name: str = Field(min_length=1)
    email: Optional[str] = None


class UserCreate(UserBase):
    """Schema for user creation."""
    password: str
    role: Role = Role.USER


class User(UserBase):
    """Schema for a stored user."""
    id: int
    password: str
    blocked: bool = False
    role: Role = Role.USER
    version: int = 1

    class Config:
        from_attributes = True
