"""Database schema initialization."""

from sqlalchemy.ext.asyncio import AsyncEngine

from components.core.database import Base
# Import all models to ensure they're registered
import components.user.models
import components.transaction.models
import components.budget.models
import components.goal.models


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table known to the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table known to the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
