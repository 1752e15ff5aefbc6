"""Repository for goal operations."""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.goal.models import Goal
from components.goal import schemas


class GoalRepository(ABC):
    """Persistence contract for goals."""

    @abstractmethod
    async def save(self, goal: schemas.GoalCreate) -> schemas.Goal:
        ...

    @abstractmethod
    async def update(self, goal: schemas.Goal) -> bool:
        ...

    @abstractmethod
    async def delete(self, goal_id: int) -> bool:
        ...

    @abstractmethod
    async def find_by_id(self, goal_id: int) -> Optional[schemas.Goal]:
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> List[schemas.Goal]:
        ...

    @abstractmethod
    async def find_by_user_id_and_goal_id(self, user_id: int, goal_id: int) -> Optional[schemas.Goal]:
        ...

    @abstractmethod
    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Goal]:
        ...

    @abstractmethod
    async def count_by_user_id(self, user_id: int) -> int:
        ...


class SqlGoalRepository(GoalRepository):
    """Goal repository backed by a SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def save(self, goal: schemas.GoalCreate) -> schemas.Goal:
        """Create a new goal."""
        db_goal = Goal(**goal.model_dump())
        self.session.add(db_goal)
        await self.session.commit()
        await self.session.refresh(db_goal)
        return schemas.Goal.model_validate(db_goal)

    async def update(self, goal: schemas.Goal) -> bool:
        """Update name, target and duration of a goal."""
        db_goal = await self.session.get(Goal, goal.id)
        if not db_goal:
            return False

        db_goal.goal_name = goal.goal_name
        db_goal.target_amount = goal.target_amount
        db_goal.duration = goal.duration
        await self.session.commit()
        return True

    async def delete(self, goal_id: int) -> bool:
        """Delete goal by ID."""
        db_goal = await self.session.get(Goal, goal_id)
        if not db_goal:
            return False

        await self.session.delete(db_goal)
        await self.session.commit()
        return True

    async def find_by_id(self, goal_id: int) -> Optional[schemas.Goal]:
        """Get goal by ID."""
        db_goal = await self.session.get(Goal, goal_id)
        return schemas.Goal.model_validate(db_goal) if db_goal else None

    async def find_by_user_id(self, user_id: int) -> List[schemas.Goal]:
        """Get all goals of a user."""
        result = await self.session.execute(
            select(Goal).where(Goal.user_id == user_id).order_by(Goal.id)
        )
        return [schemas.Goal.model_validate(goal) for goal in result.scalars().all()]

    async def find_by_user_id_and_goal_id(self, user_id: int, goal_id: int) -> Optional[schemas.Goal]:
        """Get a goal only if it belongs to the user."""
        result = await self.session.execute(
            select(Goal).where(Goal.id == goal_id, Goal.user_id == user_id)
        )
        db_goal = result.scalar_one_or_none()
        return schemas.Goal.model_validate(db_goal) if db_goal else None

    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Goal]:
        """Get one page of a user's goals."""
        result = await self.session.execute(
            select(Goal)
            .where(Goal.user_id == user_id)
            .order_by(Goal.id)
            .offset(offset)
            .limit(limit)
        )
        return [schemas.Goal.model_validate(goal) for goal in result.scalars().all()]

    async def count_by_user_id(self, user_id: int) -> int:
        """Count a user's goals."""
        result = await self.session.execute(
            select(func.count(Goal.id)).where(Goal.user_id == user_id)
        )
        return result.scalar_one()
