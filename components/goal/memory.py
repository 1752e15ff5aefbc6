"""In-memory goal repository."""

import itertools
from typing import Dict, List, Optional

from components.goal import schemas
from components.goal.repository import GoalRepository


class InMemoryGoalRepository(GoalRepository):
    """Dictionary-backed goal store."""

    def __init__(self) -> None:
        self._goals: Dict[int, schemas.Goal] = {}
        self._ids = itertools.count(1)

    async def save(self, goal: schemas.GoalCreate) -> schemas.Goal:
        stored = schemas.Goal(id=next(self._ids), **goal.model_dump())
        self._goals[stored.id] = stored
        return stored

    async def update(self, goal: schemas.Goal) -> bool:
        if goal.id not in self._goals:
            return False
        self._goals[goal.id] = goal
        return True

    async def delete(self, goal_id: int) -> bool:
        return self._goals.pop(goal_id, None) is not None

    async def find_by_id(self, goal_id: int) -> Optional[schemas.Goal]:
        return self._goals.get(goal_id)

    async def find_by_user_id(self, user_id: int) -> List[schemas.Goal]:
        return [self._goals[key] for key in sorted(self._goals) if self._goals[key].user_id == user_id]

    async def find_by_user_id_and_goal_id(self, user_id: int, goal_id: int) -> Optional[schemas.Goal]:
        goal = self._goals.get(goal_id)
        if goal is None or goal.user_id != user_id:
            return None
        return goal

    async def find_paginated(self, user_id: int, offset: int, limit: int) -> List[schemas.Goal]:
        goals = await self.find_by_user_id(user_id)
        return goals[offset:offset + limit]

    async def count_by_user_id(self, user_id: int) -> int:
        return len(await self.find_by_user_id(user_id))
