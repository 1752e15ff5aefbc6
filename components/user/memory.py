"""In-memory user repository."""

import itertools
from typing import Dict, List, Optional

from components.user import schemas
from components.user.repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed user store; state lives only as long as the object."""

    def __init__(self) -> None:
        self._users: Dict[int, schemas.User] = {}
        self._ids = itertools.count(1)

    async def save(self, user: schemas.UserCreate) -> schemas.User:
        stored = schemas.User(
            id=next(self._ids),
            name=user.name,
            email=user.email,
            password=user.password,
            role=user.role,
        )
        self._users[stored.id] = stored
        return stored

    async def update(self, user: schemas.User) -> bool:
        current = self._users.get(user.id)
        if current is None or current.version != user.version:
            return False
        self._users[user.id] = user.model_copy(update={"version": user.version + 1})
        return True

    async def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None

    async def find_by_id(self, user_id: int) -> Optional[schemas.User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[schemas.User]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def find_all(self, offset: int = 0, limit: int = 100) -> List[schemas.User]:
        users = sorted(self._users.values(), key=lambda u: u.id)
        return users[offset:offset + limit]

    async def count(self) -> int:
        return len(self._users)
