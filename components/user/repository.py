"""Repository for user operations."""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from components.user.models import User
from components.user import schemas


class UserRepository(ABC):
    """Persistence contract for users."""

    @abstractmethod
    async def save(self, user: schemas.UserCreate) -> schemas.User:
        ...

    @abstractmethod
    async def update(self, user: schemas.User) -> bool:
        """
        Store user fields if the stored version still equals user.version.

        On success the stored version is incremented. Returns False when the
        user is gone or the version no longer matches.
        """

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        ...

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[schemas.User]:
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[schemas.User]:
        ...

    @abstractmethod
    async def find_all(self, offset: int = 0, limit: int = 100) -> List[schemas.User]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...


class SqlUserRepository(UserRepository):
    """User repository backed by a SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def save(self, user: schemas.UserCreate) -> schemas.User:
        """Create a new user."""
        db_user = User(
            name=user.name,
            email=user.email,
            password=user.password,
            blocked=False,
            role=user.role.value,
            version=1,
        )
        self.session.add(db_user)
        await self.session.commit()
        await self.session.refresh(db_user)
        return schemas.User.model_validate(db_user)

    async def update(self, user: schemas.User) -> bool:
        """Update user by ID, guarded by the version column."""
        result = await self.session.execute(
            update(User)
            .where(User.id == user.id, User.version == user.version)
            .values(
                name=user.name,
                email=user.email,
                password=user.password,
                blocked=user.blocked,
                role=user.role.value,
                version=user.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return result.rowcount == 1

    async def delete(self, user_id: int) -> bool:
        """Delete user by ID."""
        db_user = await self.session.get(User, user_id)
        if not db_user:
            return False

        await self.session.delete(db_user)
        await self.session.commit()
        return True

    async def find_by_id(self, user_id: int) -> Optional[schemas.User]:
        """Get user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id).execution_options(populate_existing=True)
        )
        db_user = result.scalar_one_or_none()
        return schemas.User.model_validate(db_user) if db_user else None

    async def find_by_email(self, email: str) -> Optional[schemas.User]:
        """Get user by email."""
        result = await self.session.execute(
            select(User).where(User.email == email).execution_options(populate_existing=True)
        )
        db_user = result.scalar_one_or_none()
        return schemas.User.model_validate(db_user) if db_user else None

    async def find_all(self, offset: int = 0, limit: int = 100) -> List[schemas.User]:
        """Get one page of users ordered by ID."""
        result = await self.session.execute(
            select(User).order_by(User.id).offset(offset).limit(limit).execution_options(populate_existing=True)
        )
        return [schemas.User.model_validate(user) for user in result.scalars().all()]

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(select(func.count(User.id)))
        return result.scalar_one()
