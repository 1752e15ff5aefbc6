"""Account and administration services."""

import logging
from typing import Optional

from components.core.errors import ConflictError, NotFoundError, ValidationError
from components.core.schemas import PaginatedResponse, validate_pagination
from components.transaction import schemas as transaction_schemas
from components.transaction.repository import TransactionRepository
from components.user import schemas
from components.user.repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Operations a user performs on their own account."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def get_user(self, user_id: int) -> Optional[schemas.User]:
        return await self.user_repository.find_by_id(user_id)

    async def update_own_account(
        self,
        user_id: int,
        name: str,
        email: Optional[str],
        version: int,
    ) -> bool:
        """
        Update name and email of the account.

        `version` is the version the caller read; it is handed to the
        repository as-is so a concurrent modification is detected.
        Role, blocked flag and password are kept from the stored record.
        """
        existing = await self.user_repository.find_by_id(user_id)
        if existing is None:
            raise NotFoundError(f"User {user_id} not found.")
        if not name:
            raise ValidationError("Name must not be empty.")
        if email:
            owner = await self.user_repository.find_by_email(email)
            if owner is not None and owner.id != user_id:
                raise ValidationError(f"Email {email} is already in use.")

        updated = existing.model_copy(update={"name": name, "email": email, "version": version})
        if not await self.user_repository.update(updated):
            raise ConflictError("Your account was modified. Check version number.")
        logger.info("User %s updated own account", user_id)
        return True

    async def delete_own_account(self, user_id: int) -> bool:
        deleted = await self.user_repository.delete(user_id)
        if deleted:
            logger.info("User %s deleted own account", user_id)
        return deleted


class AdminService:
    """Operations an administrator performs on other users."""

    def __init__(self, user_repository: UserRepository, transaction_repository: TransactionRepository):
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository

    async def get_user(self, user_id: int) -> Optional[schemas.User]:
        return await self.user_repository.find_by_id(user_id)

    async def get_paginated_users(self, page: int, size: int) -> PaginatedResponse[schemas.User]:
        offset = validate_pagination(page, size)
        users = await self.user_repository.find_all(offset, size)
        total = await self.user_repository.count()
        return PaginatedResponse[schemas.User].build(users, total, page, size)

    async def update_user_role(self, user_id: int, role: schemas.Role) -> bool:
        return await self._modify(user_id, role=schemas.Role(role))

    async def block_or_unblock_user(self, user_id: int, blocked: bool) -> bool:
        return await self._modify(user_id, blocked=blocked)

    async def delete_user(self, user_id: int) -> bool:
        deleted = await self.user_repository.delete(user_id)
        if deleted:
            logger.info("Admin deleted user %s", user_id)
        return deleted

    async def get_paginated_transactions_for_user(
        self, user_id: int, page: int, size: int
    ) -> PaginatedResponse[transaction_schemas.Transaction]:
        offset = validate_pagination(page, size)
        transactions = await self.transaction_repository.find_paginated(user_id, offset, size)
        total = await self.transaction_repository.count_by_user_id(user_id)
        return PaginatedResponse[transaction_schemas.Transaction].build(transactions, total, page, size)

    async def _modify(self, user_id: int, **changes) -> bool:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return False
        if not await self.user_repository.update(user.model_copy(update=changes)):
            raise ConflictError(f"User {user_id} was modified concurrently.")
        logger.info("Admin changed %s for user %s", ", ".join(sorted(changes)), user_id)
        return True
