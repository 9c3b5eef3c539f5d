import logging
from typing import List, Optional
from uuid import UUID

from giftem.models.api.users import UserResponse
from giftem.repositories.settings_repository import SettingsStore
from giftem.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

USERS_KEY = "users"
CURRENT_USER_KEY = "current_user_id"


class UserService:
    """Service for the user roster and the current user."""

    def __init__(
        self, user_repo: UserRepository, settings_store: Optional[SettingsStore] = None
    ):
        self.user_repo = user_repo
        self.settings_store = settings_store

    async def load(self) -> bool:
        """
        Replace the roster with the mirrored one when present:

        1. Read the roster and current-user pointer from the mirror
        2. Fall back to the seeded roster when nothing was saved
        """
        if self.settings_store is None:
            return False
        blob = await self.settings_store.load(USERS_KEY)
        if not blob:
            return False
        self.user_repo.replace_all(UserResponse.model_validate(u) for u in blob)
        current_user_id = await self.settings_store.load(CURRENT_USER_KEY)
        self.user_repo.current_user_id = (
            UUID(current_user_id) if current_user_id else None
        )
        logger.info("Loaded %d users from local mirror", len(self.user_repo))
        return True

    async def save(self) -> None:
        if self.settings_store is None:
            return
        await self.settings_store.save(
            USERS_KEY, [u.model_dump(mode="json") for u in self.user_repo.records]
        )
        current_user_id = self.user_repo.current_user_id
        await self.settings_store.save(
            CURRENT_USER_KEY, str(current_user_id) if current_user_id else None
        )

    def list_users(self) -> List[UserResponse]:
        return self.user_repo.get_all()

    def get_user(self, user_id: UUID) -> Optional[UserResponse]:
        return self.user_repo.get_by_id(user_id)

    def get_current_user(self) -> Optional[UserResponse]:
        return self.user_repo.get_current_user()

    async def follow_user(self, user_id: UUID) -> Optional[UserResponse]:
        """Follow a user; returns the updated user, or None when nothing changed."""
        user = self.user_repo.get_by_id(user_id)
        current = self.user_repo.get_current_user()
        if user is None or current is None:
            return None

        # In a real app, this would be an API call
        self.user_repo.update(
            current.model_copy(update={"following_count": current.following_count + 1})
        )
        # Re-read in case the current user follows themselves
        user = self.user_repo.get_by_id(user_id) or user
        followed = user.model_copy(update={"follower_count": user.follower_count + 1})
        self.user_repo.update(followed)

        await self.save()
        return followed
