from typing import Iterable, Optional
from uuid import UUID

from giftem.models.api.users import UserResponse
from giftem.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[UserResponse]):
    """Repository for the user roster and the current-user pointer."""

    def __init__(
        self,
        users: Optional[Iterable[UserResponse]] = None,
        current_user_id: Optional[UUID] = None,
    ):
        super().__init__(users)
        self.current_user_id = current_user_id

    def get_current_user(self) -> Optional[UserResponse]:
        if self.current_user_id is None:
            return None
        return self.get_by_id(self.current_user_id)

