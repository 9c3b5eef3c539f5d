from typing import List
from uuid import UUID

from giftem.models.api.posts import PostResponse
from giftem.repositories.base_repository import BaseRepository


class PostRepository(BaseRepository[PostResponse]):
    """Repository for feed posts, newest first."""

    def get_by_user(self, user_id: UUID) -> List[PostResponse]:
        return [p for p in self.records if p.user_id == user_id]
