from typing import List
from uuid import UUID

from giftem.models.api.quotes import QuoteResponse
from giftem.repositories.base_repository import BaseRepository


class QuoteRepository(BaseRepository[QuoteResponse]):
    """Repository for quotes, newest first."""

    def get_by_author(self, author_id: UUID) -> List[QuoteResponse]:
        return [q for q in self.records if q.author_id == author_id]

    def get_bookmarked_by(self, user_id: UUID) -> List[QuoteResponse]:
        return [q for q in self.records if user_id in q.bookmark_user_ids]
