from typing import Optional
from uuid import UUID

from giftem.models.api.conversations import ConversationResponse
from giftem.repositories.base_repository import BaseRepository


class ConversationRepository(BaseRepository[ConversationResponse]):
    """Repository for conversations, kept most-recently-active first."""

    def get_by_participants(
        self, user_id: UUID, other_user_id: UUID
    ) -> Optional[ConversationResponse]:
        """Find the conversation between two users, in either order."""
        wanted = {user_id, other_user_id}
        return next(
            (c for c in self.records if set(c.participant_ids) == wanted), None
        )

    def move_to_front(self, conversation: ConversationResponse) -> None:
        """Replace the stored conversation and move it to index 0."""
        self.delete(conversation.id)
        self.insert_first(conversation)

    def total_unread(self) -> int:
        return sum(c.unread_count for c in self.records)
