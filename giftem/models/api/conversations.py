from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .messages import MessageResponse


class CreateConversationRequest(BaseModel):
    """Request model for opening a conversation with another user."""

    user_id: UUID = Field(..., description="The other participant")


class ConversationResponse(BaseModel):
    """Two-party conversation with a cached copy of its last message."""

    id: UUID = Field(default_factory=uuid4)
    participant_ids: List[UUID] = Field(..., min_length=2, max_length=2)
    last_message: Optional[MessageResponse] = None
    last_message_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    unread_count: int = 0

    model_config = ConfigDict(frozen=True)

    def other_participant_id(self, current_user_id: UUID) -> Optional[UUID]:
        return next(
            (pid for pid in self.participant_ids if pid != current_user_id), None
        )


class UnreadCountResponse(BaseModel):
    unread_count: int
