from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    PRODUCT = "product"


class SendMessageRequest(BaseModel):
    """Request model for sending a message into a conversation."""

    text: str = Field(..., description="Message content")


class MessageResponse(BaseModel):
    """A single message belonging to one conversation."""

    id: UUID = Field(default_factory=uuid4)
    conversation_id: UUID
    sender_id: UUID
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_read: bool = False
    message_type: MessageType = MessageType.TEXT

    model_config = ConfigDict(frozen=True)
