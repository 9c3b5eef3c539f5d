from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class NotificationType(str, Enum):
    NEW_MESSAGE = "newMessage"
    NEW_FOLLOWER = "newFollower"
    NEW_COMMENT = "newComment"
    NEW_LIKE = "newLike"
    PRODUCT_SOLD = "productSold"


class NotificationResponse(BaseModel):
    """In-app notification."""

    id: UUID = Field(default_factory=uuid4)
    type: NotificationType
    title: str
    message: str
    user_id: Optional[UUID] = None  # User who triggered the notification
    related_id: Optional[UUID] = None  # Related conversation, post, etc.
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_read: bool = False

    model_config = ConfigDict(frozen=True)
