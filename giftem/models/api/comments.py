from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class AddCommentRequest(BaseModel):
    """Request model for commenting on a post."""

    text: str = Field(..., description="Comment content")
    parent_comment_id: Optional[UUID] = Field(
        default=None, description="Comment being replied to"
    )


class CommentResponse(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    post_id: UUID
    user_id: UUID
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    like_count: int = 0
    is_liked: bool = False
    parent_comment_id: Optional[UUID] = None  # Set on replies

    model_config = ConfigDict(frozen=True)
