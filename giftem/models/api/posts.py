from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class PostResponse(BaseModel):
    """Feed post showcasing one product."""

    id: UUID = Field(default_factory=uuid4)
    product_id: UUID
    user_id: UUID
    caption: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False  # Liked by the current user

    model_config = ConfigDict(frozen=True)
