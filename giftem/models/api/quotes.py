from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


class CreateQuoteRequest(BaseModel):
    """Request model for posting a quote."""

    text: str = Field(..., description="Quote content")
    tags: List[str] = Field(default_factory=list, description="Free-form tags")


class QuoteResponse(BaseModel):
    """Short quote posted by a user; likes and bookmarks are per-user sets."""

    id: UUID = Field(default_factory=uuid4)
    author_id: UUID
    author_display_name: str
    text: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    like_user_ids: List[UUID] = Field(default_factory=list)
    bookmark_user_ids: List[UUID] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def like_count(self) -> int:
        return len(self.like_user_ids)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def bookmark_count(self) -> int:
        return len(self.bookmark_user_ids)


class QuoteTagStat(BaseModel):
    tag: str
    count: int
