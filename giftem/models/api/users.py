from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Identity record for a user of the app."""

    id: UUID = Field(default_factory=uuid4)
    username: str
    display_name: str
    profile_image_url: Optional[str] = None
    bio: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0
    post_count: int = 0
    is_verified: bool = False

    model_config = ConfigDict(frozen=True)
