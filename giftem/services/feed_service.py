import logging
from typing import List, Optional
from uuid import UUID

from giftem.models.api.posts import PostResponse
from giftem.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class FeedService:
    """Service for the product feed."""

    def __init__(self, post_repo: PostRepository):
        self.post_repo = post_repo

    def list_posts(
        self,
        user_id: Optional[UUID] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[PostResponse]:
        if limit is not None and limit < 0:
            raise ValueError("Limit must be non-negative")
        if offset < 0:
            raise ValueError("Offset must be non-negative")
        posts = (
            self.post_repo.get_by_user(user_id)
            if user_id is not None
            else self.post_repo.records
        )
        end = None if limit is None else offset + limit
        return list(posts[offset:end])

    def get_post(self, post_id: UUID) -> Optional[PostResponse]:
        return self.post_repo.get_by_id(post_id)

    def toggle_like(self, post_id: UUID) -> Optional[PostResponse]:
        """Flip the current user's like on a post and adjust its count."""
        post = self.post_repo.get_by_id(post_id)
        if post is None:
            return None
        liked = not post.is_liked
        updated = post.model_copy(
            update={
                "is_liked": liked,
                "like_count": post.like_count + (1 if liked else -1),
            }
        )
        self.post_repo.update(updated)
        logger.debug("Post %s like toggled to %s", post_id, liked)
        return updated
