import logging
from typing import List, Optional
from uuid import UUID

from giftem.models.api.comments import CommentResponse
from giftem.repositories.comment_repository import CommentRepository
from giftem.repositories.post_repository import PostRepository
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import Scheduler

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment threads under feed posts."""

    def __init__(
        self,
        post_repo: PostRepository,
        user_repo: UserRepository,
        scheduler: Scheduler,
    ):
        self.post_repo = post_repo
        self.user_repo = user_repo
        self.scheduler = scheduler
        self.comment_repo = CommentRepository()

    def seed(self, comments: List[CommentResponse]) -> None:
        for comment in comments:
            self.comment_repo.append(comment)

    def get_comments(self, post_id: UUID) -> List[CommentResponse]:
        return self.comment_repo.get_by_post(post_id)

    def add_comment(
        self, post_id: UUID, text: str, parent_comment_id: Optional[UUID] = None
    ) -> Optional[CommentResponse]:
        """
        Comment on a post as the current user:

        1. Ignore the call when there is no current user, the text is blank
           or the post does not exist
        2. Append the comment to the post's thread
        3. Bump the post's comment count
        """
        current_user = self.user_repo.get_current_user()
        if current_user is None or not text.strip():
            return None
        post = self.post_repo.get_by_id(post_id)
        if post is None:
            return None
        if (
            parent_comment_id is not None
            and self.comment_repo.get(post_id, parent_comment_id) is None
        ):
            raise ValueError("Parent comment not found on this post")

        comment = self.comment_repo.append(
            CommentResponse(
                post_id=post_id,
                user_id=current_user.id,
                text=text,
                created_at=self.scheduler.now(),
                parent_comment_id=parent_comment_id,
            )
        )
        self.post_repo.update(
            post.model_copy(update={"comment_count": post.comment_count + 1})
        )
        logger.info("User %s commented on post %s", current_user.id, post_id)
        return comment

    def toggle_like(self, post_id: UUID, comment_id: UUID) -> Optional[CommentResponse]:
        comment = self.comment_repo.get(post_id, comment_id)
        if comment is None:
            return None
        liked = not comment.is_liked
        updated = comment.model_copy(
            update={
                "is_liked": liked,
                "like_count": comment.like_count + (1 if liked else -1),
            }
        )
        return self.comment_repo.update(updated)
