from typing import Dict, List, Optional
from uuid import UUID

from giftem.models.api.comments import CommentResponse


class CommentRepository:
    """Repository for comment threads keyed by post ID."""

    def __init__(self) -> None:
        self.comments: Dict[UUID, List[CommentResponse]] = {}

    def get_by_post(self, post_id: UUID) -> List[CommentResponse]:
        """Get all comments on a post, oldest first."""
        return list(self.comments.get(post_id, []))

    def append(self, comment: CommentResponse) -> CommentResponse:
        self.comments.setdefault(comment.post_id, []).append(comment)
        return comment

    def get(self, post_id: UUID, comment_id: UUID) -> Optional[CommentResponse]:
        return next(
            (c for c in self.comments.get(post_id, []) if c.id == comment_id), None
        )

    def update(self, comment: CommentResponse) -> Optional[CommentResponse]:
        """Replace a stored comment, keeping its position in the thread."""
        thread = self.comments.get(comment.post_id, [])
        for i, existing in enumerate(thread):
            if existing.id == comment.id:
                thread[i] = comment
                return comment
        return None
