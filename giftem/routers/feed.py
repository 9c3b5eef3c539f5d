from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from giftem.dependencies import get_comment_service, get_feed_service
from giftem.models.api.comments import AddCommentRequest, CommentResponse
from giftem.models.api.posts import PostResponse
from giftem.services.comment_service import CommentService
from giftem.services.feed_service import FeedService

router = APIRouter()


def _require_post(service: FeedService, post_id: UUID) -> PostResponse:
    post = service.get_post(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("", response_model=List[PostResponse])
async def list_posts(
    user_id: Optional[UUID] = Query(None, description="Only posts by this user"),
    limit: Optional[int] = Query(
        50, description="Maximum number of posts to return", ge=1, le=1000
    ),
    offset: Optional[int] = Query(0, description="Number of posts to skip", ge=0),
    service: FeedService = Depends(get_feed_service),
) -> List[PostResponse]:
    """
    List feed posts, newest first.

    Query parameters:
    - user_id: Author filter
    - limit: Maximum number of posts to return (default: 50, max: 1000)
    - offset: Number of posts to skip (default: 0)
    """
    try:
        return service.list_posts(user_id=user_id, limit=limit, offset=offset or 0)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID, service: FeedService = Depends(get_feed_service)
) -> PostResponse:
    return _require_post(service, post_id)


@router.post("/{post_id}/like", response_model=PostResponse)
async def toggle_post_like(
    post_id: UUID, service: FeedService = Depends(get_feed_service)
) -> PostResponse:
    """Like the post, or remove the like if the current user already liked it."""
    post = service.toggle_like(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def get_comments(
    post_id: UUID,
    service: CommentService = Depends(get_comment_service),
    feed_service: FeedService = Depends(get_feed_service),
) -> List[CommentResponse]:
    """Comments on a post, oldest first."""
    _require_post(feed_service, post_id)
    return service.get_comments(post_id)


@router.post("/{post_id}/comments", response_model=CommentResponse)
async def add_comment(
    post_id: UUID,
    request: AddCommentRequest,
    service: CommentService = Depends(get_comment_service),
    feed_service: FeedService = Depends(get_feed_service),
) -> CommentResponse:
    """
    Comment on a post as the current user.

    Body:
    - text: Comment content, must not be blank
    - parent_comment_id: Optional comment on the same post being replied to
    """
    _require_post(feed_service, post_id)
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Comment text must not be blank")
    try:
        comment = service.add_comment(
            post_id, request.text, parent_comment_id=request.parent_comment_id
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if comment is None:
        raise HTTPException(status_code=409, detail="No current user")
    return comment


@router.post("/{post_id}/comments/{comment_id}/like", response_model=CommentResponse)
async def toggle_comment_like(
    post_id: UUID,
    comment_id: UUID,
    service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    comment = service.toggle_like(post_id, comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment
