# API models for request/response contracts
from .cart import (
    AddToCartRequest,
    AddToWishlistRequest,
    CartItemResponse,
    CartResponse,
    UpdateQuantityRequest,
    WishlistItemResponse,
)
from .comments import AddCommentRequest, CommentResponse
from .conversations import (
    ConversationResponse,
    CreateConversationRequest,
    UnreadCountResponse,
)
from .messages import MessageResponse, MessageType, SendMessageRequest
from .notifications import NotificationResponse, NotificationType
from .posts import PostResponse
from .products import ProductCategory, ProductResponse
from .quotes import CreateQuoteRequest, QuoteResponse, QuoteTagStat
from .users import UserResponse
from .workouts import (
    Difficulty,
    EndSessionRequest,
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    StartSessionRequest,
    WorkoutCategory,
    WorkoutRequest,
    WorkoutResponse,
    WorkoutSessionResponse,
    WorkoutStats,
)

__all__ = [
    "AddToCartRequest",
    "AddToWishlistRequest",
    "CartItemResponse",
    "CartResponse",
    "UpdateQuantityRequest",
    "WishlistItemResponse",
    "AddCommentRequest",
    "CommentResponse",
    "ConversationResponse",
    "CreateConversationRequest",
    "UnreadCountResponse",
    "MessageResponse",
    "MessageType",
    "SendMessageRequest",
    "NotificationResponse",
    "NotificationType",
    "PostResponse",
    "ProductCategory",
    "ProductResponse",
    "CreateQuoteRequest",
    "QuoteResponse",
    "QuoteTagStat",
    "UserResponse",
    "Difficulty",
    "EndSessionRequest",
    "Exercise",
    "ExerciseCategory",
    "ExerciseSet",
    "StartSessionRequest",
    "WorkoutCategory",
    "WorkoutRequest",
    "WorkoutResponse",
    "WorkoutSessionResponse",
    "WorkoutStats",
]
