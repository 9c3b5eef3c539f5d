# Repository classes for in-memory stores and the local mirror
from .base_repository import BaseRepository
from .cart_repository import CartRepository, WishlistRepository
from .comment_repository import CommentRepository
from .conversation_repository import ConversationRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .product_repository import ProductRepository
from .quote_repository import QuoteRepository
from .settings_repository import SettingsRepository, SettingsStore
from .user_repository import UserRepository
from .workout_repository import WorkoutRepository, WorkoutSessionRepository

__all__ = [
    "BaseRepository",
    "CartRepository",
    "WishlistRepository",
    "CommentRepository",
    "ConversationRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "ProductRepository",
    "QuoteRepository",
    "SettingsRepository",
    "SettingsStore",
    "UserRepository",
    "WorkoutRepository",
    "WorkoutSessionRepository",
]
