# Export all models
from .api import (
    CartItemResponse,
    ConversationResponse,
    MessageResponse,
    NotificationResponse,
    ProductResponse,
    UserResponse,
    WishlistItemResponse,
)
from .db import SettingModel

__all__ = [
    # API models
    "CartItemResponse",
    "ConversationResponse",
    "MessageResponse",
    "NotificationResponse",
    "ProductResponse",
    "UserResponse",
    "WishlistItemResponse",
    # DB models
    "SettingModel",
]
