from fastapi import Request

from giftem.services.cart_service import CartService
from giftem.services.comment_service import CommentService
from giftem.services.conversation_service import ConversationService
from giftem.services.feed_service import FeedService
from giftem.services.notification_service import NotificationService
from giftem.services.product_service import ProductService
from giftem.services.quote_service import QuoteService
from giftem.services.user_service import UserService
from giftem.services.workout_service import WorkoutService


def get_user_service(request: Request) -> UserService:
    return request.app.state.services.users


def get_product_service(request: Request) -> ProductService:
    return request.app.state.services.products


def get_conversation_service(request: Request) -> ConversationService:
    return request.app.state.services.conversations


def get_cart_service(request: Request) -> CartService:
    return request.app.state.services.cart


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.services.notifications


def get_feed_service(request: Request) -> FeedService:
    return request.app.state.services.feed


def get_comment_service(request: Request) -> CommentService:
    return request.app.state.services.comments


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.services.quotes


def get_workout_service(request: Request) -> WorkoutService:
    return request.app.state.services.workouts
