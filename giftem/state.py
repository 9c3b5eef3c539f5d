"""Construction of the long-lived stores shared by every request."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from giftem.repositories.post_repository import PostRepository
from giftem.repositories.product_repository import ProductRepository
from giftem.repositories.settings_repository import SettingsStore
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import Scheduler
from giftem.seed import (
    seed_comments,
    seed_conversations,
    seed_notifications,
    seed_posts,
    seed_products,
    seed_quotes,
    seed_users,
    seed_workouts,
)
from giftem.services.cart_service import CartService
from giftem.services.comment_service import CommentService
from giftem.services.conversation_service import (
    AUTO_REPLY_DELAY_SECONDS,
    ConversationService,
)
from giftem.services.feed_service import FeedService
from giftem.services.notification_service import NotificationService
from giftem.services.product_service import ProductService
from giftem.services.quote_service import QuoteService
from giftem.services.user_service import UserService
from giftem.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)


@dataclass
class AppServices:
    users: UserService
    products: ProductService
    conversations: ConversationService
    cart: CartService
    notifications: NotificationService
    feed: FeedService
    comments: CommentService
    quotes: QuoteService
    workouts: WorkoutService


async def build_services(
    scheduler: Scheduler,
    settings_store: Optional[SettingsStore] = None,
    auto_reply_delay: float = AUTO_REPLY_DELAY_SECONDS,
    rng: Optional[random.Random] = None,
) -> AppServices:
    """
    Build and seed every store:

    1. Users, from the local mirror when present, otherwise the seed roster
    2. Catalog and notifications from seed data
    3. Conversations with scripted messages for the current user
    4. Cart and wishlist from the local mirror
    5. Feed posts and comment threads from seed data
    6. Quotes and workouts, from the local mirror when present
    """
    users = seed_users()
    user_repo = UserRepository(users, current_user_id=users[0].id)
    user_service = UserService(user_repo, settings_store)
    await user_service.load()

    product_repo = ProductRepository(seed_products())
    now = scheduler.now()

    notification_service = NotificationService(
        scheduler, seed_notifications(user_repo.get_all(), now)
    )
    conversation_service = ConversationService(
        user_repo,
        scheduler,
        notification_service=notification_service,
        auto_reply_delay=auto_reply_delay,
        rng=rng,
    )
    current_user = user_repo.get_current_user()
    if current_user is not None:
        others = [u for u in user_repo.get_all() if u.id != current_user.id]
        for conversation, messages in seed_conversations(current_user, others, now):
            conversation_service.seed(conversation, messages)

    cart_service = CartService(product_repo, scheduler, settings_store)
    await cart_service.load()

    roster = user_repo.get_all()
    post_repo = PostRepository(seed_posts(roster, product_repo.get_all(), now))
    comment_service = CommentService(post_repo, user_repo, scheduler)
    comment_service.seed(seed_comments(post_repo.get_all(), roster, now))

    quote_service = QuoteService(
        user_repo, scheduler, settings_store, quotes=seed_quotes(roster, now)
    )
    await quote_service.load()
    workout_service = WorkoutService(
        scheduler, settings_store, workouts=seed_workouts(now)
    )
    await workout_service.load()

    logger.info(
        "Stores ready: %d users, %d products, %d conversations, %d posts",
        len(user_repo),
        len(product_repo),
        len(conversation_service.list_conversations()),
        len(post_repo),
    )
    return AppServices(
        users=user_service,
        products=ProductService(product_repo),
        conversations=conversation_service,
        cart=cart_service,
        notifications=notification_service,
        feed=FeedService(post_repo),
        comments=comment_service,
        quotes=quote_service,
        workouts=workout_service,
    )
