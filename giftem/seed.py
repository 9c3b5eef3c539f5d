"""Fixed sample data used to populate the in-memory stores at startup."""

from datetime import datetime, timedelta
from typing import List, Tuple
from uuid import UUID, uuid5

from giftem.models.api.comments import CommentResponse
from giftem.models.api.conversations import ConversationResponse
from giftem.models.api.messages import MessageResponse
from giftem.models.api.notifications import NotificationResponse, NotificationType
from giftem.models.api.posts import PostResponse
from giftem.models.api.products import ProductCategory, ProductResponse
from giftem.models.api.quotes import QuoteResponse
from giftem.models.api.users import UserResponse
from giftem.models.api.workouts import (
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    WorkoutCategory,
    WorkoutResponse,
)

SEED_NAMESPACE = UUID("6f2c1d0e-8a4b-4f7e-9c3d-2b1a0e9f8d7c")


def stable_id(kind: str, name: str) -> UUID:
    """Deterministic ID so mirrored state keeps pointing at seeded records."""
    return uuid5(SEED_NAMESPACE, f"{kind}:{name}")


def seed_users() -> List[UserResponse]:
    # The first user is the current user
    return [
        UserResponse(
            id=stable_id("user", "alex_wonder"),
            username="alex_wonder",
            display_name="Alex Wonder",
            bio="Tech enthusiast & gadget collector 🚀",
            follower_count=12450,
            following_count=892,
            post_count=342,
            is_verified=True,
        ),
        UserResponse(
            id=stable_id("user", "sarah_style"),
            username="sarah_style",
            display_name="Sarah Chen",
            bio="Fashion lover | Sharing my finds ✨",
            follower_count=8760,
            following_count=645,
            post_count=218,
            is_verified=True,
        ),
        UserResponse(
            id=stable_id("user", "mike_gadgets"),
            username="mike_gadgets",
            display_name="Mike Rodriguez",
            bio="Reviewing the latest tech 📱",
            follower_count=5420,
            following_count=234,
            post_count=156,
        ),
        UserResponse(
            id=stable_id("user", "emma_home"),
            username="emma_home",
            display_name="Emma Wilson",
            bio="Home decor enthusiast 🏠",
            follower_count=3210,
            following_count=456,
            post_count=89,
        ),
        UserResponse(
            id=stable_id("user", "david_sports"),
            username="david_sports",
            display_name="David Kim",
            bio="Fitness & outdoor gear reviews 💪",
            follower_count=9870,
            following_count=567,
            post_count=267,
            is_verified=True,
        ),
        UserResponse(
            id=stable_id("user", "lisa_beauty"),
            username="lisa_beauty",
            display_name="Lisa Thompson",
            bio="Beauty products & skincare routine 💄",
            follower_count=15230,
            following_count=789,
            post_count=445,
            is_verified=True,
        ),
    ]


def seed_products() -> List[ProductResponse]:
    return [
        ProductResponse(
            id=stable_id("product", "Wireless AirPods Pro"),
            name="Wireless AirPods Pro",
            description=(
                "Premium noise-canceling earbuds with spatial audio and adaptive EQ. "
                "Perfect for music lovers and professionals."
            ),
            price=249.99,
            original_price=299.99,
            image_urls=["airpods"],
            category=ProductCategory.ELECTRONICS,
            seller_id="seller1",
            rating=4.8,
            review_count=15420,
            tags=["audio", "wireless", "premium"],
        ),
        ProductResponse(
            id=stable_id("product", "Smart Watch Series 9"),
            name="Smart Watch Series 9",
            description=(
                "Advanced fitness tracking, heart rate monitoring, and seamless "
                "iPhone integration. Your health companion."
            ),
            price=399.99,
            original_price=449.99,
            image_urls=["smartwatch"],
            category=ProductCategory.ELECTRONICS,
            seller_id="seller2",
            rating=4.9,
            review_count=23410,
            tags=["fitness", "wearable", "health"],
        ),
        ProductResponse(
            id=stable_id("product", "Designer Sunglasses"),
            name="Designer Sunglasses",
            description=(
                "UV protection sunglasses with polarized lenses. "
                "Stylish and functional for everyday wear."
            ),
            price=89.99,
            original_price=129.99,
            image_urls=["sunglasses"],
            category=ProductCategory.FASHION,
            seller_id="seller3",
            rating=4.6,
            review_count=8765,
            tags=["accessories", "sunglasses", "style"],
        ),
        ProductResponse(
            id=stable_id("product", "Premium Leather Jacket"),
            name="Premium Leather Jacket",
            description=(
                "Genuine leather jacket with soft lining. "
                "Classic style that never goes out of fashion."
            ),
            price=299.99,
            original_price=399.99,
            image_urls=["jacket"],
            category=ProductCategory.FASHION,
            seller_id="seller4",
            rating=4.7,
            review_count=4321,
            tags=["leather", "jacket", "classic"],
        ),
        ProductResponse(
            id=stable_id("product", "Smart LED Light Strip"),
            name="Smart LED Light Strip",
            description=(
                "Color-changing LED strips with app control. "
                "Set the perfect ambiance for any room."
            ),
            price=34.99,
            original_price=49.99,
            image_urls=["ledlights"],
            category=ProductCategory.HOME,
            seller_id="seller5",
            rating=4.5,
            review_count=12340,
            tags=["lighting", "smart", "decoration"],
        ),
        ProductResponse(
            id=stable_id("product", "Aromatherapy Diffuser"),
            name="Aromatherapy Diffuser",
            description=(
                "Ultrasonic essential oil diffuser with 7 color LED lights. "
                "Create a relaxing atmosphere."
            ),
            price=29.99,
            image_urls=["diffuser"],
            category=ProductCategory.HOME,
            seller_id="seller6",
            rating=4.4,
            review_count=9876,
            tags=["wellness", "aromatherapy", "relaxation"],
        ),
        ProductResponse(
            id=stable_id("product", "Skincare Set - 5 Items"),
            name="Skincare Set - 5 Items",
            description=(
                "Complete skincare routine with cleanser, toner, serum, "
                "moisturizer, and sunscreen."
            ),
            price=79.99,
            original_price=119.99,
            image_urls=["skincare"],
            category=ProductCategory.BEAUTY,
            seller_id="seller7",
            rating=4.8,
            review_count=15670,
            tags=["skincare", "routine", "complete"],
        ),
        ProductResponse(
            id=stable_id("product", "Yoga Mat Premium"),
            name="Yoga Mat Premium",
            description=(
                "Non-slip yoga mat with alignment lines. "
                "Perfect for yoga, pilates, and workouts."
            ),
            price=39.99,
            original_price=59.99,
            image_urls=["yogamat"],
            category=ProductCategory.SPORTS,
            seller_id="seller8",
            rating=4.7,
            review_count=8765,
            tags=["yoga", "fitness", "exercise"],
        ),
        ProductResponse(
            id=stable_id("product", "Wireless Running Earbuds"),
            name="Wireless Running Earbuds",
            description=(
                "Sweat-proof earbuds with secure fit. "
                "Perfect for runners and athletes."
            ),
            price=59.99,
            original_price=89.99,
            image_urls=["runningbuds"],
            category=ProductCategory.SPORTS,
            seller_id="seller9",
            rating=4.6,
            review_count=11230,
            tags=["running", "audio", "sports"],
        ),
        ProductResponse(
            id=stable_id("product", "Educational Robot Kit"),
            name="Educational Robot Kit",
            description=(
                "Build and program your own robot. "
                "Great for kids to learn coding and engineering."
            ),
            price=89.99,
            original_price=129.99,
            image_urls=["robotkit"],
            category=ProductCategory.TOYS,
            seller_id="seller10",
            rating=4.9,
            review_count=5678,
            tags=["educational", "coding", "kids"],
        ),
        ProductResponse(
            id=stable_id("product", "Artisan Coffee Bean Set"),
            name="Artisan Coffee Bean Set",
            description=(
                "Premium coffee beans from around the world. "
                "3 different varieties included."
            ),
            price=49.99,
            original_price=69.99,
            image_urls=["coffee"],
            category=ProductCategory.FOOD,
            seller_id="seller11",
            rating=4.8,
            review_count=9876,
            tags=["coffee", "gourmet", "gift"],
        ),
    ]


def seed_conversations(
    current_user: UserResponse, others: List[UserResponse], now: datetime
) -> List[Tuple[ConversationResponse, List[MessageResponse]]]:
    """Scripted conversations between the current user and up to four others.

    Returned most recent first; only the first one has an unread message.
    """
    seeded = []
    for index, user in enumerate(others[:4]):
        conversation = ConversationResponse(
            participant_ids=[current_user.id, user.id], last_message_at=now
        )
        script = [
            (
                user,
                "Hey! I saw your post about that product. Is it still available?",
                3600,
            ),
            (
                current_user,
                "Yes! It's still available. Would you like to know more about it?",
                3500,
            ),
            (
                user,
                "That would be great! Can you tell me more about the condition?",
                3400,
            ),
        ]
        messages = [
            MessageResponse(
                conversation_id=conversation.id,
                sender_id=sender.id,
                text=text,
                created_at=now - timedelta(seconds=offset * (index + 1)),
                is_read=sender.id == current_user.id or index > 0,
            )
            for sender, text, offset in script
        ]
        conversation = conversation.model_copy(
            update={
                "last_message": messages[-1],
                "last_message_at": messages[-1].created_at,
                "unread_count": 1 if index == 0 else 0,
            }
        )
        seeded.append((conversation, messages))

    seeded.sort(key=lambda pair: pair[0].last_message_at, reverse=True)
    return seeded


def seed_notifications(
    users: List[UserResponse], now: datetime
) -> List[NotificationResponse]:
    notifications = []
    # (type, title, action, age in seconds, is_read)
    samples = [
        (NotificationType.NEW_MESSAGE, "New Message", "sent you a message", 300, False),
        (
            NotificationType.NEW_COMMENT,
            "New Comment",
            "commented on your post",
            1800,
            False,
        ),
        (NotificationType.NEW_LIKE, "New Like", "liked your post", 3600, True),
        (
            NotificationType.NEW_FOLLOWER,
            "New Follower",
            "started following you",
            7200,
            True,
        ),
    ]
    for user, (type, title, action, age, is_read) in zip(users[1:], samples):
        notifications.append(
            NotificationResponse(
                type=type,
                title=title,
                message=f"{user.display_name} {action}",
                user_id=user.id,
                created_at=now - timedelta(seconds=age),
                is_read=is_read,
            )
        )
    return notifications


def seed_posts(
    users: List[UserResponse], products: List[ProductResponse], now: datetime
) -> List[PostResponse]:
    """One post per product for the first eight products, newest first."""
    # (author index, caption, like count, comment count, is_liked)
    samples = [
        (
            0,
            "Just got these AirPods Pro and they're amazing! "
            "The noise cancellation is incredible 🎧✨",
            1245,
            89,
            False,
        ),
        (
            1,
            "Love my new smartwatch! "
            "The fitness tracking features are so detailed 📊💪",
            892,
            67,
            True,
        ),
        (
            2,
            "Perfect sunglasses for summer! "
            "Great quality and they look so stylish 😎",
            567,
            34,
            False,
        ),
        (
            3,
            "This leather jacket is my new favorite! So comfortable and well-made 🧥",
            1234,
            92,
            True,
        ),
        (
            4,
            "My room looks amazing with these LED lights! "
            "The colors are so vibrant 🌈",
            789,
            45,
            False,
        ),
        (
            5,
            "This diffuser has changed my sleep routine. So relaxing! 😴✨",
            634,
            38,
            True,
        ),
        (
            0,
            "Best skincare routine I've tried! "
            "My skin has never looked better 💆‍♀️",
            2156,
            156,
            False,
        ),
        (
            4,
            "Perfect yoga mat for my daily practice. "
            "The grip is excellent 🧘‍♀️",
            456,
            29,
            False,
        ),
    ]
    posts = []
    for index, (product, sample) in enumerate(zip(products, samples)):
        author, caption, like_count, comment_count, is_liked = sample
        if author >= len(users):
            continue
        posts.append(
            PostResponse(
                id=stable_id("post", str(index + 1)),
                product_id=product.id,
                user_id=users[author].id,
                caption=caption,
                created_at=now - timedelta(hours=index + 1),
                like_count=like_count,
                comment_count=comment_count,
                is_liked=is_liked,
            )
        )
    return posts


def seed_comments(
    posts: List[PostResponse], users: List[UserResponse], now: datetime
) -> List[CommentResponse]:
    """Threads for the first four posts, oldest comment first per post."""
    # (post index, author index, text, age in seconds, like count, is_liked)
    samples = [
        (0, 1, "I've been wanting these! How's the battery life?", 3000, 45, False),
        (0, 2, "The spatial audio is game-changing! 🎵", 2800, 32, True),
        (0, 3, "Perfect for my daily commute!", 2600, 18, False),
        (1, 0, "Which fitness features do you use most?", 6800, 28, False),
        (1, 3, "Love the heart rate monitoring! ❤️", 6500, 41, True),
        (2, 1, "So stylish! Where did you get them?", 10400, 22, False),
        (3, 2, "This looks so classy! 😍", 14000, 67, True),
        (3, 4, "Is it warm enough for winter?", 13500, 15, False),
    ]
    comments = []
    for post_index, author, text, age, like_count, is_liked in samples:
        if post_index >= len(posts) or author >= len(users):
            continue
        comments.append(
            CommentResponse(
                post_id=posts[post_index].id,
                user_id=users[author].id,
                text=text,
                created_at=now - timedelta(seconds=age),
                like_count=like_count,
                is_liked=is_liked,
            )
        )
    return comments


def seed_quotes(users: List[UserResponse], now: datetime) -> List[QuoteResponse]:
    """Quotes by the first three users, newest first."""
    # (author index, text, tags)
    samples = [
        (0, "Ship, learn, iterate.", ["build", "learn"]),
        (1, "Small steps. Big outcomes.", ["growth"]),
        (2, "Focus is a superpower.", ["focus"]),
        (0, "Consistency beats intensity.", ["habits"]),
    ]
    quotes = []
    for index, (author, text, tags) in enumerate(samples):
        if author >= len(users):
            continue
        quotes.append(
            QuoteResponse(
                id=stable_id("quote", text),
                author_id=users[author].id,
                author_display_name=users[author].display_name,
                text=text,
                tags=tags,
                created_at=now - timedelta(hours=index),
            )
        )
    return quotes


def _timed_sets(count: int, seconds: float) -> List[ExerciseSet]:
    return [ExerciseSet(duration=seconds) for _ in range(count)]


def seed_workouts(now: datetime) -> List[WorkoutResponse]:
    return [
        WorkoutResponse(
            id=stable_id("workout", "Morning Strength"),
            name="Morning Strength",
            exercises=[
                Exercise(
                    name="Push-ups",
                    sets=[ExerciseSet(reps=r) for r in (15, 12, 10)],
                    category=ExerciseCategory.STRENGTH,
                ),
                Exercise(
                    name="Squats",
                    sets=[ExerciseSet(reps=r) for r in (20, 18, 15)],
                    category=ExerciseCategory.STRENGTH,
                ),
                Exercise(
                    name="Plank",
                    sets=_timed_sets(3, 30),
                    category=ExerciseCategory.STRENGTH,
                ),
            ],
            date_created=now,
            category=WorkoutCategory.STRENGTH,
        ),
        WorkoutResponse(
            id=stable_id("workout", "Cardio Blast"),
            name="Cardio Blast",
            exercises=[
                Exercise(
                    name="Jumping Jacks",
                    sets=_timed_sets(3, 60),
                    category=ExerciseCategory.CARDIO,
                ),
                Exercise(
                    name="High Knees",
                    sets=_timed_sets(3, 45),
                    category=ExerciseCategory.CARDIO,
                ),
                Exercise(
                    name="Burpees",
                    sets=[ExerciseSet(reps=r) for r in (10, 8, 6)],
                    category=ExerciseCategory.CARDIO,
                ),
            ],
            date_created=now,
            category=WorkoutCategory.HIIT,
        ),
        WorkoutResponse(
            id=stable_id("workout", "Yoga Flow"),
            name="Yoga Flow",
            exercises=[
                Exercise(
                    name="Downward Dog",
                    sets=_timed_sets(2, 60),
                    category=ExerciseCategory.FLEXIBILITY,
                ),
                Exercise(
                    name="Warrior Pose",
                    sets=_timed_sets(2, 45),
                    category=ExerciseCategory.FLEXIBILITY,
                ),
                Exercise(
                    name="Tree Pose",
                    sets=_timed_sets(2, 30),
                    category=ExerciseCategory.FLEXIBILITY,
                ),
            ],
            date_created=now,
            category=WorkoutCategory.YOGA,
        ),
    ]
