import asyncio
import os
import random
import tempfile
from typing import Any, Generator
from unittest.mock import AsyncMock

# Point the local mirror at a throwaway SQLite file before giftem is imported
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(), "giftem-test.db"),
)
# FastAPI requires a non-empty OpenAPI version; main.py uses COMMIT_HASH for it
os.environ.setdefault("COMMIT_HASH", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from giftem.dependencies import (  # noqa: E402
    get_cart_service,
    get_comment_service,
    get_conversation_service,
    get_feed_service,
    get_notification_service,
    get_product_service,
    get_quote_service,
    get_user_service,
    get_workout_service,
)
from giftem.main import app  # noqa: E402
from giftem.models.api.users import UserResponse  # noqa: E402
from giftem.repositories.settings_repository import SettingsStore  # noqa: E402
from giftem.repositories.user_repository import UserRepository  # noqa: E402
from giftem.scheduling import ManualScheduler  # noqa: E402
from giftem.seed import seed_users  # noqa: E402
from giftem.services.conversation_service import ConversationService  # noqa: E402
from giftem.services.notification_service import NotificationService  # noqa: E402
from giftem.state import AppServices, build_services  # noqa: E402


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Virtual clock; callbacks only fire on advance()."""
    return ManualScheduler()


@pytest.fixture
def users() -> list[UserResponse]:
    return seed_users()


@pytest.fixture
def user_repo(users: list[UserResponse]) -> UserRepository:
    """Roster with the first seeded user as current user."""
    return UserRepository(users, current_user_id=users[0].id)


@pytest.fixture
def notification_service(scheduler: ManualScheduler) -> NotificationService:
    return NotificationService(scheduler)


@pytest.fixture
def conversation_service(
    user_repo: UserRepository,
    scheduler: ManualScheduler,
    notification_service: NotificationService,
) -> ConversationService:
    """Conversation manager with no seeded conversations."""
    return ConversationService(
        user_repo,
        scheduler,
        notification_service=notification_service,
        rng=random.Random(7),
    )


@pytest.fixture
def mock_settings_store() -> AsyncMock:
    """Mock local mirror for unit tests."""
    store = AsyncMock(spec=SettingsStore)
    store.load.return_value = None
    return store


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_services(scheduler: ManualScheduler) -> AppServices:
    """Seeded stores on the virtual clock, without a local mirror."""
    return asyncio.run(build_services(scheduler, rng=random.Random(7)))


@pytest.fixture
def api_client(app_services: AppServices) -> Generator[TestClient, Any, None]:
    """Test client whose routes use 'app_services' instead of the app's own."""
    app.dependency_overrides[get_user_service] = lambda: app_services.users
    app.dependency_overrides[get_product_service] = lambda: app_services.products
    app.dependency_overrides[get_conversation_service] = (
        lambda: app_services.conversations
    )
    app.dependency_overrides[get_cart_service] = lambda: app_services.cart
    app.dependency_overrides[get_notification_service] = (
        lambda: app_services.notifications
    )
    app.dependency_overrides[get_feed_service] = lambda: app_services.feed
    app.dependency_overrides[get_comment_service] = lambda: app_services.comments
    app.dependency_overrides[get_quote_service] = lambda: app_services.quotes
    app.dependency_overrides[get_workout_service] = lambda: app_services.workouts
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
