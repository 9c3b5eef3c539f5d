from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from giftem.models.api.users import UserResponse
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import ManualScheduler
from giftem.seed import seed_quotes
from giftem.services.quote_service import (
    FAVORITE_AUTHORS_KEY,
    QUOTES_KEY,
    QuoteService,
)


class TestQuoteService:
    """Unit tests for QuoteService."""

    @pytest.fixture
    def service(
        self,
        user_repo: UserRepository,
        users: list[UserResponse],
        scheduler: ManualScheduler,
        mock_settings_store: AsyncMock,
    ) -> QuoteService:
        return QuoteService(
            user_repo,
            scheduler,
            mock_settings_store,
            quotes=seed_quotes(users, scheduler.now()),
        )

    def test_seeded_quotes(
        self, service: QuoteService, users: list[UserResponse]
    ) -> None:
        quotes = service.list_quotes()

        assert [q.text for q in quotes] == [
            "Ship, learn, iterate.",
            "Small steps. Big outcomes.",
            "Focus is a superpower.",
            "Consistency beats intensity.",
        ]
        assert len(service.quotes_for_user(users[0].id)) == 2
        assert [q.text for q in service.list_quotes(tag="focus")] == [
            "Focus is a superpower."
        ]

    @pytest.mark.asyncio
    async def test_add_quote(
        self,
        service: QuoteService,
        users: list[UserResponse],
        scheduler: ManualScheduler,
        mock_settings_store: AsyncMock,
    ) -> None:
        scheduler.advance(60)

        quote = await service.add_quote(
            "  Done beats perfect.  ", [" growth ", "", "growth", "focus"]
        )

        assert quote is not None
        assert quote.text == "Done beats perfect."
        assert quote.tags == ["growth", "focus"]
        assert quote.author_id == users[0].id
        assert quote.author_display_name == users[0].display_name
        assert service.list_quotes()[0] == quote
        assert service.daily_inspiration() == quote
        mock_settings_store.save.assert_awaited_once()
        assert mock_settings_store.save.await_args.args[0] == QUOTES_KEY

    @pytest.mark.asyncio
    async def test_blank_quote_is_ignored(
        self, service: QuoteService, mock_settings_store: AsyncMock
    ) -> None:
        assert await service.add_quote("   ") is None
        assert len(service.list_quotes()) == 4
        mock_settings_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_quote_without_current_user(
        self, service: QuoteService, user_repo: UserRepository
    ) -> None:
        user_repo.current_user_id = None

        assert await service.add_quote("Hello") is None
        assert service.favorite_quotes() == []

    @pytest.mark.asyncio
    async def test_like_toggles_current_user(
        self, service: QuoteService, users: list[UserResponse]
    ) -> None:
        quote_id = service.list_quotes()[1].id

        liked = await service.toggle_like(quote_id)
        assert liked is not None
        assert liked.like_user_ids == [users[0].id]
        assert liked.like_count == 1

        unliked = await service.toggle_like(quote_id)
        assert unliked is not None
        assert unliked.like_count == 0

    @pytest.mark.asyncio
    async def test_bookmarks_become_favorites(self, service: QuoteService) -> None:
        quote_id = service.list_quotes()[2].id

        bookmarked = await service.toggle_bookmark(quote_id)

        assert bookmarked is not None
        assert bookmarked.bookmark_count == 1
        assert service.favorite_quotes() == [bookmarked]

    @pytest.mark.asyncio
    async def test_toggle_unknown_quote(self, service: QuoteService) -> None:
        assert await service.toggle_like(uuid4()) is None
        assert await service.toggle_bookmark(uuid4()) is None

    @pytest.mark.asyncio
    async def test_trending(self, service: QuoteService) -> None:
        quotes = service.list_quotes()
        await service.toggle_like(quotes[2].id)
        await service.toggle_bookmark(quotes[2].id)
        await service.toggle_like(quotes[1].id)

        trending = service.trending(limit=2)

        assert [q.id for q in trending] == [quotes[2].id, quotes[1].id]
        assert len(service.trending()) == 4

    def test_trending_negative_limit(self, service: QuoteService) -> None:
        with pytest.raises(ValueError, match="Limit must be non-negative"):
            service.trending(limit=-1)

    @pytest.mark.asyncio
    async def test_tag_stats(self, service: QuoteService) -> None:
        await service.add_quote("Deep work wins.", ["focus"])

        stats = [(s.tag, s.count) for s in service.tag_stats()]

        assert stats == [
            ("focus", 2),
            ("build", 1),
            ("growth", 1),
            ("habits", 1),
            ("learn", 1),
        ]

    @pytest.mark.asyncio
    async def test_toggle_favorite_author(
        self,
        service: QuoteService,
        users: list[UserResponse],
        mock_settings_store: AsyncMock,
    ) -> None:
        favorites = await service.toggle_favorite_author(users[1].id)

        assert favorites == [users[1].id]
        assert service.is_favorite_author(users[1].id)
        mock_settings_store.save.assert_awaited_once_with(
            FAVORITE_AUTHORS_KEY, {str(users[0].id): [str(users[1].id)]}
        )

        assert await service.toggle_favorite_author(users[1].id) == []
        assert not service.is_favorite_author(users[1].id)

    @pytest.mark.asyncio
    async def test_favorite_unknown_author(self, service: QuoteService) -> None:
        assert await service.toggle_favorite_author(uuid4()) is None
        assert service.favorite_author_ids() == []

    @pytest.mark.asyncio
    async def test_load_from_mirror(
        self,
        service: QuoteService,
        users: list[UserResponse],
        scheduler: ManualScheduler,
        mock_settings_store: AsyncMock,
    ) -> None:
        """Test that mirrored quotes replace the seed, newest first."""
        older, newer = seed_quotes(users, scheduler.now())[:2]
        newer = newer.model_copy(
            update={"created_at": scheduler.now() + timedelta(hours=1)}
        )
        blobs = {
            QUOTES_KEY: [older.model_dump(mode="json"), newer.model_dump(mode="json")],
            FAVORITE_AUTHORS_KEY: {str(users[0].id): [str(users[2].id)]},
        }
        mock_settings_store.load.side_effect = lambda key: blobs.get(key)

        await service.load()

        assert [q.id for q in service.list_quotes()] == [newer.id, older.id]
        assert service.favorite_author_ids() == [users[2].id]
