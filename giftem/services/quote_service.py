import logging
from collections import Counter
from typing import Dict, List, Optional
from uuid import UUID

from giftem.models.api.quotes import QuoteResponse, QuoteTagStat
from giftem.repositories.quote_repository import QuoteRepository
from giftem.repositories.settings_repository import SettingsStore
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import Scheduler

logger = logging.getLogger(__name__)

QUOTES_KEY = "quotes"
FAVORITE_AUTHORS_KEY = "favorite_authors"

TRENDING_LIMIT = 5


class QuoteService:
    """Service for user quotes.

    Likes, bookmarks and favourite authors are kept per user, so each toggle
    adds or removes the current user's ID rather than flipping a shared flag.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        scheduler: Scheduler,
        settings_store: Optional[SettingsStore] = None,
        quotes: Optional[List[QuoteResponse]] = None,
    ):
        self.user_repo = user_repo
        self.scheduler = scheduler
        self.settings_store = settings_store
        self.quote_repo = QuoteRepository(quotes)
        self.favorite_authors: Dict[UUID, List[UUID]] = {}

    async def load(self) -> None:
        if self.settings_store is None:
            return
        quotes = await self.settings_store.load(QUOTES_KEY)
        if quotes:
            loaded = [QuoteResponse.model_validate(q) for q in quotes]
            loaded.sort(key=lambda q: q.created_at, reverse=True)
            self.quote_repo.replace_all(loaded)
        favorites = await self.settings_store.load(FAVORITE_AUTHORS_KEY)
        if favorites:
            self.favorite_authors = {
                UUID(user_id): [UUID(a) for a in author_ids]
                for user_id, author_ids in favorites.items()
            }
        logger.info("Loaded %d quotes from local mirror", len(self.quote_repo))

    async def _save_quotes(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                QUOTES_KEY,
                [q.model_dump(mode="json") for q in self.quote_repo.records],
            )

    async def _save_favorites(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                FAVORITE_AUTHORS_KEY,
                {
                    str(user_id): [str(a) for a in author_ids]
                    for user_id, author_ids in self.favorite_authors.items()
                },
            )

    # Read models

    def list_quotes(self, tag: Optional[str] = None) -> List[QuoteResponse]:
        if tag is None:
            return self.quote_repo.get_all()
        return [q for q in self.quote_repo.records if tag in q.tags]

    def get_quote(self, quote_id: UUID) -> Optional[QuoteResponse]:
        return self.quote_repo.get_by_id(quote_id)

    def quotes_for_user(self, user_id: UUID) -> List[QuoteResponse]:
        return self.quote_repo.get_by_author(user_id)

    def favorite_quotes(self) -> List[QuoteResponse]:
        """Quotes bookmarked by the current user."""
        current_user = self.user_repo.get_current_user()
        if current_user is None:
            return []
        return self.quote_repo.get_bookmarked_by(current_user.id)

    def daily_inspiration(self) -> Optional[QuoteResponse]:
        """The newest quote."""
        return max(self.quote_repo.records, key=lambda q: q.created_at, default=None)

    def tag_stats(self) -> List[QuoteTagStat]:
        counts = Counter(tag for q in self.quote_repo.records for tag in q.tags)
        return [
            QuoteTagStat(tag=tag, count=count)
            for tag, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        ]

    def trending(self, limit: int = TRENDING_LIMIT) -> List[QuoteResponse]:
        """Quotes with the most likes plus bookmarks; ties keep feed order."""
        if limit < 0:
            raise ValueError("Limit must be non-negative")
        ranked = sorted(
            self.quote_repo.records,
            key=lambda q: q.like_count + q.bookmark_count,
            reverse=True,
        )
        return ranked[:limit]

    def favorite_author_ids(self) -> List[UUID]:
        current_user = self.user_repo.get_current_user()
        if current_user is None:
            return []
        return list(self.favorite_authors.get(current_user.id, []))

    def is_favorite_author(self, author_id: UUID) -> bool:
        return author_id in self.favorite_author_ids()

    # Mutations

    async def add_quote(
        self, text: str, tags: Optional[List[str]] = None
    ) -> Optional[QuoteResponse]:
        """
        Post a quote as the current user:

        1. Ignore the call when there is no current user or the text is blank
        2. Trim tags, dropping empty and repeated ones
        3. Insert the quote at the top of the feed and mirror it
        """
        current_user = self.user_repo.get_current_user()
        if current_user is None or not text.strip():
            return None

        clean_tags: List[str] = []
        for tag in tags or []:
            tag = tag.strip()
            if tag and tag not in clean_tags:
                clean_tags.append(tag)

        quote = self.quote_repo.insert_first(
            QuoteResponse(
                author_id=current_user.id,
                author_display_name=current_user.display_name,
                text=text.strip(),
                tags=clean_tags,
                created_at=self.scheduler.now(),
            )
        )
        await self._save_quotes()
        logger.info("User %s posted quote %s", current_user.id, quote.id)
        return quote

    async def toggle_like(self, quote_id: UUID) -> Optional[QuoteResponse]:
        return await self._toggle_membership(quote_id, "like_user_ids")

    async def toggle_bookmark(self, quote_id: UUID) -> Optional[QuoteResponse]:
        return await self._toggle_membership(quote_id, "bookmark_user_ids")

    async def _toggle_membership(
        self, quote_id: UUID, field: str
    ) -> Optional[QuoteResponse]:
        current_user = self.user_repo.get_current_user()
        quote = self.quote_repo.get_by_id(quote_id)
        if current_user is None or quote is None:
            return None

        user_ids = list(getattr(quote, field))
        if current_user.id in user_ids:
            user_ids.remove(current_user.id)
        else:
            user_ids.append(current_user.id)
        updated = quote.model_copy(update={field: user_ids})
        self.quote_repo.update(updated)
        await self._save_quotes()
        return updated

    async def toggle_favorite_author(self, author_id: UUID) -> Optional[List[UUID]]:
        """Add or remove an author from the current user's favourites.

        Returns the updated favourites, or None when there is no current user
        or the author is unknown.
        """
        current_user = self.user_repo.get_current_user()
        if current_user is None or self.user_repo.get_by_id(author_id) is None:
            return None

        favorites = self.favorite_authors.setdefault(current_user.id, [])
        if author_id in favorites:
            favorites.remove(author_id)
        else:
            favorites.append(author_id)
        await self._save_favorites()
        return list(favorites)
