from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from giftem.dependencies import get_quote_service
from giftem.models.api.quotes import CreateQuoteRequest, QuoteResponse, QuoteTagStat
from giftem.services.quote_service import TRENDING_LIMIT, QuoteService

router = APIRouter()


@router.get("", response_model=List[QuoteResponse])
async def list_quotes(
    tag: Optional[str] = Query(None, description="Only quotes carrying this tag"),
    author_id: Optional[UUID] = Query(None, description="Only quotes by this user"),
    service: QuoteService = Depends(get_quote_service),
) -> List[QuoteResponse]:
    """List quotes, newest first."""
    if author_id is not None:
        quotes = service.quotes_for_user(author_id)
        return [q for q in quotes if tag is None or tag in q.tags]
    return service.list_quotes(tag=tag)


@router.post("", response_model=QuoteResponse)
async def add_quote(
    request: CreateQuoteRequest, service: QuoteService = Depends(get_quote_service)
) -> QuoteResponse:
    """
    Post a quote as the current user.

    Body:
    - text: Quote content, must not be blank
    - tags: Optional list of tags
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Quote text must not be blank")
    quote = await service.add_quote(request.text, request.tags)
    if quote is None:
        raise HTTPException(status_code=409, detail="No current user")
    return quote


@router.get("/trending", response_model=List[QuoteResponse])
async def trending_quotes(
    limit: int = Query(TRENDING_LIMIT, description="Maximum number of quotes", ge=0),
    service: QuoteService = Depends(get_quote_service),
) -> List[QuoteResponse]:
    """Quotes ranked by likes plus bookmarks."""
    return service.trending(limit)


@router.get("/tags", response_model=List[QuoteTagStat])
async def tag_stats(
    service: QuoteService = Depends(get_quote_service),
) -> List[QuoteTagStat]:
    """Tag usage counts, most used first."""
    return service.tag_stats()


@router.get("/daily", response_model=QuoteResponse)
async def daily_inspiration(
    service: QuoteService = Depends(get_quote_service),
) -> QuoteResponse:
    quote = service.daily_inspiration()
    if quote is None:
        raise HTTPException(status_code=404, detail="No quotes yet")
    return quote


@router.get("/bookmarks", response_model=List[QuoteResponse])
async def favorite_quotes(
    service: QuoteService = Depends(get_quote_service),
) -> List[QuoteResponse]:
    """Quotes bookmarked by the current user."""
    return service.favorite_quotes()


@router.get("/favorite-authors", response_model=List[UUID])
async def favorite_authors(
    service: QuoteService = Depends(get_quote_service),
) -> List[UUID]:
    return service.favorite_author_ids()


@router.post("/favorite-authors/{author_id}", response_model=List[UUID])
async def toggle_favorite_author(
    author_id: UUID, service: QuoteService = Depends(get_quote_service)
) -> List[UUID]:
    """Add or remove an author from the current user's favourites."""
    favorites = await service.toggle_favorite_author(author_id)
    if favorites is None:
        raise HTTPException(status_code=404, detail="User not found")
    return favorites


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: UUID, service: QuoteService = Depends(get_quote_service)
) -> QuoteResponse:
    quote = service.get_quote(quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.post("/{quote_id}/like", response_model=QuoteResponse)
async def toggle_quote_like(
    quote_id: UUID, service: QuoteService = Depends(get_quote_service)
) -> QuoteResponse:
    quote = await service.toggle_like(quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.post("/{quote_id}/bookmark", response_model=QuoteResponse)
async def toggle_quote_bookmark(
    quote_id: UUID, service: QuoteService = Depends(get_quote_service)
) -> QuoteResponse:
    quote = await service.toggle_bookmark(quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote
