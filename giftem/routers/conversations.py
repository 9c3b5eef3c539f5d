import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from giftem.dependencies import get_conversation_service, get_user_service
from giftem.models.api.conversations import (
    ConversationResponse,
    CreateConversationRequest,
    UnreadCountResponse,
)
from giftem.models.api.messages import MessageResponse, SendMessageRequest
from giftem.services.conversation_service import ConversationService
from giftem.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ConversationResponse])
async def list_conversations(
    service: ConversationService = Depends(get_conversation_service),
) -> List[ConversationResponse]:
    """List the current user's conversations, most recently active first."""
    return service.list_conversations()


@router.post("", response_model=ConversationResponse)
async def get_or_create_conversation(
    request: CreateConversationRequest,
    service: ConversationService = Depends(get_conversation_service),
    user_service: UserService = Depends(get_user_service),
) -> ConversationResponse:
    """
    Open the conversation with another user, creating it on first contact.

    Body:
    - user_id: the other participant
    """
    if user_service.get_user(request.user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    try:
        return service.get_or_create_conversation(request.user_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to open conversation with %s", request.user_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    service: ConversationService = Depends(get_conversation_service),
) -> UnreadCountResponse:
    """Total unread incoming messages across all conversations."""
    return UnreadCountResponse(unread_count=service.get_total_unread_count())


@router.get("/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """
    Get a specific conversation.

    Path parameters:
    - conversation_id: UUID of the conversation
    """
    conversation = service.get_conversation(conversation_id)
    if conversation is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return conversation


@router.get("/{conversation_id}/messages", response_model=List[MessageResponse])
async def get_conversation_messages(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> List[MessageResponse]:
    """Get all messages of a conversation, oldest first; empty when unknown."""
    return service.get_messages(conversation_id)


@router.post("/{conversation_id}/messages", response_model=List[MessageResponse])
async def send_message(
    conversation_id: UUID,
    request: SendMessageRequest,
    service: ConversationService = Depends(get_conversation_service),
) -> List[MessageResponse]:
    """
    Send a message from the current user.

    Blank text and unknown conversations are ignored. Returns the
    conversation's messages after the send; the other participant's reply
    arrives later.
    """
    service.send_message(conversation_id, request.text)
    return service.get_messages(conversation_id)


@router.post("/{conversation_id}/read", response_model=List[MessageResponse])
async def mark_conversation_as_read(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> List[MessageResponse]:
    """Mark every message of a conversation as read."""
    service.mark_conversation_as_read(conversation_id)
    return service.get_messages(conversation_id)


@router.delete("/{conversation_id}", status_code=204)
async def delete_conversation(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> None:
    """Delete a conversation and its messages."""
    service.delete_conversation(conversation_id)
