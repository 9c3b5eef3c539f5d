from typing import Dict, List
from uuid import UUID

from giftem.models.api.messages import MessageResponse


class MessageRepository:
    """Repository for message lists keyed by conversation ID."""

    def __init__(self) -> None:
        self.messages: Dict[UUID, List[MessageResponse]] = {}

    def get_by_conversation(self, conversation_id: UUID) -> List[MessageResponse]:
        """Get all messages for a conversation, oldest first."""
        return list(self.messages.get(conversation_id, []))

    def init_conversation(self, conversation_id: UUID) -> None:
        self.messages.setdefault(conversation_id, [])

    def append(self, message: MessageResponse) -> MessageResponse:
        self.messages.setdefault(message.conversation_id, []).append(message)
        return message

    def mark_all_read(self, conversation_id: UUID) -> int:
        """Rewrite every message of a conversation as read.

        Returns the number of messages that changed state.
        """
        messages = self.messages.get(conversation_id)
        if messages is None:
            return 0
        changed = sum(1 for m in messages if not m.is_read)
        self.messages[conversation_id] = [
            m if m.is_read else m.model_copy(update={"is_read": True})
            for m in messages
        ]
        return changed

    def delete_by_conversation(self, conversation_id: UUID) -> bool:
        return self.messages.pop(conversation_id, None) is not None
