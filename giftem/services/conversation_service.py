import logging
import random
from typing import Dict, List, Optional
from uuid import UUID

from giftem.models.api.conversations import ConversationResponse
from giftem.models.api.messages import MessageResponse
from giftem.repositories.conversation_repository import ConversationRepository
from giftem.repositories.message_repository import MessageRepository
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import ScheduledTask, Scheduler
from giftem.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

AUTO_REPLY_DELAY_SECONDS = 2.0

CANNED_REPLIES = (
    "Thanks for getting back to me!",
    "That sounds great!",
    "I'm definitely interested.",
    "When can we arrange the details?",
    "Perfect! Let me know.",
    "Awesome, thanks!",
)


class NoCurrentUserError(RuntimeError):
    """Raised when an operation needs a current user and none is set."""


class ConversationService:
    """Owns conversations and their messages for the current user.

    Conversations are kept most-recently-active first: every send and every
    simulated reply moves the conversation to the front. Replies from the other
    participant are simulated with a delayed callback on the scheduler.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        scheduler: Scheduler,
        notification_service: Optional[NotificationService] = None,
        auto_reply_delay: float = AUTO_REPLY_DELAY_SECONDS,
        rng: Optional[random.Random] = None,
    ):
        self.user_repo = user_repo
        self.scheduler = scheduler
        self.notification_service = notification_service
        self.auto_reply_delay = auto_reply_delay
        self.rng = rng or random.Random()
        self.conversation_repo = ConversationRepository()
        self.message_repo = MessageRepository()
        self._pending_replies: Dict[UUID, List[ScheduledTask]] = {}

    # Read models

    def list_conversations(self) -> List[ConversationResponse]:
        return self.conversation_repo.get_all()

    def get_conversation(self, conversation_id: UUID) -> Optional[ConversationResponse]:
        return self.conversation_repo.get_by_id(conversation_id)

    def find_conversation(self, with_user_id: UUID) -> Optional[ConversationResponse]:
        """Find the conversation between the current user and another user."""
        current_user = self.user_repo.get_current_user()
        if current_user is None:
            return None
        return self.conversation_repo.get_by_participants(current_user.id, with_user_id)

    def get_messages(self, conversation_id: UUID) -> List[MessageResponse]:
        return self.message_repo.get_by_conversation(conversation_id)

    def get_total_unread_count(self) -> int:
        return self.conversation_repo.total_unread()

    # Mutations

    def get_or_create_conversation(self, with_user_id: UUID) -> ConversationResponse:
        """
        Return the conversation with another user, creating it if needed.

        A new conversation starts with no messages and goes to the front of
        the list. Raises NoCurrentUserError when no current user is set and
        ValueError when the other user is the current user.
        """
        current_user = self.user_repo.get_current_user()
        if current_user is None:
            raise NoCurrentUserError("No current user")
        if with_user_id == current_user.id:
            raise ValueError("Cannot start a conversation with yourself")

        existing = self.find_conversation(with_user_id)
        if existing is not None:
            return existing

        conversation = ConversationResponse(
            participant_ids=[current_user.id, with_user_id],
            last_message_at=self.scheduler.now(),
        )
        self.conversation_repo.insert_first(conversation)
        self.message_repo.init_conversation(conversation.id)
        logger.info(
            "Created conversation %s with user %s", conversation.id, with_user_id
        )
        return conversation

    def send_message(
        self, conversation_id: UUID, text: str
    ) -> Optional[MessageResponse]:
        """
        Send a message from the current user:

        1. Reject silently when there is no current user, the text is blank
           or the conversation does not exist
        2. Append the message to the conversation's list
        3. Refresh the conversation cache and move it to the front
        4. Schedule the simulated reply
        """
        current_user = self.user_repo.get_current_user()
        if current_user is None or not text.strip():
            return None
        conversation = self.conversation_repo.get_by_id(conversation_id)
        if conversation is None:
            return None

        message = self.message_repo.append(
            MessageResponse(
                conversation_id=conversation_id,
                sender_id=current_user.id,
                text=text,
                created_at=self.scheduler.now(),
            )
        )

        # Unread only counts incoming messages
        self.conversation_repo.move_to_front(
            conversation.model_copy(
                update={
                    "last_message": message,
                    "last_message_at": message.created_at,
                    "unread_count": 0,
                }
            )
        )

        task = self.scheduler.call_later(
            self.auto_reply_delay, lambda: self._simulate_reply(conversation_id)
        )
        self._pending_replies.setdefault(conversation_id, []).append(task)
        return message

    def mark_conversation_as_read(self, conversation_id: UUID) -> None:
        conversation = self.conversation_repo.get_by_id(conversation_id)
        if conversation is None:
            return
        self.conversation_repo.update(
            conversation.model_copy(update={"unread_count": 0})
        )
        self.message_repo.mark_all_read(conversation_id)

    def delete_conversation(self, conversation_id: UUID) -> None:
        deleted = self.conversation_repo.delete(conversation_id)
        self.message_repo.delete_by_conversation(conversation_id)
        for task in self._pending_replies.pop(conversation_id, []):
            task.cancel()
        if deleted:
            logger.info("Deleted conversation %s", conversation_id)

    def seed(
        self, conversation: ConversationResponse, messages: List[MessageResponse]
    ) -> None:
        """Load a pre-built conversation, keeping the list ordered by recency."""
        self.conversation_repo.create(conversation)
        for message in messages:
            self.message_repo.append(message)
        self.conversation_repo.records.sort(
            key=lambda c: c.last_message_at, reverse=True
        )

    # Simulated backend

    def _simulate_reply(self, conversation_id: UUID) -> None:
        pending = self._pending_replies.get(conversation_id)
        if pending:
            pending.pop(0)
            if not pending:
                del self._pending_replies[conversation_id]

        # Look the conversation up again, it may have been deleted meanwhile
        conversation = self.conversation_repo.get_by_id(conversation_id)
        current_user = self.user_repo.get_current_user()
        if conversation is None or current_user is None:
            logger.debug(
                "Skipping auto-reply for missing conversation %s", conversation_id
            )
            return
        other_user_id = conversation.other_participant_id(current_user.id)
        if other_user_id is None:
            return

        reply = MessageResponse(
            conversation_id=conversation_id,
            sender_id=other_user_id,
            text=self.rng.choice(CANNED_REPLIES),
            created_at=self.scheduler.now(),
        )
        self.message_repo.append(reply)
        self.conversation_repo.move_to_front(
            conversation.model_copy(
                update={
                    "last_message": reply,
                    "last_message_at": reply.created_at,
                    "unread_count": conversation.unread_count + 1,
                }
            )
        )
        logger.info("Auto-reply delivered to conversation %s", conversation_id)

        if self.notification_service is not None:
            other_user = self.user_repo.get_by_id(other_user_id)
            name = other_user.display_name if other_user else "Someone"
            self.notification_service.add_message_notification(
                user_name=name, conversation_id=conversation_id, user_id=other_user_id
            )
