from datetime import timedelta
from uuid import uuid4

import pytest

from giftem.models.api.notifications import NotificationType
from giftem.models.api.users import UserResponse
from giftem.repositories.user_repository import UserRepository
from giftem.scheduling import ManualScheduler
from giftem.services.conversation_service import (
    AUTO_REPLY_DELAY_SECONDS,
    CANNED_REPLIES,
    ConversationService,
    NoCurrentUserError,
)
from giftem.services.notification_service import NotificationService


class TestGetOrCreateConversation:
    """Unit tests for opening conversations."""

    def test_creates_conversation_at_front(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        """Test that a new conversation is created empty and put first."""
        first = conversation_service.get_or_create_conversation(users[1].id)
        second = conversation_service.get_or_create_conversation(users[2].id)

        conversations = conversation_service.list_conversations()
        assert [c.id for c in conversations] == [second.id, first.id]
        assert set(first.participant_ids) == {users[0].id, users[1].id}
        assert first.unread_count == 0
        assert first.last_message is None
        assert conversation_service.get_messages(first.id) == []

    def test_same_pair_returns_same_conversation(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        """Test that at most one conversation exists per participant pair."""
        first = conversation_service.get_or_create_conversation(users[1].id)
        again = conversation_service.get_or_create_conversation(users[1].id)

        assert again.id == first.id
        assert len(conversation_service.list_conversations()) == 1

    def test_find_conversation(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        """Test lookup by the other participant."""
        assert conversation_service.find_conversation(users[1].id) is None

        created = conversation_service.get_or_create_conversation(users[1].id)

        found = conversation_service.find_conversation(users[1].id)
        assert found is not None
        assert found.id == created.id
        assert conversation_service.find_conversation(users[2].id) is None

    def test_no_current_user_is_fatal(
        self, users: list[UserResponse], scheduler: ManualScheduler
    ) -> None:
        """Test that creating without a current user raises."""
        service = ConversationService(UserRepository(users), scheduler)

        with pytest.raises(NoCurrentUserError):
            service.get_or_create_conversation(users[1].id)

        assert service.find_conversation(users[1].id) is None

    def test_conversation_with_yourself_is_rejected(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        """Test that both participants must be different users."""
        with pytest.raises(ValueError, match="yourself"):
            conversation_service.get_or_create_conversation(users[0].id)

        assert conversation_service.list_conversations() == []


class TestSendMessage:
    """Unit tests for sending and the simulated reply."""

    def test_send_message_scenario(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        """Test send, then the reply after the delay."""
        other = conversation_service.get_or_create_conversation(users[2].id)
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.get_or_create_conversation(users[3].id)

        message = conversation_service.send_message(
            conversation.id, "Is it still available?"
        )

        assert message is not None
        messages = conversation_service.get_messages(conversation.id)
        assert len(messages) == 1
        assert messages[0].text == "Is it still available?"
        assert messages[0].sender_id == users[0].id
        assert messages[0].is_read is False
        front = conversation_service.list_conversations()[0]
        assert front.id == conversation.id
        assert front.unread_count == 0
        assert front.last_message == message

        # Bring another conversation to the front before the reply lands
        conversation_service.send_message(other.id, "Hello?")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        messages = conversation_service.get_messages(conversation.id)
        assert len(messages) == 2
        assert messages[1].sender_id == users[1].id
        assert messages[1].text in CANNED_REPLIES
        updated = conversation_service.get_conversation(conversation.id)
        assert updated is not None
        assert updated.unread_count == 1
        assert updated.last_message == messages[1]

    def test_reply_moves_conversation_to_front(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        first = conversation_service.get_or_create_conversation(users[1].id)
        second = conversation_service.get_or_create_conversation(users[2].id)

        conversation_service.send_message(first.id, "one")
        scheduler.advance(1)
        conversation_service.send_message(second.id, "two")
        assert conversation_service.list_conversations()[0].id == second.id

        scheduler.advance(1)  # first reply is due
        assert conversation_service.list_conversations()[0].id == first.id

        scheduler.advance(1)  # second reply is due
        assert conversation_service.list_conversations()[0].id == second.id

    def test_ordering_is_descending_by_last_activity(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversations = [
            conversation_service.get_or_create_conversation(u.id) for u in users[1:4]
        ]
        for conversation in conversations:
            scheduler.advance(0.5)
            conversation_service.send_message(conversation.id, "hi")
        scheduler.advance(10)

        timestamps = [
            c.last_message_at for c in conversation_service.list_conversations()
        ]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_reply_is_not_immediate(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)

        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS - 0.5)

        assert len(conversation_service.get_messages(conversation.id)) == 1
        assert conversation_service.get_total_unread_count() == 0

    def test_unread_grows_by_one_per_reply(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        before = conversation_service.get_total_unread_count()

        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        assert conversation_service.get_total_unread_count() == before + 1

    def test_reply_timestamp_follows_virtual_clock(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        sent_at = scheduler.now()

        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(5)

        reply = conversation_service.get_messages(conversation.id)[1]
        assert reply.created_at == sent_at + timedelta(
            seconds=AUTO_REPLY_DELAY_SECONDS
        )

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_text_is_ignored(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
        text: str,
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)

        assert conversation_service.send_message(conversation.id, text) is None
        assert conversation_service.get_messages(conversation.id) == []
        assert scheduler.pending == 0

    def test_send_without_current_user_is_ignored(
        self, users: list[UserResponse], scheduler: ManualScheduler
    ) -> None:
        service = ConversationService(UserRepository(users), scheduler)

        assert service.send_message(uuid4(), "hello") is None
        assert scheduler.pending == 0

    def test_send_to_unknown_conversation_is_ignored(
        self, conversation_service: ConversationService, scheduler: ManualScheduler
    ) -> None:
        """Test that nothing is stored and no reply is scheduled."""
        conversation_id = uuid4()

        assert conversation_service.send_message(conversation_id, "hello") is None

        assert conversation_service.get_messages(conversation_id) == []
        assert conversation_id not in conversation_service.message_repo.messages
        assert conversation_service.list_conversations() == []
        assert scheduler.pending == 0

    def test_send_after_delete_is_ignored(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        """Test that a deleted conversation stays gone when messaged again."""
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.delete_conversation(conversation.id)

        assert conversation_service.send_message(conversation.id, "hi") is None
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        assert conversation_service.get_messages(conversation.id) == []
        assert conversation_service.message_repo.messages == {}
        assert conversation_service.get_conversation(conversation.id) is None

    def test_reply_posts_notification(
        self,
        conversation_service: ConversationService,
        notification_service: NotificationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)

        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        notifications = notification_service.get_notifications(
            NotificationType.NEW_MESSAGE
        )
        assert len(notifications) == 1
        assert notifications[0].message == "Sarah Chen sent you a message"
        assert notifications[0].related_id == conversation.id
        assert notifications[0].user_id == users[1].id


class TestMarkConversationAsRead:
    """Unit tests for read-state management."""

    def test_mark_as_read_clears_unread(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)
        assert conversation_service.get_total_unread_count() == 1

        conversation_service.mark_conversation_as_read(conversation.id)

        assert conversation_service.get_total_unread_count() == 0
        assert all(
            m.is_read for m in conversation_service.get_messages(conversation.id)
        )

    def test_mark_as_read_is_idempotent(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(conversation.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        conversation_service.mark_conversation_as_read(conversation.id)
        once = (
            conversation_service.list_conversations(),
            conversation_service.get_messages(conversation.id),
        )
        conversation_service.mark_conversation_as_read(conversation.id)
        twice = (
            conversation_service.list_conversations(),
            conversation_service.get_messages(conversation.id),
        )

        assert once == twice

    def test_mark_as_read_keeps_position(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        first = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(first.id, "hello")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)
        conversation_service.get_or_create_conversation(users[2].id)
        order = [c.id for c in conversation_service.list_conversations()]

        conversation_service.mark_conversation_as_read(first.id)

        assert [c.id for c in conversation_service.list_conversations()] == order

    def test_mark_unknown_conversation_is_noop(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        conversation_service.get_or_create_conversation(users[1].id)
        before = conversation_service.list_conversations()

        conversation_service.mark_conversation_as_read(uuid4())

        assert conversation_service.list_conversations() == before


class TestDeleteConversation:
    """Unit tests for deletion."""

    def test_delete_removes_conversation_and_messages(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(conversation.id, "hello")

        conversation_service.delete_conversation(conversation.id)

        assert conversation_service.get_conversation(conversation.id) is None
        assert conversation_service.get_messages(conversation.id) == []
        assert conversation_service.list_conversations() == []

    def test_pending_reply_does_not_resurrect(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(conversation.id, "hello")

        conversation_service.delete_conversation(conversation.id)
        assert scheduler.pending == 0
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS * 2)

        assert conversation_service.get_conversation(conversation.id) is None
        assert conversation_service.get_messages(conversation.id) == []
        assert conversation_service.get_total_unread_count() == 0

    def test_stale_reply_callback_is_noop(
        self,
        conversation_service: ConversationService,
        users: list[UserResponse],
    ) -> None:
        """Test the fire-time guard when a timer escapes cancellation."""
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.delete_conversation(conversation.id)

        conversation_service._simulate_reply(conversation.id)

        assert conversation_service.get_messages(conversation.id) == []
        assert conversation_service.list_conversations() == []

    def test_recreated_conversation_starts_empty(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        conversation = conversation_service.get_or_create_conversation(users[1].id)
        conversation_service.send_message(conversation.id, "hello")
        conversation_service.delete_conversation(conversation.id)

        recreated = conversation_service.get_or_create_conversation(users[1].id)
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)

        assert recreated.id != conversation.id
        assert conversation_service.get_messages(recreated.id) == []

    def test_delete_unknown_is_noop(
        self, conversation_service: ConversationService, users: list[UserResponse]
    ) -> None:
        conversation_service.get_or_create_conversation(users[1].id)

        conversation_service.delete_conversation(uuid4())

        assert len(conversation_service.list_conversations()) == 1


class TestUnreadAccounting:
    def test_total_is_sum_of_conversations(
        self,
        conversation_service: ConversationService,
        scheduler: ManualScheduler,
        users: list[UserResponse],
    ) -> None:
        for user in users[1:4]:
            conversation = conversation_service.get_or_create_conversation(user.id)
            conversation_service.send_message(conversation.id, "hi")
        scheduler.advance(AUTO_REPLY_DELAY_SECONDS)
        conversation_service.mark_conversation_as_read(
            conversation_service.list_conversations()[0].id
        )

        assert conversation_service.get_total_unread_count() == sum(
            c.unread_count for c in conversation_service.list_conversations()
        )
        assert conversation_service.get_total_unread_count() == 2

    def test_unknown_conversation_messages_are_empty(
        self, conversation_service: ConversationService
    ) -> None:
        assert conversation_service.get_messages(uuid4()) == []
