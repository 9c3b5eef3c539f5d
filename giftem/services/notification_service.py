from typing import List, Optional
from uuid import UUID

from giftem.models.api.notifications import NotificationResponse, NotificationType
from giftem.repositories.notification_repository import NotificationRepository
from giftem.scheduling import Scheduler


class NotificationService:
    """Service for in-app notifications."""

    def __init__(
        self,
        scheduler: Scheduler,
        notifications: Optional[List[NotificationResponse]] = None,
    ):
        self.scheduler = scheduler
        self.notification_repo = NotificationRepository(notifications)

    def list_notifications(
        self, type: Optional[NotificationType] = None, unread_only: bool = False
    ) -> List[NotificationResponse]:
        notifications = (
            self.notification_repo.get_by_type(type)
            if type is not None
            else self.notification_repo.get_all()
        )
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        return notifications

    def get_notifications(self, type: NotificationType) -> List[NotificationResponse]:
        return self.notification_repo.get_by_type(type)

    def get_unread_notifications(self) -> List[NotificationResponse]:
        return self.notification_repo.get_unread()

    def get_unread_count(self) -> int:
        return len(self.notification_repo.get_unread())

    @property
    def has_unread(self) -> bool:
        return self.get_unread_count() > 0

    def add_notification(
        self,
        type: NotificationType,
        title: str,
        message: str,
        user_id: Optional[UUID] = None,
        related_id: Optional[UUID] = None,
    ) -> NotificationResponse:
        notification = NotificationResponse(
            type=type,
            title=title,
            message=message,
            user_id=user_id,
            related_id=related_id,
            created_at=self.scheduler.now(),
        )
        return self.notification_repo.insert_first(notification)

    def add_message_notification(
        self, user_name: str, conversation_id: UUID, user_id: Optional[UUID] = None
    ) -> NotificationResponse:
        return self.add_notification(
            type=NotificationType.NEW_MESSAGE,
            title="New Message",
            message=f"{user_name} sent you a message",
            user_id=user_id,
            related_id=conversation_id,
        )

    def mark_as_read(self, notification_id: UUID) -> None:
        notification = self.notification_repo.get_by_id(notification_id)
        if notification is not None:
            self.notification_repo.update(
                notification.model_copy(update={"is_read": True})
            )

    def mark_all_as_read(self) -> None:
        self.notification_repo.replace_all(
            n.model_copy(update={"is_read": True})
            for n in self.notification_repo.records
        )

    def delete_notification(self, notification_id: UUID) -> None:
        self.notification_repo.delete(notification_id)
