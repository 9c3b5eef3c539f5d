from typing import List

from giftem.models.api.notifications import NotificationResponse, NotificationType
from giftem.repositories.base_repository import BaseRepository


class NotificationRepository(BaseRepository[NotificationResponse]):
    """Repository for notifications, newest first."""

    def get_by_type(self, type: NotificationType) -> List[NotificationResponse]:
        return [n for n in self.records if n.type == type]

    def get_unread(self) -> List[NotificationResponse]:
        return [n for n in self.records if not n.is_read]
