from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from giftem.dependencies import get_notification_service
from giftem.models.api.notifications import NotificationResponse, NotificationType
from giftem.services.notification_service import NotificationService

router = APIRouter()


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    type: Optional[NotificationType] = Query(
        None, description="Filter by notification type"
    ),
    unread: bool = Query(False, description="Only return unread notifications"),
    service: NotificationService = Depends(get_notification_service),
) -> List[NotificationResponse]:
    """List notifications, newest first."""
    return service.list_notifications(type=type, unread_only=unread)


@router.get("/unread-count")
async def get_unread_count(
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    return {
        "unread_count": service.get_unread_count(),
        "has_unread": service.has_unread,
    }


@router.post("/read-all", status_code=204)
async def mark_all_as_read(
    service: NotificationService = Depends(get_notification_service),
) -> None:
    service.mark_all_as_read()


@router.post("/{notification_id}/read", status_code=204)
async def mark_as_read(
    notification_id: UUID,
    service: NotificationService = Depends(get_notification_service),
) -> None:
    service.mark_as_read(notification_id)


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: UUID,
    service: NotificationService = Depends(get_notification_service),
) -> None:
    service.delete_notification(notification_id)
