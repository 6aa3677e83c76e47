from fastapi import APIRouter
from uuid import UUID
from app.core.errors import NotFoundError
from app.models.notification import Notification
from app.schemas.notification import NotificationResponse
from app.schemas.response import SuccessResponse

router = APIRouter()


@router.get("/user/{user_id}", response_model=SuccessResponse)
async def list_notifications_endpoint(user_id: UUID, unread_only: bool = False):
    """Status-change notifications of a user, newest first."""
    query = Notification.filter(user_id=user_id)
    if unread_only:
        query = query.filter(is_read=False)
    notifications = await query.order_by("-created_at")
    return SuccessResponse(data=[NotificationResponse.model_validate(n).model_dump(mode="json") for n in notifications])


@router.post("/{notification_id}/read", response_model=SuccessResponse)
async def mark_read_endpoint(notification_id: UUID):
    notification = await Notification.get_or_none(id=notification_id)
    if not notification:
        raise NotFoundError("Notification not found.")
    notification.is_read = True
    await notification.save(update_fields=["is_read"])
    return SuccessResponse(data=NotificationResponse.model_validate(notification).model_dump(mode="json"))
