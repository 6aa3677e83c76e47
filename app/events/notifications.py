from typing import Any
from app.models.notification import Notification
from app.models.order import Order, OrderStatus
from app.services.order_state import status_message


async def create_status_notification(
    order: Order,
    status: OrderStatus,
    restaurant_name: str = "The restaurant",
    conn: Any = None
) -> Notification:
    """
    Records the status-change notification for the order's user.

    Passing 'conn' writes it in the same transaction as the status update, so
    every committed transition has exactly one notification.
    """
    display = status_message(
        status,
        order_number=order.order_number,
        restaurant=restaurant_name,
        estimated_time=order.estimated_time,
    )
    return await Notification.create(
        user_id=order.user_id,
        order_id=order.id,
        event_type=f"order.status.{status.value}.v1",
        status=status.value,
        title=display.title,
        message=display.message,
        using_db=conn
    )
