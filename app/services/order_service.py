import logging
import random
from datetime import datetime
from tortoise import timezone
from tortoise.transactions import in_transaction
from typing import Any, Dict, List, Optional, Union
from uuid import UUID
from app.core.config import ORDER_NUMBER_ATTEMPTS
from app.core.errors import NotAuthorizedError, NotFoundError, InvalidTransitionError, ValidationFailedError
from app.events.notifications import create_status_notification
from app.models.account import Employee, Manager
from app.models.order import Order, OrderItem, OrderStatus, PaymentStatus
from app.models.restaurant import MenuItem, Restaurant
from app.services.order_state import check_transition, next_status
from app.services.payment import check_payment_method, process_payment

log = logging.getLogger("order_service")


def generate_order_number(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """ORD-<year>-<four random digits>, e.g. ORD-2024-0427."""
    year = (now or timezone.now()).year
    return f"ORD-{year}-{(rng or random).randint(0, 9999):04d}"


async def _unused_order_number(conn: Any) -> str:
    for _ in range(ORDER_NUMBER_ATTEMPTS):
        number = generate_order_number()
        if not await Order.filter(order_number=number).using_db(conn).exists():
            return number
        log.warning(f"Order number {number} already taken, drawing another.")
    raise RuntimeError("Could not allocate a free order number.")


async def create_order(order_data: Dict[str, Any], items: List[Dict[str, Any]]) -> Order:
    """
    Creates the Order and its OrderItems atomically.

    Pricing fields and item prices are stored exactly as submitted; they are
    not checked against the live menu.
    """
    if not items:
        raise ValidationFailedError("Order must contain items.", field="items")

    if order_data.get("payment_method"):
        check_payment_method(order_data["payment_method"], order_data["order_type"])

    async with in_transaction() as conn:
        user = await Employee.get_or_none(id=order_data["user_id"]).using_db(conn)
        if not user:
            raise NotFoundError("User not found.")

        restaurant = await Restaurant.get_or_none(id=order_data["restaurant_id"]).using_db(conn)
        if not restaurant:
            raise NotFoundError("Restaurant not found.")

        menu_item_ids = {UUID(str(it["menu_item_id"])) for it in items}
        known_ids = await MenuItem.filter(id__in=list(menu_item_ids), restaurant_id=restaurant.id).using_db(conn).values_list("id", flat=True)
        missing = {str(m) for m in menu_item_ids} - {str(known) for known in known_ids}
        if missing:
            raise ValidationFailedError(
                f"Menu item {sorted(missing)[0]} not found at {restaurant.name}.",
                field="items",
            )

        # 1. Create the Order header
        order = await Order.create(
            order_number=await _unused_order_number(conn),
            user_id=user.id,
            restaurant_id=restaurant.id,
            order_type=order_data["order_type"],
            status=OrderStatus.PLACED,
            subtotal=order_data["subtotal"],
            delivery_charge=order_data.get("delivery_charge", 0),
            gst=order_data["gst"],
            total=order_data["total"],
            payment_method=order_data.get("payment_method"),
            payment_status=order_data.get("payment_status", PaymentStatus.PENDING),
            delivery_address=order_data.get("delivery_address"),
            estimated_time=order_data.get("estimated_time"),
            using_db=conn
        )

        # 2. Create Order Item lines (price snapshot)
        for it in items:
            await OrderItem.create(
                order=order,
                menu_item_id=it["menu_item_id"],
                quantity=it["quantity"],
                price=it["price"],
                total=it["total"],
                using_db=conn
            )

    log.info(f"Order {order.order_number} placed by user {order.user_id} at {restaurant.name} (total {order.total}).")
    return order


async def checkout(data: Dict[str, Any]) -> Order:
    """
    Pays, then places the order. A failed payment raises PaymentFailedError
    before anything is written, so the user can retry with the same cart.
    """
    if not data.get("items"):
        raise ValidationFailedError("Order must contain items.", field="items")

    payment_status = process_payment(data["total"], data["payment_method"], data["order_type"])

    restaurant = await Restaurant.get_or_none(id=data["restaurant_id"])
    order_data = {
        key: data.get(key)
        for key in ("user_id", "restaurant_id", "order_type", "subtotal", "delivery_charge",
                    "gst", "total", "payment_method", "delivery_address")
    }
    order_data["payment_status"] = payment_status
    order_data["estimated_time"] = restaurant.preparation_time if restaurant else None
    return await create_order(order_data, data["items"])


async def get_order_by_id(order_id: UUID) -> Optional[Order]:
    """Fetches order details with items, including the menu item name."""
    return await Order.get_or_none(id=order_id).prefetch_related('items', 'items__menu_item')


async def list_user_orders(user_id: UUID) -> List[Order]:
    return await Order.filter(user_id=user_id).order_by("-created_at").prefetch_related('items', 'items__menu_item')


async def list_restaurant_orders(manager: Manager, restaurant_id: UUID,
                                 status: Optional[OrderStatus] = None) -> List[Order]:
    """Orders of the manager's own restaurant, newest first."""
    restaurant = await Restaurant.get_or_none(id=restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant not found.")
    if restaurant.manager_id != manager.id:
        raise NotAuthorizedError()

    query = Order.filter(restaurant_id=restaurant_id)
    if status:
        query = query.filter(status=status)
    return await query.order_by("-created_at").prefetch_related('items', 'items__menu_item')


async def _order_for_manager(order_id: UUID, manager: Manager, conn: Any):
    order = await Order.get_or_none(id=order_id).using_db(conn)
    if not order:
        raise NotFoundError("Order not found.")

    restaurant = await Restaurant.get(id=order.restaurant_id).using_db(conn)
    if restaurant.manager_id != manager.id:
        log.warning(f"Manager {manager.username} tried to change order {order.order_number} of another restaurant.")
        raise NotAuthorizedError()
    return order, restaurant


async def update_order_status(order_id: UUID, manager: Manager, new_status: Union[OrderStatus, str],
                              estimated_time: Optional[str] = None) -> Order:
    """
    Moves an order to ``new_status`` on behalf of the restaurant's manager.

    Enforces the state machine, records the estimate when confirming, and
    writes exactly one notification per effective change. Asking for the
    status the order already has changes nothing. No locking: concurrent
    updates are applied in arrival order, last write wins.
    """
    new_status = OrderStatus(new_status)

    async with in_transaction() as conn:
        order, restaurant = await _order_for_manager(order_id, manager, conn)

        if not check_transition(order.status, new_status, estimated_time):
            return order

        old_status = order.status
        order.status = new_status
        update_fields = ['status', 'updated_at']

        if old_status == OrderStatus.PLACED and new_status == OrderStatus.CONFIRMED:
            order.estimated_time = estimated_time
            update_fields.append('estimated_time')
        if new_status == OrderStatus.DELIVERED:
            order.actual_delivery_time = timezone.now()
            update_fields.append('actual_delivery_time')

        await order.save(update_fields=update_fields, using_db=conn)
        await create_status_notification(order, new_status, restaurant_name=restaurant.name, conn=conn)

    log.info(f"Order {order.order_number} moved from {OrderStatus(old_status).value} to {new_status.value} by {manager.username}.")
    return order


async def advance_order(order_id: UUID, manager: Manager, estimated_time: Optional[str] = None) -> Order:
    """Moves the order one step along the flow."""
    async with in_transaction() as conn:
        order, _ = await _order_for_manager(order_id, manager, conn)

    target = next_status(order.status)
    if target is None:
        raise InvalidTransitionError(f"Order is already in a final state: {OrderStatus(order.status).value}. Status cannot be updated.")
    return await update_order_status(order_id, manager, target, estimated_time)


async def cancel_order(order_id: UUID, manager: Manager) -> Order:
    """Cancels the order from any non-terminal status."""
    return await update_order_status(order_id, manager, OrderStatus.CANCELLED)


async def reorder(order_id: UUID, user_id: UUID) -> Order:
    """Places a fresh order with the items and totals of an earlier one. Payment is left pending."""
    previous = await get_order_by_id(order_id)
    if not previous:
        raise NotFoundError("Order not found.")
    if previous.user_id != user_id:
        raise NotAuthorizedError()

    items = [
        {"menu_item_id": item.menu_item_id, "quantity": item.quantity, "price": item.price, "total": item.total}
        for item in previous.items
        if item.menu_item_id is not None
    ]
    order_data = {
        "user_id": previous.user_id,
        "restaurant_id": previous.restaurant_id,
        "order_type": previous.order_type,
        "subtotal": previous.subtotal,
        "delivery_charge": previous.delivery_charge,
        "gst": previous.gst,
        "total": previous.total,
        "payment_method": previous.payment_method,
        "payment_status": PaymentStatus.PENDING,
        "delivery_address": previous.delivery_address,
        "estimated_time": previous.estimated_time,
    }
    return await create_order(order_data, items)
