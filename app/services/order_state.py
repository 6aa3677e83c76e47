"""
Order status state machine.

    placed -> confirmed -> preparing -> ready -> dispatched -> delivered

Any non-terminal status can also go straight to ``cancelled``. ``delivered``
and ``cancelled`` are terminal. Managers move an order one step at a time;
leaving ``placed`` needs a preparation estimate picked from ESTIMATE_OPTIONS.
"""
from typing import Dict, NamedTuple, Optional, Union
from app.core.errors import EstimateRequiredError, InvalidTransitionError
from app.models.order import OrderStatus

ORDER_FLOW = [
    OrderStatus.PLACED,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.DISPATCHED,
    OrderStatus.DELIVERED,
]

NEXT_STATUS: Dict[OrderStatus, OrderStatus] = {
    current: following for current, following in zip(ORDER_FLOW, ORDER_FLOW[1:])
}

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

ESTIMATE_OPTIONS = [
    "10-15 min",
    "15-20 min",
    "20-25 min",
    "25-30 min",
    "30-35 min",
    "35-40 min",
]


class StatusDisplay(NamedTuple):
    label: str
    icon: str
    title: str
    message: str


STATUS_DISPLAY: Dict[OrderStatus, StatusDisplay] = {
    OrderStatus.PLACED: StatusDisplay(
        "Order Placed", "fa-receipt", "Order placed",
        "Your order {order_number} has been placed."),
    OrderStatus.CONFIRMED: StatusDisplay(
        "Order Confirmed", "fa-check-circle", "Order confirmed",
        "{restaurant} confirmed your order {order_number}. Estimated preparation time: {estimated_time}."),
    OrderStatus.PREPARING: StatusDisplay(
        "Preparing Order", "fa-clock", "Preparing your order",
        "Your order {order_number} is being prepared. ETA {estimated_time}."),
    OrderStatus.READY: StatusDisplay(
        "Order Ready", "fa-utensils", "Order ready",
        "Your order {order_number} is ready."),
    OrderStatus.DISPATCHED: StatusDisplay(
        "Out for Delivery", "fa-truck", "Out for delivery",
        "Your order {order_number} is on its way."),
    OrderStatus.DELIVERED: StatusDisplay(
        "Delivered", "fa-home", "Order delivered",
        "Your order {order_number} has been delivered. Enjoy your meal!"),
    OrderStatus.CANCELLED: StatusDisplay(
        "Cancelled", "fa-times-circle", "Order cancelled",
        "Your order {order_number} has been cancelled."),
}


def is_terminal(status: Union[OrderStatus, str]) -> bool:
    return OrderStatus(status) in TERMINAL_STATUSES


def next_status(current: Union[OrderStatus, str]) -> Optional[OrderStatus]:
    """The single status a manager may advance to, or None for terminal orders."""
    return NEXT_STATUS.get(OrderStatus(current))


def check_transition(
    current: Union[OrderStatus, str],
    target: Union[OrderStatus, str],
    estimated_time: Optional[str] = None,
) -> bool:
    """
    Validates a status change.

    Returns True when the order should move, False when ``target`` equals the
    current (non-terminal) status and nothing needs to happen. Raises
    InvalidTransitionError for skips, backwards moves and anything leaving a
    terminal status, EstimateRequiredError when confirming without a valid
    estimate.
    """
    current = OrderStatus(current)
    target = OrderStatus(target)

    if current in TERMINAL_STATUSES:
        raise InvalidTransitionError(f"Order is already in a final state: {current.value}. Status cannot be updated.")

    if target == current:
        return False

    if target == OrderStatus.CANCELLED:
        return True

    expected = NEXT_STATUS[current]
    if target != expected:
        raise InvalidTransitionError(
            f"Cannot move order from {current.value} to {target.value}; next status is {expected.value}."
        )

    if current == OrderStatus.PLACED:
        if not estimated_time:
            raise EstimateRequiredError()
        if estimated_time not in ESTIMATE_OPTIONS:
            raise EstimateRequiredError(
                f"Estimated time must be one of: {', '.join(ESTIMATE_OPTIONS)}."
            )

    return True


def status_message(status: Union[OrderStatus, str], order_number: str,
                   restaurant: str = "The restaurant", estimated_time: Optional[str] = None) -> StatusDisplay:
    """Display entry for ``status`` with its notification copy filled in for one order."""
    display = STATUS_DISPLAY[OrderStatus(status)]
    message = display.message.format(
        order_number=order_number,
        restaurant=restaurant,
        estimated_time=estimated_time or "15-20 min",
    )
    return display._replace(message=message)
