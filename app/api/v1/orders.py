import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
from uuid import UUID
from app.api.deps import get_current_manager
from app.core.errors import OrderServiceError, NotFoundError
from app.models.account import Manager
from app.models.order import Order, OrderStatus
from app.schemas.order import (
    AdvanceRequest,
    CheckoutRequest,
    OrderItemResponse,
    OrderRequest,
    OrderResponse,
    OrderStatusResponse,
    OrderStatusUpdate,
    ReorderRequest,
    TrackingResponse,
)
from app.schemas.response import SuccessResponse
from app.services.order_service import (
    advance_order,
    cancel_order,
    checkout,
    create_order,
    get_order_by_id,
    list_restaurant_orders,
    list_user_orders,
    reorder,
    update_order_status,
)
from app.services.order_state import next_status, status_message
from app.services.tracking import simulated_status, tracking_steps

router = APIRouter()
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


def serialize_order(order: Order, with_items: bool = True) -> dict:
    """Order as returned by the API; item names come from the prefetched menu items."""
    items = []
    if with_items:
        items = [
            OrderItemResponse(
                menu_item_id=i.menu_item_id,
                name=i.menu_item.name if i.menu_item else None,
                quantity=i.quantity,
                price=i.price,
                total=i.total,
            )
            for i in order.items
        ]
    return OrderResponse(
        id=order.id,
        order_number=order.order_number,
        user_id=order.user_id,
        restaurant_id=order.restaurant_id,
        order_type=order.order_type,
        status=order.status,
        subtotal=order.subtotal,
        delivery_charge=order.delivery_charge,
        gst=order.gst,
        total=order.total,
        payment_method=order.payment_method,
        payment_status=order.payment_status,
        delivery_address=order.delivery_address,
        estimated_time=order.estimated_time,
        actual_delivery_time=order.actual_delivery_time,
        created_at=order.created_at,
        updated_at=order.updated_at,
        items=items,
    ).model_dump(mode="json")


def _status_payload(order: Order) -> dict:
    return OrderStatusResponse(
        order_id=order.id,
        order_number=order.order_number,
        status=order.status,
        estimated_time=order.estimated_time,
        next_status=next_status(order.status),
        message=status_message(order.status, order.order_number, estimated_time=order.estimated_time).message,
    ).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_order_endpoint(request_data: OrderRequest):
    """
    Places an order with a client-computed pricing snapshot.
    Totals and item prices are stored as submitted.
    """
    try:
        order = await create_order(
            order_data=request_data.order.model_dump(),
            items=[item.model_dump() for item in request_data.items],
        )
        order = await get_order_by_id(order.id)
        return SuccessResponse(data=serialize_order(order))
    except OrderServiceError as e:
        log.error(f"Rejected order: {e}")
        raise
    except Exception as e:
        log.error(f"Error placing order: {e}")
        raise HTTPException(status_code=500, detail="Server failed to place order.")


@router.post("/checkout", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def checkout_endpoint(request_data: CheckoutRequest):
    """
    Runs the simulated payment and places the order once it succeeds.
    A failed payment returns 402 with retryable=true and creates nothing.
    """
    try:
        order = await checkout(request_data.model_dump())
        order = await get_order_by_id(order.id)
        return SuccessResponse(data=serialize_order(order))
    except OrderServiceError as e:
        log.error(f"Checkout rejected: {e}")
        raise
    except Exception as e:
        log.error(f"Error during checkout: {e}")
        raise HTTPException(status_code=500, detail="Server failed to complete checkout.")


@router.get("/user/{user_id}", response_model=SuccessResponse)
async def list_user_orders_endpoint(user_id: UUID):
    """Order history of an employee, newest first."""
    orders = await list_user_orders(user_id)
    return SuccessResponse(data=[serialize_order(o) for o in orders])


@router.get("/restaurant/{restaurant_id}", response_model=SuccessResponse)
async def list_restaurant_orders_endpoint(
    restaurant_id: UUID,
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    manager: Manager = Depends(get_current_manager),
):
    """Live orders board of the manager's restaurant."""
    orders = await list_restaurant_orders(manager, restaurant_id, status_filter)
    return SuccessResponse(data=[serialize_order(o) for o in orders])


@router.get("/{order_id}", response_model=SuccessResponse)
async def get_order_endpoint(order_id: UUID):
    """Fetches details for a specific order."""
    order = await get_order_by_id(order_id)
    if not order:
        raise NotFoundError("Order not found.")
    return SuccessResponse(data=serialize_order(order))


@router.get("/{order_id}/tracking", response_model=SuccessResponse)
async def tracking_endpoint(order_id: UUID, elapsed: float = Query(0, ge=0, description="Seconds since the tracking view opened.")):
    """
    Tracking view data. ``display_status`` is the simulated progress shown to
    the customer; ``status`` is the stored one and is never changed here.
    """
    order = await Order.get_or_none(id=order_id)
    if not order:
        raise NotFoundError("Order not found.")

    display = simulated_status(order.status, elapsed)
    data = TrackingResponse(
        order_id=order.id,
        order_number=order.order_number,
        status=order.status,
        display_status=display,
        estimated_time=order.estimated_time,
        steps=tracking_steps(display),
    ).model_dump(mode="json")
    return SuccessResponse(data=data)


@router.patch("/{order_id}/status", response_model=SuccessResponse)
async def update_status_endpoint(order_id: UUID, payload: OrderStatusUpdate,
                                 manager: Manager = Depends(get_current_manager)):
    """
    Moves the order to the requested status ('confirmed', 'preparing', ... or 'cancelled').
    Confirming a placed order needs estimated_time.
    """
    try:
        order = await update_order_status(order_id, manager, payload.status, payload.estimated_time)
        return SuccessResponse(data=_status_payload(order))
    except OrderServiceError as e:
        log.error(f"Value error updating order status: {e}")
        raise
    except Exception as e:
        log.error(f"Error updating order status: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update order status.")


@router.post("/{order_id}/advance", response_model=SuccessResponse)
async def advance_endpoint(order_id: UUID, payload: Optional[AdvanceRequest] = None,
                           manager: Manager = Depends(get_current_manager)):
    """Moves the order to the next status of the flow."""
    try:
        estimated_time = payload.estimated_time if payload else None
        order = await advance_order(order_id, manager, estimated_time)
        return SuccessResponse(data=_status_payload(order))
    except OrderServiceError as e:
        log.error(f"Value error advancing order: {e}")
        raise
    except Exception as e:
        log.error(f"Error advancing order: {e}")
        raise HTTPException(status_code=500, detail="Server failed to advance order.")


@router.post("/{order_id}/cancel", response_model=SuccessResponse)
async def cancel_order_endpoint(order_id: UUID, manager: Manager = Depends(get_current_manager)):
    """Cancels the order from any non-terminal status."""
    try:
        order = await cancel_order(order_id, manager)
        return SuccessResponse(data=_status_payload(order))
    except OrderServiceError as e:
        log.error(f"Value error cancelling order: {e}")
        raise
    except Exception as e:
        log.error(f"Error cancelling order: {e}")
        raise HTTPException(status_code=500, detail="Server failed to cancel order.")


@router.post("/{order_id}/reorder", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def reorder_endpoint(order_id: UUID, payload: ReorderRequest):
    """Places the same order again; payment is left pending."""
    order = await reorder(order_id, payload.user_id)
    order = await get_order_by_id(order.id)
    return SuccessResponse(data=serialize_order(order))
