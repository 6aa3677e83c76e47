from fastapi import APIRouter
from app.core.errors import ValidationFailedError
from app.models.order import OrderType
from app.schemas.pricing import QuoteLine, QuoteRequest, QuoteResponse
from app.schemas.response import SuccessResponse
from app.services.cart import Cart
from app.services.catalog_service import get_menu_items, get_restaurant

router = APIRouter()

ORDER_TYPE_FLAGS = {
    OrderType.DELIVERY: "delivery_available",
    OrderType.DINE_IN: "dinein_available",
    OrderType.TAKEAWAY: "takeaway_available",
}


@router.post("/quote", response_model=SuccessResponse)
async def quote_endpoint(payload: QuoteRequest):
    """
    Prices a cart against the live menu: subtotal, delivery charge, 5% GST and total.
    The same cart and order type always get the same quote.
    """
    if not payload.items:
        raise ValidationFailedError("Cart is empty.", field="items")

    restaurant = await get_restaurant(payload.restaurant_id)
    if not getattr(restaurant, ORDER_TYPE_FLAGS[payload.order_type]):
        raise ValidationFailedError(f"{restaurant.name} does not offer {payload.order_type.value} orders.", field="order_type")

    menu = {item.id: item for item in await get_menu_items(restaurant.id, [i.menu_item_id for i in payload.items])}

    cart = Cart()
    for requested in payload.items:
        item = menu.get(requested.menu_item_id)
        if item is None or not item.is_available:
            raise ValidationFailedError(f"Menu item {requested.menu_item_id} is not available at {restaurant.name}.", field="items")
        cart.add(item, requested.quantity)

    data = QuoteResponse(
        order_type=payload.order_type,
        items=[
            QuoteLine(menu_item_id=line.menu_item_id, name=line.menu_item.name,
                      price=line.price, quantity=line.quantity, total=line.total)
            for line in cart
        ],
        pricing=cart.pricing(payload.order_type),
    ).model_dump(mode="json")
    return SuccessResponse(data=data)
