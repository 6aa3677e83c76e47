"""
Cart pricing.

Pure functions only: the same cart and order type always price the same, so
callers recompute on every cart change instead of caching results.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol, Union
from app.models.order import OrderType
from app.schemas.pricing import OrderPricing

DELIVERY_CHARGE = 25
GST_RATE = Decimal("0.05")


class PricedLine(Protocol):
    price: int
    quantity: int


def delivery_charge_for(order_type: Union[OrderType, str]) -> int:
    """Flat charge for delivery orders, nothing for dine-in and takeaway."""
    return DELIVERY_CHARGE if OrderType(order_type) == OrderType.DELIVERY else 0


def gst_for(amount: int) -> int:
    """5% GST rounded to the nearest whole unit, halves rounded up (8.5 -> 9)."""
    return int((Decimal(amount) * GST_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_pricing(lines: Iterable[PricedLine], order_type: Union[OrderType, str]) -> OrderPricing:
    """
    Prices a cart.

    subtotal = sum(price * quantity); delivery is 25 for delivery orders;
    gst = round((subtotal + delivery) * 0.05); total is their sum.
    An empty cart prices to zero plus any delivery charge; refusing empty carts
    is up to the caller.
    """
    subtotal = sum(line.price * line.quantity for line in lines)
    delivery = delivery_charge_for(order_type)
    gst = gst_for(subtotal + delivery)
    return OrderPricing(
        subtotal=subtotal,
        delivery_charge=delivery,
        gst=gst,
        total=subtotal + delivery + gst,
    )
