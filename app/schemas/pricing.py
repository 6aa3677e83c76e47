import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from app.models.order import OrderType


class OrderPricing(BaseModel):
    """Subtotal, delivery charge, GST and total of a cart, in whole currency units."""
    model_config = ConfigDict(frozen=True)

    subtotal: int
    delivery_charge: int
    gst: int
    total: int


MAX_LINE_QUANTITY = 99 # per menu item in one cart


class QuoteItemRequest(BaseModel):
    menu_item_id: uuid.UUID
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY)


class QuoteRequest(BaseModel):
    """Schema for pricing a cart before checkout."""
    restaurant_id: uuid.UUID
    order_type: OrderType
    items: List[QuoteItemRequest]


class QuoteLine(BaseModel):
    menu_item_id: uuid.UUID
    name: str
    price: int
    quantity: int
    total: int


class QuoteResponse(BaseModel):
    order_type: OrderType
    items: List[QuoteLine]
    pricing: OrderPricing
