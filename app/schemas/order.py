from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
import uuid
from app.models.order import OrderStatus, OrderType, PaymentMethod, PaymentStatus


class OrderItemRequest(BaseModel):
    """Price snapshot of a single cart line, taken when the order is placed."""
    menu_item_id: uuid.UUID
    quantity: int = Field(..., ge=1)
    price: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class PricingSnapshot(BaseModel):
    """Totals computed by the client; stored as submitted."""
    subtotal: int = Field(..., ge=0)
    delivery_charge: int = Field(0, ge=0)
    gst: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class OrderData(PricingSnapshot):
    user_id: uuid.UUID
    restaurant_id: uuid.UUID
    order_type: OrderType
    payment_method: Optional[PaymentMethod] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    delivery_address: Optional[str] = None
    estimated_time: Optional[str] = None


class OrderRequest(BaseModel):
    """Schema for the full order placement request body."""
    order: OrderData
    items: List[OrderItemRequest]


class CheckoutRequest(PricingSnapshot):
    """Payment plus order placement in one step."""
    user_id: uuid.UUID
    restaurant_id: uuid.UUID
    order_type: OrderType
    payment_method: PaymentMethod
    delivery_address: Optional[str] = None
    items: List[OrderItemRequest]


class OrderStatusUpdate(BaseModel):
    """Schema for updating an order status."""
    status: OrderStatus
    estimated_time: Optional[str] = Field(None, description="Required when confirming a placed order, e.g. '15-20 min'.")


class AdvanceRequest(BaseModel):
    estimated_time: Optional[str] = None


class ReorderRequest(BaseModel):
    user_id: uuid.UUID


class OrderItemResponse(BaseModel):
    """Schema for an item inside the detailed order response."""
    menu_item_id: Optional[uuid.UUID]
    name: Optional[str] = None
    quantity: int
    price: int
    total: int


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_number: str
    user_id: uuid.UUID
    restaurant_id: uuid.UUID
    order_type: OrderType
    status: OrderStatus
    subtotal: int
    delivery_charge: int
    gst: int
    total: int
    payment_method: Optional[PaymentMethod] = None
    payment_status: PaymentStatus
    delivery_address: Optional[str] = None
    estimated_time: Optional[str] = None
    actual_delivery_time: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemResponse] = []


class OrderStatusResponse(BaseModel):
    order_id: uuid.UUID
    order_number: str
    status: OrderStatus
    estimated_time: Optional[str] = None
    next_status: Optional[OrderStatus] = None
    message: str


class TrackingStep(BaseModel):
    status: OrderStatus
    label: str
    icon: str
    done: bool
    current: bool


class TrackingResponse(BaseModel):
    order_id: uuid.UUID
    order_number: str
    status: OrderStatus
    display_status: OrderStatus
    estimated_time: Optional[str] = None
    steps: List[TrackingStep]
