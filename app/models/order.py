from enum import Enum
from tortoise import fields, models
import uuid


class OrderStatus(str, Enum):
    PLACED = "placed"
    CONFIRMED = "confirmed"   # Manager accepted the order and gave a preparation estimate
    PREPARING = "preparing"
    READY = "ready"
    DISPATCHED = "dispatched"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderType(str, Enum):
    DELIVERY = "delivery"
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"


class PaymentMethod(str, Enum):
    UPI = "upi"
    CARD = "card"
    NETBANKING = "netbanking"
    COD = "cod"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Order(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    order_number = fields.CharField(max_length=32, unique=True)
    user = fields.ForeignKeyField("models.Employee", related_name="orders")
    restaurant = fields.ForeignKeyField("models.Restaurant", related_name="orders")
    order_type = fields.CharEnumField(OrderType, max_length=16)
    status = fields.CharEnumField(OrderStatus, default=OrderStatus.PLACED, max_length=16)
    # Pricing snapshot, stored exactly as submitted at checkout
    subtotal = fields.IntField()
    delivery_charge = fields.IntField(default=0)
    gst = fields.IntField()
    total = fields.IntField()
    payment_method = fields.CharEnumField(PaymentMethod, max_length=16, null=True)
    payment_status = fields.CharEnumField(PaymentStatus, default=PaymentStatus.PENDING, max_length=16)
    delivery_address = fields.TextField(null=True)
    estimated_time = fields.CharField(max_length=32, null=True)
    actual_delivery_time = fields.DatetimeField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "orders"
        indexes = [
            ("restaurant_id",),          # Restaurant order queries
            ("status",),                 # Status-based filtering
            ("user_id",),                # User order history
            ("restaurant_id", "status"), # Composite: live orders board
        ]


class OrderItem(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    order = fields.ForeignKeyField("models.Order", related_name="items")
    menu_item = fields.ForeignKeyField("models.MenuItem", related_name="order_items", null=True, on_delete=fields.SET_NULL)
    quantity = fields.IntField()
    price = fields.IntField() # unit price at order time, never recomputed
    total = fields.IntField()

    class Meta:
        table = "order_items"
        indexes = [
            ("order_id",),
        ]
