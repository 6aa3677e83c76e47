# app/models/__init__.py
from .account import Employee, Manager
from .restaurant import TechPark, Restaurant, MenuCategory, MenuItem
from .order import Order, OrderItem, OrderStatus, OrderType, PaymentMethod, PaymentStatus
from .notification import Notification

# Export all models
__all__ = [
    "Employee",
    "Manager",
    "TechPark",
    "Restaurant",
    "MenuCategory",
    "MenuItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderType",
    "PaymentMethod",
    "PaymentStatus",
    "Notification",
]
