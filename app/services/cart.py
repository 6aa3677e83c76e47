"""
Session cart for a single restaurant.

Mirrors the add / increment / decrement / remove actions of the ordering
screens. A cart never holds two lines for the same menu item.
"""
from typing import Any, Dict, List, Optional, Union
from uuid import UUID
from app.core.errors import ValidationFailedError
from app.models.order import OrderType
from app.schemas.pricing import OrderPricing
from app.services.pricing import calculate_pricing


class CartLine:
    def __init__(self, menu_item: Any, quantity: int = 1):
        self.menu_item = menu_item
        self.quantity = quantity

    @property
    def menu_item_id(self) -> UUID:
        return self.menu_item.id

    @property
    def price(self) -> int:
        return self.menu_item.price

    @property
    def total(self) -> int:
        return self.price * self.quantity

    def __repr__(self):
        return f"CartLine({self.menu_item.name!r} x{self.quantity})"


class Cart:
    def __init__(self):
        self.lines: List[CartLine] = []
        self.restaurant_id: Optional[UUID] = None

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def _find(self, menu_item_id: UUID) -> Optional[CartLine]:
        for line in self.lines:
            if line.menu_item_id == menu_item_id:
                return line
        return None

    def add(self, menu_item: Any, quantity: int = 1) -> CartLine:
        """Adds ``quantity`` units, merging into the existing line for that item."""
        if quantity < 1:
            raise ValidationFailedError("Quantity must be at least 1.", field="quantity")
        if self.restaurant_id is not None and menu_item.restaurant_id != self.restaurant_id:
            raise ValidationFailedError("Cart can only hold items from one restaurant.", field="menu_item_id")

        line = self._find(menu_item.id)
        if line:
            line.quantity += quantity
        else:
            line = CartLine(menu_item, quantity)
            self.lines.append(line)
        self.restaurant_id = menu_item.restaurant_id
        return line

    def increment(self, menu_item_id: UUID) -> None:
        line = self._find(menu_item_id)
        if line:
            line.quantity += 1

    def decrement(self, menu_item_id: UUID) -> None:
        """Drops one unit; the line goes away when its last unit does."""
        line = self._find(menu_item_id)
        if not line:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            self.remove(menu_item_id)

    def remove(self, menu_item_id: UUID) -> None:
        self.lines = [line for line in self.lines if line.menu_item_id != menu_item_id]
        if not self.lines:
            self.restaurant_id = None

    def clear(self) -> None:
        self.lines = []
        self.restaurant_id = None

    def pricing(self, order_type: Union[OrderType, str]) -> OrderPricing:
        return calculate_pricing(self.lines, order_type)

    def to_order_items(self) -> List[Dict[str, Any]]:
        """Price snapshot of every line, in the shape order creation expects."""
        return [
            {
                "menu_item_id": line.menu_item_id,
                "quantity": line.quantity,
                "price": line.price,
                "total": line.total,
            }
            for line in self.lines
        ]
