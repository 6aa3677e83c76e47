"""Menu management for restaurant managers. Every write checks restaurant ownership."""
import logging
from typing import Any, Dict
from uuid import UUID
from app.core.errors import NotAuthorizedError, NotFoundError, ValidationFailedError
from app.models.account import Manager
from app.models.restaurant import MenuCategory, MenuItem, Restaurant

log = logging.getLogger("menu_service")


async def _owned_restaurant(manager: Manager, restaurant_id: UUID) -> Restaurant:
    restaurant = await Restaurant.get_or_none(id=restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant not found.")
    if restaurant.manager_id != manager.id:
        raise NotAuthorizedError()
    return restaurant


async def _owned_item(manager: Manager, item_id: UUID) -> MenuItem:
    item = await MenuItem.get_or_none(id=item_id)
    if not item:
        raise NotFoundError("Menu item not found.")
    await _owned_restaurant(manager, item.restaurant_id)
    return item


async def _check_category(restaurant_id: UUID, category_id: Any) -> None:
    if category_id is None:
        return
    if not await MenuCategory.exists(id=category_id, restaurant_id=restaurant_id):
        raise ValidationFailedError("Category does not belong to this restaurant.", field="category_id")


async def create_menu_item(manager: Manager, data: Dict[str, Any]) -> MenuItem:
    restaurant = await _owned_restaurant(manager, data["restaurant_id"])
    await _check_category(restaurant.id, data.get("category_id"))

    fields = {key: value for key, value in data.items() if key != "restaurant_id"}
    item = await MenuItem.create(restaurant_id=restaurant.id, **fields)
    log.info(f"Menu item '{item.name}' added to {restaurant.name} by {manager.username}.")
    return item


async def update_menu_item(manager: Manager, item_id: UUID, changes: Dict[str, Any]) -> MenuItem:
    """Applies a partial update; only the supplied fields change."""
    item = await _owned_item(manager, item_id)
    if "category_id" in changes:
        await _check_category(item.restaurant_id, changes["category_id"])

    if changes:
        item.update_from_dict(changes)
        await item.save(update_fields=list(changes))
    log.info(f"Menu item {item.id} updated by {manager.username}: {sorted(changes)}")
    return item


async def set_availability(manager: Manager, item_id: UUID, is_available: bool) -> MenuItem:
    return await update_menu_item(manager, item_id, {"is_available": is_available})


async def delete_menu_item(manager: Manager, item_id: UUID) -> None:
    item = await _owned_item(manager, item_id)
    await item.delete()
    log.info(f"Menu item {item_id} deleted by {manager.username}.")
