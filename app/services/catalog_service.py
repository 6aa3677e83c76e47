import logging
from typing import List, Optional
from uuid import UUID
from app.core.errors import NotFoundError
from app.models.restaurant import MenuCategory, MenuItem, Restaurant, TechPark

log = logging.getLogger("catalog_service")


async def list_tech_parks() -> List[TechPark]:
    return await TechPark.filter(is_active=True).order_by("name")


async def list_restaurants(tech_park_id: UUID) -> List[Restaurant]:
    if not await TechPark.exists(id=tech_park_id):
        raise NotFoundError("Tech park not found.")
    return await Restaurant.filter(tech_park_id=tech_park_id).order_by("distance", "name")


async def get_restaurant(restaurant_id: UUID) -> Restaurant:
    restaurant = await Restaurant.get_or_none(id=restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant not found.")
    return restaurant


async def get_menu(restaurant_id: UUID) -> List[dict]:
    """
    Menu of a restaurant grouped by category, in display order.
    Items without a category, or whose category is inactive, are listed last
    under "Other".
    """
    restaurant = await get_restaurant(restaurant_id)
    categories = await MenuCategory.filter(restaurant_id=restaurant.id, is_active=True).order_by("display_order", "name")
    items = await MenuItem.filter(restaurant_id=restaurant.id).order_by("name")

    active_ids = {category.id for category in categories}
    by_category = {}
    for item in items:
        key = item.category_id if item.category_id in active_ids else None
        by_category.setdefault(key, []).append(item)

    menu = [
        {
            "id": category.id,
            "name": category.name,
            "display_order": category.display_order,
            "items": by_category.get(category.id, []),
        }
        for category in categories
    ]
    if by_category.get(None):
        menu.append({"id": None, "name": "Other", "display_order": len(menu), "items": by_category[None]})
    return menu


async def get_menu_items(restaurant_id: UUID, ids: List[UUID]) -> List[MenuItem]:
    return await MenuItem.filter(restaurant_id=restaurant_id, id__in=ids)


async def get_manager_restaurant(manager_id: UUID) -> Optional[Restaurant]:
    return await Restaurant.get_or_none(manager_id=manager_id)
