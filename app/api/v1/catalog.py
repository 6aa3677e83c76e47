from fastapi import APIRouter
from uuid import UUID
from app.schemas.catalog import MenuCategoryResponse, MenuItemResponse, RestaurantResponse, TechParkResponse
from app.schemas.response import SuccessResponse
from app.services.catalog_service import get_menu, get_restaurant, list_restaurants, list_tech_parks

router = APIRouter()


@router.get("/tech-parks", response_model=SuccessResponse)
async def list_tech_parks_endpoint():
    parks = await list_tech_parks()
    return SuccessResponse(data=[TechParkResponse.model_validate(p).model_dump(mode="json") for p in parks])


@router.get("/tech-parks/{tech_park_id}/restaurants", response_model=SuccessResponse)
async def list_restaurants_endpoint(tech_park_id: UUID):
    """Restaurants of a tech park, nearest first."""
    restaurants = await list_restaurants(tech_park_id)
    return SuccessResponse(data=[RestaurantResponse.model_validate(r).model_dump(mode="json") for r in restaurants])


@router.get("/restaurants/{restaurant_id}", response_model=SuccessResponse)
async def get_restaurant_endpoint(restaurant_id: UUID):
    restaurant = await get_restaurant(restaurant_id)
    return SuccessResponse(data=RestaurantResponse.model_validate(restaurant).model_dump(mode="json"))


@router.get("/menu/restaurant/{restaurant_id}", response_model=SuccessResponse)
async def get_menu_endpoint(restaurant_id: UUID):
    """Menu grouped by category; unavailable items are included and flagged."""
    menu = await get_menu(restaurant_id)
    data = [
        MenuCategoryResponse(
            id=section["id"],
            name=section["name"],
            display_order=section["display_order"],
            items=[MenuItemResponse.model_validate(item) for item in section["items"]],
        ).model_dump(mode="json")
        for section in menu
    ]
    return SuccessResponse(data=data)
