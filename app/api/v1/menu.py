import logging
from fastapi import APIRouter, Depends, status
from uuid import UUID
from app.api.deps import get_current_manager
from app.models.account import Manager
from app.schemas.catalog import AvailabilityUpdate, MenuItemCreate, MenuItemResponse, MenuItemUpdate
from app.schemas.response import SuccessResponse
from app.services.menu_service import create_menu_item, delete_menu_item, set_availability, update_menu_item

log = logging.getLogger("uvicorn")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()


@router.post("/items", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_menu_item_endpoint(item_data: MenuItemCreate, manager: Manager = Depends(get_current_manager)):
    """Adds an item to the manager's own restaurant."""
    item = await create_menu_item(manager, item_data.model_dump())
    return SuccessResponse(data=MenuItemResponse.model_validate(item).model_dump(mode="json"))


@router.put("/items/{item_id}", response_model=SuccessResponse)
async def update_menu_item_endpoint(item_id: UUID, changes: MenuItemUpdate,
                                    manager: Manager = Depends(get_current_manager)):
    """Partial update: fields left out of the body keep their value."""
    item = await update_menu_item(manager, item_id, changes.model_dump(exclude_unset=True))
    return SuccessResponse(data=MenuItemResponse.model_validate(item).model_dump(mode="json"))


@router.patch("/items/{item_id}/availability", response_model=SuccessResponse)
async def availability_endpoint(item_id: UUID, payload: AvailabilityUpdate,
                                manager: Manager = Depends(get_current_manager)):
    """Marks an item in or out of stock."""
    item = await set_availability(manager, item_id, payload.is_available)
    return SuccessResponse(data=MenuItemResponse.model_validate(item).model_dump(mode="json"))


@router.delete("/items/{item_id}", response_model=SuccessResponse)
async def delete_menu_item_endpoint(item_id: UUID, manager: Manager = Depends(get_current_manager)):
    await delete_menu_item(manager, item_id)
    return SuccessResponse(data={"deleted": str(item_id)})
