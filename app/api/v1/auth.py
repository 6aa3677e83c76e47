from fastapi import APIRouter, Depends
from app.api.deps import get_current_manager
from app.core.errors import NotFoundError
from app.models.account import Manager
from app.schemas.account import (
    EmployeeLoginRequest,
    EmployeeResponse,
    ManagerLoginRequest,
    ManagerLoginResponse,
    ManagerResponse,
)
from app.schemas.catalog import RestaurantResponse
from app.schemas.response import SuccessResponse
from app.services.account_service import authenticate_manager, issue_token, login_employee
from app.services.catalog_service import get_manager_restaurant

router = APIRouter()


@router.post("/auth/user/login", response_model=SuccessResponse)
async def employee_login_endpoint(payload: EmployeeLoginRequest):
    """Signs an employee in, registering them on first use."""
    employee = await login_employee(payload.model_dump())
    return SuccessResponse(data={"user": EmployeeResponse.model_validate(employee).model_dump(mode="json")})


@router.post("/auth/manager/login", response_model=SuccessResponse)
async def manager_login_endpoint(payload: ManagerLoginRequest):
    manager = await authenticate_manager(payload.username, payload.password)
    restaurant = await get_manager_restaurant(manager.id)
    data = ManagerLoginResponse(
        token=issue_token(manager),
        manager=ManagerResponse.model_validate(manager),
        restaurant=RestaurantResponse.model_validate(restaurant) if restaurant else None,
    ).model_dump(mode="json")
    return SuccessResponse(data=data)


@router.get("/manager/me/restaurant", response_model=SuccessResponse)
async def manager_restaurant_endpoint(manager: Manager = Depends(get_current_manager)):
    restaurant = await get_manager_restaurant(manager.id)
    if not restaurant:
        raise NotFoundError("Restaurant not found.")
    return SuccessResponse(data=RestaurantResponse.model_validate(restaurant).model_dump(mode="json"))
