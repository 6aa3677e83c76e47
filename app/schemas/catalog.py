import uuid
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional


class TechParkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    location: str
    description: Optional[str] = None
    total_outlets: int


class RestaurantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    tech_park_id: Optional[uuid.UUID] = None
    name: str
    description: Optional[str] = None
    cuisine: str
    rating: float
    distance: Optional[float] = None
    preparation_time: Optional[str] = None
    price_range: Optional[str] = None
    is_open: bool
    delivery_available: bool
    takeaway_available: bool
    dinein_available: bool
    image_url: Optional[str] = None
    location: Optional[Dict[str, Any]] = None


class MenuItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    restaurant_id: uuid.UUID
    category_id: Optional[uuid.UUID] = None
    name: str
    description: Optional[str] = None
    price: int
    is_veg: bool
    is_available: bool
    preparation_time: Optional[int] = None
    image_url: Optional[str] = None


class MenuCategoryResponse(BaseModel):
    id: Optional[uuid.UUID]
    name: str
    display_order: int
    items: List[MenuItemResponse]


class MenuItemCreate(BaseModel):
    restaurant_id: uuid.UUID
    category_id: Optional[uuid.UUID] = None
    name: str = Field(..., min_length=1, description="Name of the menu item (e.g., Paneer Butter Masala).")
    description: Optional[str] = None
    price: int = Field(..., ge=0, description="Selling price in whole currency units.")
    is_veg: bool = True
    is_available: bool = True
    preparation_time: Optional[int] = Field(None, ge=0, description="Preparation time in minutes.")
    image_url: Optional[str] = None


class MenuItemUpdate(BaseModel):
    category_id: Optional[uuid.UUID] = None
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0)
    is_veg: Optional[bool] = None
    is_available: Optional[bool] = None
    preparation_time: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = None

    @field_validator("name", "price", "is_veg", "is_available")
    @classmethod
    def not_null(cls, value):
        # Omit a field to keep it; these columns cannot be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class AvailabilityUpdate(BaseModel):
    is_available: bool
