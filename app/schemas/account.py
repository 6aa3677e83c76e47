import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from app.schemas.catalog import RestaurantResponse


class EmployeeLoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    tech_park: str
    company: str
    designation: str
    employee_name: str
    mobile: str


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    employee_name: str
    tech_park: str
    company: str


class ManagerLoginRequest(BaseModel):
    username: str
    password: str


class ManagerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    name: Optional[str] = None
    email: str
    tech_park: str


class ManagerLoginResponse(BaseModel):
    token: str
    manager: ManagerResponse
    restaurant: Optional[RestaurantResponse] = None
