from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import uuid


def new_request_id() -> str:
    """Generates a unique request ID for tracing."""
    return uuid.uuid4().hex


class SuccessResponse(BaseModel):
    """Success envelope: success flag, request_id and the payload under data"""
    success: Optional[bool] = Field(default=True)
    request_id: str = Field(default_factory=new_request_id)
    data: Optional[Any] = None


class ErrorDetail(BaseModel):
    code: str
    message: Any
    details: Optional[List[Dict[str, Any]]] = None
    retryable: Optional[bool] = None # only set for errors the user may simply retry


class ErrorResponse(BaseModel):
    """Error envelope rendered by the exception handlers"""
    success: bool = False
    error: ErrorDetail
    request_id: str = Field(default_factory=new_request_id)
