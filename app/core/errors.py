"""Domain errors raised by the service layer.

All of them subclass ``ValueError`` so callers that only care about "the
request was rejected" can keep catching ``ValueError``. Each class carries the
HTTP status and error code the exception handlers render it with.
"""
from typing import Any, Dict, List, Optional


class OrderServiceError(ValueError):
    status_code = 400
    code = "bad_request"
    retryable = False

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailedError(OrderServiceError):
    """Payload is well-formed JSON but breaks a business rule."""
    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        details = [{"field": field, "message": message}] if field else None
        super().__init__(message, details)
        self.field = field


class EstimateRequiredError(ValidationFailedError):
    code = "estimate_required"

    def __init__(self, message: str = "An estimated preparation time is required to confirm the order."):
        super().__init__(message, field="estimated_time")


class NotFoundError(OrderServiceError):
    status_code = 404
    code = "not_found"


class NotAuthenticatedError(OrderServiceError):
    status_code = 401
    code = "not_authenticated"


class NotAuthorizedError(OrderServiceError):
    status_code = 403
    code = "not_authorized"

    def __init__(self, message: str = "Not authorized to perform this action."):
        super().__init__(message)


class InvalidTransitionError(OrderServiceError):
    status_code = 409
    code = "invalid_transition"


class PaymentFailedError(OrderServiceError):
    status_code = 402
    code = "payment_failed"
    retryable = True

    def __init__(self, message: str = "Your payment could not be processed. Please try again."):
        super().__init__(message)
