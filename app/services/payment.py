"""Simulated payment step of checkout. No money moves anywhere."""
import logging
import random
from typing import Optional, Union
from app.core.config import PAYMENT_FAILURE_RATE
from app.core.errors import PaymentFailedError, ValidationFailedError
from app.models.order import OrderType, PaymentMethod, PaymentStatus

log = logging.getLogger("payment")


def check_payment_method(method: Union[PaymentMethod, str], order_type: Union[OrderType, str]) -> None:
    """Cash is only collected on delivery."""
    if PaymentMethod(method) == PaymentMethod.COD and OrderType(order_type) != OrderType.DELIVERY:
        raise ValidationFailedError("Cash on delivery is only available for delivery orders.", field="payment_method")


def process_payment(
    amount: int,
    method: Union[PaymentMethod, str],
    order_type: Union[OrderType, str],
    rng: Optional[random.Random] = None,
    failure_rate: float = PAYMENT_FAILURE_RATE,
) -> PaymentStatus:
    """
    Runs the fake payment and returns the payment status to store on the order.

    Raises PaymentFailedError for the injected random failures; the caller
    creates nothing in that case and the user may simply try again.
    """
    method = PaymentMethod(method)
    check_payment_method(method, order_type)

    if method == PaymentMethod.COD:
        return PaymentStatus.PENDING

    draw = (rng or random).random()
    if draw < failure_rate:
        log.warning(f"Simulated {method.value} payment of {amount} failed.")
        raise PaymentFailedError()

    log.info(f"Simulated {method.value} payment of {amount} completed.")
    return PaymentStatus.COMPLETED
