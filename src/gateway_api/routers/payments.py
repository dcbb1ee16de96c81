import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from gateway_api.adapters.payments import RazorpayPaymentAdapter
from gateway_api.dependencies import get_payment_adapter
from gateway_api.schemas import CreateOrderRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create-razorpay-order",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def create_razorpay_order(
    body: Optional[CreateOrderRequest] = None,
    payments: RazorpayPaymentAdapter = Depends(get_payment_adapter),
) -> Dict[str, Any]:
    """
    Create a Razorpay order.

    The order is created in the configured currency with immediate capture, using
    `orderId` as the receipt. The order object Razorpay returns is passed through
    unchanged. No idempotency key is sent, so repeating a call creates a new order.
    """
    if body is None or not body.orderId or not body.amount:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="orderId and amount are required"
        )

    result = payments.create_order(body.orderId, body.amount)
    if not result.ok:
        logger.error(f"Razorpay order error: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error
        )
    return result.value
