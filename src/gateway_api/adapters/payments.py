"""
Razorpay adapter: creates payment orders.
"""

import logging
from typing import Any, Dict, Optional

from gateway_api.adapters.results import AdapterResult, error_message
from gateway_api.utils.decorators import log_vendor_call

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Razorpay key id and secret are not configured"


def build_razorpay_client(key_id: Optional[str], key_secret: Optional[str]) -> Optional[Any]:
    """Create a Razorpay client, or None when the keys are missing."""
    if not key_id or not key_secret:
        logger.warning("Razorpay keys are not set; order creation is disabled")
        return None

    import razorpay

    return razorpay.Client(auth=(key_id, key_secret))


class RazorpayPaymentAdapter:
    """Creates orders in a fixed currency with a fixed capture policy."""

    def __init__(self, client: Optional[Any], currency: str = "INR", payment_capture: int = 1):
        self._client = client
        self.currency = currency
        self.payment_capture = payment_capture

    @property
    def configured(self) -> bool:
        return self._client is not None

    @log_vendor_call("razorpay.order.create", logger_name=__name__)
    def create_order(self, order_id: str, amount: int) -> AdapterResult[Dict[str, Any]]:
        """
        Create an order and return it exactly as Razorpay does.

        :param order_id: Caller reference, sent as the order receipt.
        :param amount: Amount in the smallest currency unit (paise for INR).
        """
        if self._client is None:
            return AdapterResult.failure(NOT_CONFIGURED_MESSAGE)

        options = {
            "amount": amount,
            "currency": self.currency,
            "receipt": order_id,
            "payment_capture": self.payment_capture,
        }
        try:
            order = self._client.order.create(data=options)
        except Exception as e:
            return AdapterResult.failure(error_message(e))
        return AdapterResult.success(order)
