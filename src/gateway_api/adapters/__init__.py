"""
Vendor adapters.

Each adapter wraps one third-party SDK and reports the outcome of every call as
an ``AdapterResult`` instead of raising.
"""
from gateway_api.adapters.payments import RazorpayPaymentAdapter, build_razorpay_client
from gateway_api.adapters.results import AdapterResult
from gateway_api.adapters.storage import DriveStorageAdapter, StoredFile, build_drive_service

__all__ = [
    "AdapterResult",
    "DriveStorageAdapter",
    "RazorpayPaymentAdapter",
    "StoredFile",
    "build_drive_service",
    "build_razorpay_client",
]
