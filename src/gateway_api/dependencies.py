"""FastAPI dependencies that hand the process-wide adapters to the routers."""
from fastapi import Request

from gateway_api.adapters.payments import RazorpayPaymentAdapter
from gateway_api.adapters.storage import DriveStorageAdapter
from gateway_api.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage_adapter(request: Request) -> DriveStorageAdapter:
    return request.app.state.storage


def get_payment_adapter(request: Request) -> RazorpayPaymentAdapter:
    return request.app.state.payments
