from fastapi import APIRouter, Depends

from gateway_api.adapters.payments import RazorpayPaymentAdapter
from gateway_api.adapters.storage import DriveStorageAdapter
from gateway_api.dependencies import get_payment_adapter, get_storage_adapter
from gateway_api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(
    storage: DriveStorageAdapter = Depends(get_storage_adapter),
    payments: RazorpayPaymentAdapter = Depends(get_payment_adapter),
) -> HealthResponse:
    """
    Health check endpoint for monitoring gateway readiness.

    Reports whether each vendor integration has the configuration it needs.
    No vendor is contacted.
    """
    components = {
        "api": "ready",
        "storage": "ready" if storage.folder_id else "missing GOOGLE_DRIVE_FOLDER_ID",
        "payments": "ready" if payments.configured else "missing Razorpay keys",
    }
    overall = "ok" if all(v == "ready" for v in components.values()) else "degraded"
    return HealthResponse(status=overall, components=components)
