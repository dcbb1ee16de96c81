####################################
# --- Request/response schemas --- #
####################################

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    """Response model for `POST /upload`."""
    id: str = Field(description="Drive file id.")
    name: str = Field(description="Name the file was stored under.")
    webViewLink: str = Field(description="Link that opens the file in a browser.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1a2B3c4D5e6F7g8H9i0J",
                "name": "report.pdf",
                "webViewLink": "https://drive.google.com/file/d/1a2B3c4D5e6F7g8H9i0J/view",
            }
        }
    )


class GrantAccessRequest(BaseModel):
    """Request body for `POST /grant-access`."""
    fileId: Optional[str] = Field(None, description="Drive file id to share.")
    email: Optional[str] = Field(None, description="Account that receives read access.")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"example": {"fileId": "abc123", "email": "a@example.com"}},
    )


class GrantAccessResponse(BaseModel):
    """Response model for `POST /grant-access`."""
    success: bool
    message: str


class CreateOrderRequest(BaseModel):
    """Request body for `POST /create-razorpay-order`."""
    orderId: Optional[str] = Field(None, description="Caller order id, sent as the receipt.")
    amount: Optional[int] = Field(None, description="Amount in the smallest currency unit.")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={"example": {"orderId": "ord-1", "amount": 10000}},
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: str


class HealthResponse(BaseModel):
    """Response model for `GET /health`."""
    status: str
    components: Dict[str, str]
