import logging
from textwrap import dedent
from typing import Optional

import pydantic
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway_api.adapters.payments import RazorpayPaymentAdapter, build_razorpay_client
from gateway_api.adapters.storage import DriveStorageAdapter, build_drive_service
from gateway_api.config.settings import Settings, get_settings
from gateway_api.credentials import build_drive_credentials, load_service_account_info
from gateway_api.errors import (
    handle_broad_exceptions,
    handle_http_exceptions,
    handle_pydantic_validation_errors,
    handle_request_validation_errors,
)
from gateway_api.routers.files import router as files_router
from gateway_api.routers.health import router as health_router
from gateway_api.routers.payments import router as payments_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_storage_adapter(settings: Settings) -> DriveStorageAdapter:
    """Build the Drive adapter; fails fast when the service-account key is unusable."""
    info = load_service_account_info(settings.google_service_account_json)
    credentials = build_drive_credentials(info, settings.google_drive_scopes)
    if not settings.google_drive_folder_id:
        logger.warning("GOOGLE_DRIVE_FOLDER_ID is not set; uploads will fail")
    return DriveStorageAdapter(build_drive_service(credentials), settings.google_drive_folder_id)


def create_payment_adapter(settings: Settings) -> RazorpayPaymentAdapter:
    client = build_razorpay_client(settings.razorpay_key_id, settings.razorpay_key_secret)
    return RazorpayPaymentAdapter(
        client,
        currency=settings.razorpay_currency,
        payment_capture=settings.razorpay_payment_capture,
    )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[DriveStorageAdapter] = None,
    payments: Optional[RazorpayPaymentAdapter] = None,
) -> FastAPI:
    """
    Create the gateway application.

    Vendor adapters are built from ``settings`` unless they are passed in. A missing
    or malformed service-account key raises ``ConfigurationError`` here, so the
    process never starts serving without credentials.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if storage is None:
        storage = create_storage_adapter(settings)
    if payments is None:
        payments = create_payment_adapter(settings)

    app = FastAPI(
        title=settings.app_name,
        summary="Upload files to Google Drive, share them, and create Razorpay orders",
        version="v1",
        description=dedent(
            """\
        | Endpoint | Vendor call |
        | --- | --- |
        | `POST /upload` | Drive `files.create` into the configured folder |
        | `POST /grant-access` | Drive `permissions.create` (reader) |
        | `POST /create-razorpay-order` | Razorpay `orders.create` |
        """
        ),
        docs_url="/docs",
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.payments = payments

    app.include_router(files_router, tags=["files"])
    app.include_router(payments_router, tags=["payments"])
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(StarletteHTTPException, handle_http_exceptions)
    app.add_exception_handler(RequestValidationError, handle_request_validation_errors)
    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    logger.info(f"{settings.app_name} ready (drive folder: {settings.google_drive_folder_id})")
    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
