# src/gateway_api/config/settings.py
import logging
import tempfile
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DRIVE_FILE_SCOPE = "https://www.googleapis.com/auth/drive.file"


class Settings(BaseSettings):
    """
    Single source of truth for all gateway settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from gateway_api.config.settings import get_settings
        settings = get_settings()
        folder_id = settings.google_drive_folder_id
    """

    # Application Settings
    app_name: str = Field(
        default="drive-razorpay-gateway",
        description="Application name"
    )

    # Google Drive Configuration
    google_service_account_json: Optional[str] = Field(
        default=None,
        description="Serialized service-account key (JSON text)"
    )

    google_drive_folder_id: Optional[str] = Field(
        default=None,
        description="Drive folder that receives every upload"
    )

    google_drive_scopes: List[str] = Field(
        default=[DRIVE_FILE_SCOPE],
        description="OAuth scopes requested for the service account"
    )

    # Razorpay Configuration
    razorpay_key_id: Optional[str] = Field(
        default=None,
        description="Razorpay API key id"
    )

    razorpay_key_secret: Optional[str] = Field(
        default=None,
        description="Razorpay API key secret"
    )

    razorpay_currency: str = Field(
        default="INR",
        description="Currency every order is created in"
    )

    razorpay_payment_capture: int = Field(
        default=1,
        description="1 captures payments immediately"
    )

    # Upload staging
    upload_tmp_dir: str = Field(
        default_factory=tempfile.gettempdir,
        description="Writable directory where multipart uploads are staged"
    )

    # HTTP
    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the gateway"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only level names the logging module knows about."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log_level: {v}")
        return level

    @field_validator("razorpay_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        currency = v.strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ValueError(f"Invalid razorpay_currency: {v}. Expected an ISO 4217 code")
        return currency

    @property
    def storage_configured(self) -> bool:
        return bool(self.google_drive_folder_id)

    @property
    def payments_configured(self) -> bool:
        return bool(self.razorpay_key_id and self.razorpay_key_secret)

    def masked_dict(self) -> dict:
        """Settings as a dictionary with secrets replaced, for display."""
        values = self.model_dump()
        for key in ("google_service_account_json", "razorpay_key_secret"):
            if values.get(key):
                values[key] = "****"
        return values

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
