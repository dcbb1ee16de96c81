"""Service-account credential loading for the Drive client."""
import json
import logging
from typing import Any, Dict, Optional, Sequence

from google.oauth2 import service_account

logger = logging.getLogger(__name__)

CREDENTIALS_ENV_VAR = "GOOGLE_SERVICE_ACCOUNT_JSON"


class ConfigurationError(RuntimeError):
    """Raised when the process configuration cannot be used to start the gateway."""


def load_service_account_info(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parse the serialized service-account key.

    :param raw: JSON text taken from the environment.
    :return: The decoded key structure.
    :raises ConfigurationError: if the value is absent, not JSON, or not a JSON object.
    """
    if raw is None or not raw.strip():
        raise ConfigurationError(f"Missing {CREDENTIALS_ENV_VAR} environment variable.")

    try:
        info = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse {CREDENTIALS_ENV_VAR}: {e}")
        raise ConfigurationError(f"Failed to parse {CREDENTIALS_ENV_VAR}: {e}") from e

    if not isinstance(info, dict):
        raise ConfigurationError(f"{CREDENTIALS_ENV_VAR} must contain a JSON object")
    return info


def build_drive_credentials(info: Dict[str, Any], scopes: Sequence[str]) -> service_account.Credentials:
    """Turn a decoded key into scoped service-account credentials."""
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=list(scopes))
    except (ValueError, KeyError) as e:
        logger.error(f"Invalid service account key in {CREDENTIALS_ENV_VAR}: {e}")
        raise ConfigurationError(f"Invalid service account key in {CREDENTIALS_ENV_VAR}: {e}") from e
