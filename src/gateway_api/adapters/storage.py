"""
Google Drive adapter: the "upload" and "grant access" calls the gateway needs.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httplib2

from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.http import HttpRequest, MediaIoBaseUpload

from gateway_api.adapters.results import AdapterResult, error_message
from gateway_api.utils.decorators import log_vendor_call

logger = logging.getLogger(__name__)

UPLOAD_FIELDS = "id, name, webViewLink"
PERMISSION_FIELDS = "id"
DEFAULT_MIME_TYPE = "application/octet-stream"


def default_view_link(file_id: str) -> str:
    """Canonical browser link for a Drive file."""
    return f"https://drive.google.com/file/d/{file_id}/view"


@dataclass(frozen=True)
class StoredFile:
    """A file as Drive reports it after creation."""
    id: str
    name: str
    web_view_link: str


def _per_request_builder(credentials: Any) -> Callable[..., HttpRequest]:
    """Request factory that gives every Drive request its own authorized transport.

    ``httplib2.Http`` is not thread-safe and requests run on the server's threadpool.
    """
    def build_request(http, *args, **kwargs):
        return HttpRequest(AuthorizedHttp(credentials, http=httplib2.Http()), *args, **kwargs)
    return build_request


def build_drive_service(credentials: Any) -> Any:
    """Create a Drive v3 service object from authorized credentials."""
    return build(
        "drive",
        "v3",
        credentials=credentials,
        requestBuilder=_per_request_builder(credentials),
        cache_discovery=False,
    )


class DriveStorageAdapter:
    """
    Stores files in a single Drive folder and shares them with individual accounts.

    The adapter holds no per-request state, so one instance is shared by every
    request for the lifetime of the process.
    """

    def __init__(self, service: Any, folder_id: Optional[str]):
        self._service = service
        self._folder_id = folder_id

    @property
    def folder_id(self) -> Optional[str]:
        return self._folder_id

    @log_vendor_call("drive.files.create", logger_name=__name__)
    def upload_file(self, local_path: str, name: str, mime_type: Optional[str] = None) -> AdapterResult[StoredFile]:
        """
        Upload a local file into the configured folder.

        :param local_path: Path of the staged file to read.
        :param name: Name the file is stored under.
        :param mime_type: MIME type of the content, e.g. "application/pdf".
        """
        if not self._folder_id:
            return AdapterResult.failure("GOOGLE_DRIVE_FOLDER_ID is not configured")

        metadata = {"name": name, "parents": [self._folder_id]}
        try:
            with open(local_path, "rb") as fh:
                media = MediaIoBaseUpload(fh, mimetype=mime_type or DEFAULT_MIME_TYPE, resumable=False)
                created = (
                    self._service.files()
                    .create(body=metadata, media_body=media, fields=UPLOAD_FIELDS)
                    .execute()
                )
        except Exception as e:
            return AdapterResult.failure(error_message(e))

        file_id = created.get("id")
        return AdapterResult.success(
            StoredFile(
                id=file_id,
                name=created.get("name", name),
                web_view_link=created.get("webViewLink") or default_view_link(file_id),
            )
        )

    @log_vendor_call("drive.permissions.create", logger_name=__name__)
    def grant_access(self, file_id: str, email: str) -> AdapterResult[str]:
        """Give ``email`` read-only access to ``file_id``; returns the permission id."""
        permission = {
            "type": "user",
            "role": "reader",
            "emailAddress": email,
        }
        try:
            created = (
                self._service.permissions()
                .create(fileId=file_id, body=permission, fields=PERMISSION_FIELDS)
                .execute()
            )
        except Exception as e:
            return AdapterResult.failure(error_message(e))
        return AdapterResult.success(created.get("id"))
