import logging
from typing import Optional

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    UploadFile,
    status
)

from gateway_api.adapters.storage import DriveStorageAdapter
from gateway_api.config.settings import Settings
from gateway_api.dependencies import get_app_settings, get_storage_adapter
from gateway_api.schemas import (
    ErrorResponse,
    GrantAccessRequest,
    GrantAccessResponse,
    UploadResponse,
)
from gateway_api.staging import staged_upload

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post("/upload", response_model=UploadResponse, responses=ERROR_RESPONSES)
def upload_file(
    file: Optional[UploadFile] = File(None, description="The file to store"),
    desiredFileName: Optional[str] = Form(None, description="Name to store the file under"),
    settings: Settings = Depends(get_app_settings),
    storage: DriveStorageAdapter = Depends(get_storage_adapter),
) -> UploadResponse:
    """
    Store an uploaded file in the configured Drive folder.

    The multipart part is staged in the upload directory for the duration of the
    request and removed afterwards, whatever the outcome of the Drive call.

    Args:
        file: The file to upload
        desiredFileName: Optional name override (defaults to the uploaded filename)

    Returns:
        UploadResponse: Drive id, stored name and browser link
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded."
        )

    file_name = desiredFileName or file.filename
    try:
        with staged_upload(file.file, settings.upload_tmp_dir) as local_path:
            result = storage.upload_file(local_path, file_name, file.content_type)
    except OSError as e:
        logger.error(f"Upload error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    if not result.ok:
        logger.error(f"Upload error: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error
        )

    stored = result.value
    return UploadResponse(id=stored.id, name=stored.name, webViewLink=stored.web_view_link)


@router.post("/grant-access", response_model=GrantAccessResponse, responses=ERROR_RESPONSES)
def grant_access(
    body: Optional[GrantAccessRequest] = None,
    storage: DriveStorageAdapter = Depends(get_storage_adapter),
) -> GrantAccessResponse:
    """Give an account read-only access to a stored file."""
    if body is None or not body.fileId or not body.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="fileId and email are required"
        )

    result = storage.grant_access(body.fileId, body.email)
    if not result.ok:
        logger.error(f"Grant access error: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error
        )

    return GrantAccessResponse(success=True, message=f"Access granted to {body.email}")
