"""Presigned image uploads."""

from fastapi import APIRouter, Request

from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.upload.schemas import UploadSignData, UploadSignRequest, UploadSignResponse
from src.modules.upload.service import UploadService

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("/sign", response_model=UploadSignResponse)
@require_role(*ANY_STAFF_ROLE)
async def sign_upload(
    request: Request,
    upload_data: UploadSignRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> UploadSignResponse:
    """Issue a short-lived URL the browser can PUT an image to."""
    signed = await UploadService(db).create_upload_url(
        session, upload_data.content_type, upload_data.filename
    )
    return APIResponse.success_response(
        message_code=MessageCode.UPLOAD_URL_CREATED,
        data=UploadSignData(
            upload_url=signed.upload_url,
            public_url=signed.public_url,
            key=signed.key,
            expires_in=signed.expires_in,
        ),
    )
