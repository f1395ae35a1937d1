from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse


class UploadSignRequest(BaseModel):
    content_type: str = Field(..., min_length=1, max_length=100)
    filename: str | None = Field(None, max_length=255)


class UploadSignData(BaseModel):
    upload_url: str
    public_url: str
    key: str
    expires_in: int


UploadSignResponse = APIResponse[UploadSignData]
