from pydantic import BaseModel

from src.api.core.messages import APIResponse


class StripeConnectData(BaseModel):
    url: str


StripeConnectResponse = APIResponse[StripeConnectData]
