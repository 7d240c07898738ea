from typing import Any, ClassVar, Dict, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel


class GetWebhookVerificationKeyResponse(PlaidModel):
    # JSON Web Key; values are strings except expired_at, which may be null.
    key: Dict[str, Any]
    request_id: str


class GetWebhookVerificationKeyRequest(Endpoint):
    path: ClassVar[str] = "/webhook_verification_key/get"
    response_model: ClassVar[Type[BaseModel]] = GetWebhookVerificationKeyResponse

    key_id: str
