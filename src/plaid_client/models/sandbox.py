"""
Sandbox-only endpoints used to drive test Items through specific states.
"""

from enum import Enum
from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel


class CreatePublicTokenOptionsTransactions(PlaidModel):
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class CreatePublicTokenOptions(PlaidModel):
    webhook: Optional[str] = None
    # Sandbox defaults are user_good / pass_good.
    override_username: Optional[str] = None
    override_password: Optional[str] = None
    transactions: Optional[CreatePublicTokenOptionsTransactions] = None


class CreatePublicTokenResponse(PlaidModel):
    public_token: str
    request_id: Optional[str] = None


class CreatePublicTokenRequest(Endpoint):
    path: ClassVar[str] = "/sandbox/public_token/create"
    response_model: ClassVar[Type[BaseModel]] = CreatePublicTokenResponse

    institution_id: str
    initial_products: List[str]
    options: Optional[CreatePublicTokenOptions] = None


class ResetLoginResponse(PlaidModel):
    reset_login: bool
    request_id: Optional[str] = None


class ResetLoginRequest(Endpoint):
    path: ClassVar[str] = "/sandbox/item/reset_login"
    response_model: ClassVar[Type[BaseModel]] = ResetLoginResponse

    access_token: str


class VerificationStatus(str, Enum):
    AUTOMATICALLY_VERIFIED = "automatically_verified"
    VERIFICATION_EXPIRED = "verification_expired"


class SetVerificationStatusResponse(PlaidModel):
    request_id: str


class SetVerificationStatusRequest(Endpoint):
    path: ClassVar[str] = "/sandbox/item/set_verification_status"
    response_model: ClassVar[Type[BaseModel]] = SetVerificationStatusResponse

    access_token: str
    account_id: str
    verification_status: VerificationStatus


class WebhookCode(str, Enum):
    DEFAULT_UPDATE = "DEFAULT_UPDATE"


class FireWebhookResponse(PlaidModel):
    webhook_fired: bool
    request_id: str


class FireWebhookRequest(Endpoint):
    path: ClassVar[str] = "/sandbox/item/fire_webhook"
    response_model: ClassVar[Type[BaseModel]] = FireWebhookResponse

    access_token: str
    webhook_code: WebhookCode = WebhookCode.DEFAULT_UPDATE
