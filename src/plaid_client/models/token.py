"""
Link and access token endpoints.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel


class ExchangePublicTokenResponse(PlaidModel):
    access_token: str
    item_id: str
    request_id: str


class ExchangePublicTokenRequest(Endpoint):
    path: ClassVar[str] = "/item/public_token/exchange"
    response_model: ClassVar[Type[BaseModel]] = ExchangePublicTokenResponse

    public_token: str


class LinkUser(PlaidModel):
    client_user_id: str
    legal_name: Optional[str] = None
    phone_number: Optional[str] = None
    phone_number_verified_time: Optional[str] = None
    email_address: Optional[str] = None
    email_address_verified_time: Optional[str] = None
    ssn: Optional[str] = None
    date_of_birth: Optional[str] = None


class AccountFilter(PlaidModel):
    account_subtypes: List[str]


class AccountFilters(PlaidModel):
    depository: Optional[AccountFilter] = None
    credit: Optional[AccountFilter] = None
    loan: Optional[AccountFilter] = None
    investment: Optional[AccountFilter] = None


class EUConfig(PlaidModel):
    headless: Optional[bool] = None


class PaymentInitiation(PlaidModel):
    payment_id: str


class DepositSwitchOptions(PlaidModel):
    deposit_switch_id: str


class IncomeVerification(PlaidModel):
    income_verification_id: str
    asset_report_id: Optional[str] = None


class LinkAuth(PlaidModel):
    flow_type: str


class CreateLinkTokenResponse(PlaidModel):
    link_token: str
    expiration: str
    request_id: str


class CreateLinkTokenRequest(Endpoint):
    path: ClassVar[str] = "/link/token/create"
    response_model: ClassVar[Type[BaseModel]] = CreateLinkTokenResponse

    client_name: str
    language: str = "en"
    country_codes: List[str]
    user: LinkUser
    products: List[str]
    webhook: Optional[str] = None
    access_token: Optional[str] = None
    link_customization_name: Optional[str] = None
    redirect_uri: Optional[str] = None
    android_package_name: Optional[str] = None
    account_filters: Optional[AccountFilters] = None
    eu_config: Optional[EUConfig] = None
    payment_initiation: Optional[PaymentInitiation] = None
    deposit_switch: Optional[DepositSwitchOptions] = None
    income_verification: Optional[IncomeVerification] = None
    auth: Optional[LinkAuth] = None
    institution_id: Optional[str] = None


class GetLinkTokenResponse(PlaidModel):
    link_token: str
    expiration: Optional[str] = None
    created_at: Optional[str] = None
    request_id: str


class GetLinkTokenRequest(Endpoint):
    path: ClassVar[str] = "/link/token/get"
    response_model: ClassVar[Type[BaseModel]] = GetLinkTokenResponse

    link_token: str


class InvalidateAccessTokenResponse(PlaidModel):
    new_access_token: str
    request_id: str


class InvalidateAccessTokenRequest(Endpoint):
    """Rotates an access token; the old one stops working immediately."""

    path: ClassVar[str] = "/item/access_token/invalidate"
    response_model: ClassVar[Type[BaseModel]] = InvalidateAccessTokenResponse

    access_token: str
