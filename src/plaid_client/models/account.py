"""
Account types and the /accounts/get and /accounts/balance/get endpoints.
"""

from enum import Enum
from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel
from .item import Item


class AccountType(str, Enum):
    INVESTMENT = "investment"
    CREDIT = "credit"
    DEPOSITORY = "depository"
    LOAN = "loan"
    BROKERAGE = "brokerage"
    OTHER = "other"


class Balance(PlaidModel):
    available: Optional[float] = None
    current: Optional[float] = None
    iso_currency_code: Optional[str] = None
    limit: Optional[float] = None
    unofficial_currency_code: Optional[str] = None


class Account(PlaidModel):
    account_id: str
    balances: Balance
    mask: Optional[str] = None
    name: str
    official_name: Optional[str] = None
    type: AccountType
    subtype: Optional[str] = None
    # Documented as non-nullable but frequently absent from payloads.
    verification_status: Optional[str] = None


class AccountsFilter(PlaidModel):
    account_ids: List[str]


class GetAccountsResponse(PlaidModel):
    accounts: List[Account]
    item: Item
    request_id: str


class GetAccountsRequest(Endpoint):
    path: ClassVar[str] = "/accounts/get"
    response_model: ClassVar[Type[BaseModel]] = GetAccountsResponse

    access_token: str
    options: Optional[AccountsFilter] = None


class AccountBalanceFilter(PlaidModel):
    account_ids: List[str]
    min_last_updated_datetime: Optional[str] = None


class AccountBalancesGetResponse(PlaidModel):
    accounts: List[Account]
    item: Item
    request_id: str


class AccountBalancesGetRequest(Endpoint):
    """Real-time balance check; slower than /accounts/get but never cached."""

    path: ClassVar[str] = "/accounts/balance/get"
    response_model: ClassVar[Type[BaseModel]] = AccountBalancesGetResponse

    access_token: str
    options: Optional[AccountBalanceFilter] = None
