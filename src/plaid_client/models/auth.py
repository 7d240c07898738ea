"""
Auth product: account and routing numbers for an Item's accounts.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .account import Account, AccountsFilter
from .common import Endpoint, PlaidModel
from .item import Item


class ACHAccountNumber(PlaidModel):
    account_id: str
    account: str
    routing: str
    wire_routing: Optional[str] = None


class EFTAccountNumber(PlaidModel):
    account_id: str
    account: str
    institution: str
    branch: str


class InternationalAccountNumber(PlaidModel):
    account_id: str
    # International Bank Account Number.
    iban: str
    # Bank Identifier Code.
    bic: str


class BACSAccountNumber(PlaidModel):
    account_id: str
    account: str
    sort_code: str


class AccountNumbers(PlaidModel):
    ach: List[ACHAccountNumber] = []
    eft: List[EFTAccountNumber] = []
    international: List[InternationalAccountNumber] = []
    bacs: List[BACSAccountNumber] = []


class GetAuthResponse(PlaidModel):
    accounts: List[Account]
    numbers: AccountNumbers
    item: Item
    request_id: str


class GetAuthRequest(Endpoint):
    path: ClassVar[str] = "/auth/get"
    response_model: ClassVar[Type[BaseModel]] = GetAuthResponse

    access_token: str
    options: Optional[AccountsFilter] = None
