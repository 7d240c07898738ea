from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .account import Account, AccountsFilter
from .common import Endpoint, PlaidModel
from .item import Item


class GetIdentityResponse(PlaidModel):
    accounts: List[Account]
    item: Item
    request_id: str


class GetIdentityRequest(Endpoint):
    path: ClassVar[str] = "/identity/get"
    response_model: ClassVar[Type[BaseModel]] = GetIdentityResponse

    access_token: str
    options: Optional[AccountsFilter] = None
