"""
Transaction history endpoints and entity types.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .account import Account
from .common import Endpoint, PlaidModel
from .item import Item


DEFAULT_PAGE_SIZE = 100


class TransactionLocation(PlaidModel):
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    store_number: Optional[str] = None


class PaymentMetadata(PlaidModel):
    reference_number: Optional[str] = None
    ppd_id: Optional[str] = None
    payee: Optional[str] = None
    by_order_of: Optional[str] = None
    payer: Optional[str] = None
    payment_method: Optional[str] = None
    payment_processor: Optional[str] = None
    reason: Optional[str] = None


class Transaction(PlaidModel):
    # Deprecated upstream and no longer always present.
    transaction_type: Optional[str] = None
    pending_transaction_id: Optional[str] = None
    category_id: Optional[str] = None
    category: Optional[List[str]] = None
    location: Optional[TransactionLocation] = None
    payment_meta: Optional[PaymentMetadata] = None
    account_owner: Optional[str] = None
    name: str
    original_description: Optional[str] = None
    account_id: str
    amount: float
    iso_currency_code: Optional[str] = None
    unofficial_currency_code: Optional[str] = None
    date: str
    pending: bool
    transaction_id: str
    payment_channel: str
    merchant_name: Optional[str] = None
    authorized_date: Optional[str] = None
    authorized_datetime: Optional[str] = None
    datetime: Optional[str] = None
    check_number: Optional[str] = None
    transaction_code: Optional[str] = None


class GetTransactionsOptions(PlaidModel):
    account_ids: Optional[List[str]] = None
    # Number of transactions per page.
    count: Optional[int] = None
    # Number of transactions from start_date to skip.
    offset: Optional[int] = None
    include_original_description: Optional[bool] = None


class GetTransactionsResponse(PlaidModel):
    accounts: List[Account] = []
    transactions: List[Transaction]
    total_transactions: int
    item: Item
    request_id: str


class GetTransactionsRequest(Endpoint):
    path: ClassVar[str] = "/transactions/get"
    response_model: ClassVar[Type[BaseModel]] = GetTransactionsResponse

    access_token: str
    # YYYY-MM-DD, inclusive.
    start_date: str
    # YYYY-MM-DD, inclusive.
    end_date: str
    options: Optional[GetTransactionsOptions] = None


class RefreshTransactionsResponse(PlaidModel):
    request_id: str


class RefreshTransactionsRequest(Endpoint):
    path: ClassVar[str] = "/transactions/refresh"
    response_model: ClassVar[Type[BaseModel]] = RefreshTransactionsResponse

    access_token: str


class Category(PlaidModel):
    category_id: str
    group: str
    hierarchy: List[str]


class GetCategoriesResponse(PlaidModel):
    categories: List[Category]
    request_id: str


class GetCategoriesRequest(Endpoint):
    """Category listing; the only endpoint that does not need an access token."""

    path: ClassVar[str] = "/categories/get"
    response_model: ClassVar[Type[BaseModel]] = GetCategoriesResponse
