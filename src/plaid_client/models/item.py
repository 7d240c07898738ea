"""
Item types. An Item is a connection to a single financial institution.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, ErrorResponse, PlaidModel


class StatusMessage(PlaidModel):
    last_successful_update: Optional[str] = None
    last_failed_update: Optional[str] = None


class WebhookStatus(PlaidModel):
    sent_at: Optional[str] = None
    code_sent: Optional[str] = None


class Status(PlaidModel):
    investments: Optional[StatusMessage] = None
    transactions: Optional[StatusMessage] = None
    last_webhook: Optional[WebhookStatus] = None


class Item(PlaidModel):
    item_id: str
    institution_id: Optional[str] = None
    webhook: Optional[str] = None
    error: Optional[ErrorResponse] = None
    available_products: List[str] = []
    billed_products: List[str] = []
    # RFC 3339 timestamp after which the end user's consent expires.
    consent_expiration_time: Optional[str] = None
    update_type: str
    status: Optional[Status] = None


class GetItemResponse(PlaidModel):
    item: Item
    status: Optional[Status] = None
    request_id: str


class GetItemRequest(Endpoint):
    path: ClassVar[str] = "/item/get"
    response_model: ClassVar[Type[BaseModel]] = GetItemResponse

    access_token: str


class RemoveItemResponse(PlaidModel):
    request_id: str


class RemoveItemRequest(Endpoint):
    path: ClassVar[str] = "/item/remove"
    response_model: ClassVar[Type[BaseModel]] = RemoveItemResponse

    access_token: str


class UpdateItemWebhookResponse(PlaidModel):
    item: Item
    request_id: str


class UpdateItemWebhookRequest(Endpoint):
    path: ClassVar[str] = "/item/webhook/update"
    response_model: ClassVar[Type[BaseModel]] = UpdateItemWebhookResponse

    access_token: str
    # The new url to associate with the item.
    webhook: str
