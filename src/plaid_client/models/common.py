"""
Shared model types: the endpoint descriptor base and the API error payload.
"""

from enum import Enum
from typing import ClassVar, Optional, Type

from pydantic import BaseModel


class PlaidModel(BaseModel):
    """Base for every request and response payload."""

    model_config = {"populate_by_name": True, "extra": "ignore"}


class Endpoint(PlaidModel):
    """
    A request payload bound to one API operation.

    Subclasses set ``path`` (``/{resource}/{action}``) and ``response_model``.
    The instance itself is the JSON body that gets POSTed.
    """

    path: ClassVar[str]
    response_model: ClassVar[Type[BaseModel]]


class ErrorType(str, Enum):
    """Broad categories of errors returned by the API."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_RESULT = "INVALID_RESULT"
    INVALID_INPUT = "INVALID_INPUT"
    INSTITUTION_ERROR = "INSTITUTION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    API_ERROR = "API_ERROR"
    ITEM_ERROR = "ITEM_ERROR"
    ASSET_REPORT_ERROR = "ASSET_REPORT_ERROR"
    RECAPTCHA_ERROR = "RECAPTCHA_ERROR"
    OAUTH_ERROR = "OAUTH_ERROR"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    BANK_TRANSFER_ERROR = "BANK_TRANSFER_ERROR"


class ErrorResponse(PlaidModel):
    """
    Error payload returned with every non-success status.

    None of the fields are guaranteed to be present.
    """

    display_message: Optional[str] = None
    documentation_url: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_type: Optional[ErrorType] = None
    request_id: Optional[str] = None
    status: Optional[int] = None
    suggested_action: Optional[str] = None
