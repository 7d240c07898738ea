"""
Plaid Python client.

Typed bindings for the Plaid REST API: authenticated request dispatch,
pydantic models for every supported endpoint, and lazy paging over
transaction history.

These bindings are not official Plaid bindings.
"""

from .models import *
from .runtime.errors import (
    ClientError,
    HttpError,
    ParseError,
    ConfigError,
    AppError,
)
from .runtime.codec import JsonCodec
from .transport import HttpRequest, HttpResponse, Transport, RequestsTransport
from .client import (
    Builder,
    ClientConfig,
    Credentials,
    Dispatcher,
    Environment,
    PagerState,
    PlaidClient,
    TransactionPage,
    TransactionsPager,
)
from . import api

__version__ = "0.3.0"
__all__ = [
    # Client
    "PlaidClient",
    "Builder",
    "ClientConfig",
    "Credentials",
    "Environment",
    "Dispatcher",

    # Paging
    "TransactionsPager",
    "TransactionPage",
    "PagerState",

    # Transport
    "Transport",
    "HttpRequest",
    "HttpResponse",
    "RequestsTransport",

    # Errors
    "ClientError",
    "HttpError",
    "ParseError",
    "ConfigError",
    "AppError",

    "JsonCodec",
    "api",

    # All models are included via *
]
