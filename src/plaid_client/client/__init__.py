"""
Plaid client: configuration, request dispatch and transaction paging.
"""

from .config import (
    HEADER_CLIENT_ID,
    HEADER_CLIENT_SECRET,
    ClientConfig,
    Credentials,
    Environment,
)
from .dispatcher import Dispatcher, build_request, dispatch, interpret_response
from .pagination import PagerState, TransactionPage, TransactionsPager
from .plaid import Builder, PlaidClient

__all__ = [
    "HEADER_CLIENT_ID",
    "HEADER_CLIENT_SECRET",
    "ClientConfig",
    "Credentials",
    "Environment",
    "Dispatcher",
    "build_request",
    "dispatch",
    "interpret_response",
    "PagerState",
    "TransactionPage",
    "TransactionsPager",
    "Builder",
    "PlaidClient",
]
