from .mocks import MockTransport, json_response, raw_response
from .factories import (
    mk_item,
    mk_account,
    mk_transaction,
    mk_transactions_payload,
    mk_error_payload,
)

__all__ = [
    "MockTransport",
    "json_response",
    "raw_response",
    "mk_item",
    "mk_account",
    "mk_transaction",
    "mk_transactions_payload",
    "mk_error_payload",
]
