"""
Transport layer for the Plaid client.

Provides the abstract Transport capability and a requests-based default.
"""

from .base import HttpRequest, HttpResponse, Transport
from .http import RequestsTransport

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "Transport",
    "RequestsTransport",
]
