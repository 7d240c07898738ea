"""
Runtime support for the Plaid client: error model and JSON codec.
"""

from .errors import (
    RESET_LOGIN_FAILED,
    ClientError,
    HttpError,
    ParseError,
    ConfigError,
    AppError,
)
from .codec import JsonCodec, default_codec

__all__ = [
    "RESET_LOGIN_FAILED",
    "ClientError",
    "HttpError",
    "ParseError",
    "ConfigError",
    "AppError",
    "JsonCodec",
    "default_codec",
]
