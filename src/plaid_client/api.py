"""
Sans-IO interface.

For callers that bring their own HTTP stack: build the request here, send it
however you like, then hand the response back for interpretation. The rules
are the same as the dispatcher's.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Type, TypeVar, Union

from pydantic import BaseModel

from .client.config import Credentials, Environment
from .client.dispatcher import build_request as _build_request
from .client.dispatcher import interpret_response
from .models.common import Endpoint
from .models.token import CreateLinkTokenRequest, CreateLinkTokenResponse
from .transport.base import HttpRequest, HttpResponse

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Conf:
    """Credentials and environment needed to build requests."""
    credentials: Credentials
    environment: Environment = field(default_factory=lambda: Environment.SANDBOX)


def build_request(conf: Conf, endpoint: Endpoint) -> HttpRequest:
    """
    Build the POST request for ``endpoint``.

    Raises:
        ParseError: If the body cannot be serialized
    """
    return _build_request(conf.credentials, conf.environment, endpoint)


def parse_response(target: Union[Endpoint, Type[Endpoint], Type[M]], response: HttpResponse) -> M:
    """
    Interpret ``response`` for an endpoint (instance or class) or a response model.

    Raises:
        AppError: Non-2xx status with a well-formed error body
        ParseError: Malformed body
    """
    model = getattr(target, "response_model", target)
    return interpret_response(response, model)


def create_link_token(conf: Conf, req: CreateLinkTokenRequest) -> HttpRequest:
    return build_request(conf, req)


def create_link_token_response(response: HttpResponse) -> CreateLinkTokenResponse:
    return parse_response(CreateLinkTokenResponse, response)


__all__ = [
    "Conf",
    "build_request",
    "parse_response",
    "create_link_token",
    "create_link_token_response",
]
