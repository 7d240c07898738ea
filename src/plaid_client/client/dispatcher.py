"""
Request dispatcher.

Turns one endpoint into one round trip and one interpreted result: the typed
response model, or exactly one of AppError, HttpError or ParseError.
"""

from __future__ import annotations
from typing import Type, TypeVar

from pydantic import BaseModel

from ..models.common import Endpoint, ErrorResponse
from ..runtime.codec import JsonCodec, default_codec
from ..runtime.errors import AppError, HttpError
from ..transport.base import HttpRequest, HttpResponse, Transport
from .config import Credentials, Environment, HEADER_CLIENT_ID, HEADER_CLIENT_SECRET

M = TypeVar("M", bound=BaseModel)

METHOD = "POST"
CONTENT_TYPE = "application/json"


def build_request(
    credentials: Credentials,
    environment: Environment,
    endpoint: Endpoint,
    codec: JsonCodec = default_codec,
) -> HttpRequest:
    """
    Build the authenticated POST request for an endpoint.

    The URL is the environment base URL followed by the endpoint path; every
    parameter travels in the JSON body.

    Raises:
        ParseError: If the body cannot be serialized
    """
    body = codec.serialize(endpoint)
    return HttpRequest(
        method=METHOD,
        url=f"{environment.base_url}{endpoint.path}",
        headers={
            "Content-Type": CONTENT_TYPE,
            HEADER_CLIENT_ID: credentials.client_id,
            HEADER_CLIENT_SECRET: credentials.secret,
        },
        body=body,
    )


def interpret_response(
    response: HttpResponse,
    model: Type[M],
    codec: JsonCodec = default_codec,
) -> M:
    """
    Interpret a response as ``model`` or raise the error it describes.

    Raises:
        AppError: Non-2xx status with a well-formed error body
        ParseError: Body does not match ``model`` or ``ErrorResponse``
    """
    if response.is_success:
        return codec.deserialize(response.body, model)

    error = codec.deserialize(response.body, ErrorResponse)
    raise AppError(error)


class Dispatcher:
    """
    Sends endpoints through a transport with static credential headers.

    Holds only read-only references, so a single instance may serve
    concurrent callers.
    """

    def __init__(
        self,
        transport: Transport,
        credentials: Credentials,
        environment: Environment,
        codec: JsonCodec = default_codec,
    ):
        self._transport = transport
        self._credentials = credentials
        self._environment = environment
        self._codec = codec

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def transport(self) -> Transport:
        return self._transport

    def dispatch(self, endpoint: Endpoint) -> BaseModel:
        """
        Send ``endpoint`` and return an instance of ``endpoint.response_model``.

        Raises:
            ParseError: Serialization failed (nothing was sent) or a body was malformed
            HttpError: The transport could not complete the round trip
            AppError: The API reported a failure
        """
        request = build_request(self._credentials, self._environment, endpoint, self._codec)

        try:
            response = self._transport.send(request)
        except HttpError:
            raise
        except OSError as e:
            raise HttpError(f"http request failed: {e}", cause=e) from e

        return interpret_response(response, endpoint.response_model, self._codec)

    __call__ = dispatch


def dispatch(
    transport: Transport,
    credentials: Credentials,
    environment: Environment,
    endpoint: Endpoint,
) -> BaseModel:
    """Single-shot dispatch without keeping a Dispatcher around."""
    return Dispatcher(transport, credentials, environment).dispatch(endpoint)


__all__ = ["Dispatcher", "dispatch", "build_request", "interpret_response", "METHOD", "CONTENT_TYPE"]
