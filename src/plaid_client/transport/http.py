"""
Default HTTP transport backed by requests.
"""

from __future__ import annotations
import logging
from typing import Optional

import requests

from ..runtime.errors import HttpError
from .base import HttpRequest, HttpResponse, Transport


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "plaid-client-python/0.3.0"


class RequestsTransport(Transport):
    """
    Transport that sends requests through a requests.Session.

    The session is closed by ``close()`` only when this transport created it.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default: 30)
            verify_ssl: Verify TLS certificates
            user_agent: User-Agent header sent with every request
            session: Optional requests.Session to reuse
        """
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._user_agent = user_agent
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def timeout(self) -> float:
        return self._timeout

    def send(self, request: HttpRequest) -> HttpResponse:
        headers = {"User-Agent": self._user_agent}
        headers.update(request.headers)

        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._session.request(
                request.method,
                request.url,
                data=request.body,
                headers=headers,
                timeout=self._timeout,
                verify=self._verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            logger.debug("%s %s failed: %s", request.method, request.url, e)
            raise HttpError(f"http request failed: {e}", cause=e) from e

        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return HttpResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["RequestsTransport", "DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT"]
