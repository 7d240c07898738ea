"""
Transport capability consumed by the dispatcher.

A transport sends one fully built request and returns the raw response. It
owns timeout policy; failures are raised as HttpError.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class HttpRequest:
    """A request ready to go on the wire."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of a response."""
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


class Transport(ABC):
    """Sends HttpRequest objects and returns HttpResponse objects."""

    @abstractmethod
    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request.

        Args:
            request: Fully built request

        Returns:
            The response, whatever its status

        Raises:
            HttpError: If no response could be obtained
        """

    def close(self) -> None:
        """Release any resources held by the transport."""


__all__ = ["HttpRequest", "HttpResponse", "Transport"]
