"""
Client configuration: credentials, target environment and transport settings.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional

from ..runtime.errors import ConfigError
from ..transport.http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


HEADER_CLIENT_ID = "PLAID-CLIENT-ID"
HEADER_CLIENT_SECRET = "PLAID-SECRET"

SANDBOX_DOMAIN = "https://sandbox.plaid.com"
DEVELOPMENT_DOMAIN = "https://development.plaid.com"
PRODUCTION_DOMAIN = "https://production.plaid.com"

ENV_CLIENT_ID = "PLAID_CLIENT_ID"
ENV_SECRET = "PLAID_SECRET"
ENV_ENVIRONMENT = "PLAID_ENV"


@dataclass(frozen=True)
class Credentials:
    """API client id and the secret for the configured environment."""
    client_id: str = ""
    secret: str = field(default="", repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> Credentials:
        """
        Read credentials from PLAID_CLIENT_ID and PLAID_SECRET.

        Raises:
            ConfigError: If either variable is missing or empty
        """
        environ = os.environ if environ is None else environ
        client_id = environ.get(ENV_CLIENT_ID)
        secret = environ.get(ENV_SECRET)
        if not client_id:
            raise ConfigError(f"variable {ENV_CLIENT_ID} must be defined")
        if not secret:
            raise ConfigError(f"variable {ENV_SECRET} must be defined")
        return cls(client_id=client_id, secret=secret)


@dataclass(frozen=True)
class Environment:
    """
    Target API environment.

    Sandbox, development and production map to fixed hosts; ``custom`` takes
    any base URL including the scheme, e.g. ``http://localhost:3000``.
    """
    name: str
    base_url: str

    SANDBOX: ClassVar[Environment]
    DEVELOPMENT: ClassVar[Environment]
    PRODUCTION: ClassVar[Environment]

    def __str__(self) -> str:
        return self.base_url

    @classmethod
    def custom(cls, base_url: str) -> Environment:
        return cls("custom", base_url)

    @classmethod
    def from_name(cls, value: str) -> Environment:
        """
        Resolve an environment name or a base URL.

        Raises:
            ConfigError: If the value is neither a known name nor a URL
        """
        known = {
            "sandbox": cls.SANDBOX,
            "development": cls.DEVELOPMENT,
            "production": cls.PRODUCTION,
        }
        key = value.strip().lower()
        if key in known:
            return known[key]
        if key.startswith(("http://", "https://")):
            return cls.custom(value.strip())
        raise ConfigError(f"unknown environment: {value!r}")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> Environment:
        """Read the environment from PLAID_ENV, defaulting to sandbox."""
        environ = os.environ if environ is None else environ
        value = environ.get(ENV_ENVIRONMENT)
        if not value:
            return cls.SANDBOX
        return cls.from_name(value)


Environment.SANDBOX = Environment("sandbox", SANDBOX_DOMAIN)
Environment.DEVELOPMENT = Environment("development", DEVELOPMENT_DOMAIN)
Environment.PRODUCTION = Environment("production", PRODUCTION_DOMAIN)


@dataclass
class ClientConfig:
    """Transport and diagnostics settings for the Plaid client."""

    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    def apply_logging(self) -> None:
        """Raise the package logger to DEBUG when ``debug`` is set."""
        if self.debug:
            logging.getLogger("plaid_client").setLevel(logging.DEBUG)


__all__ = [
    "HEADER_CLIENT_ID",
    "HEADER_CLIENT_SECRET",
    "SANDBOX_DOMAIN",
    "DEVELOPMENT_DOMAIN",
    "PRODUCTION_DOMAIN",
    "Credentials",
    "Environment",
    "ClientConfig",
]
