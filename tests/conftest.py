"""
Test bootstrap:
- Make tests/helpers importable as ``helpers``
- Shared credentials, mock transport and client fixtures
"""
import sys
import pathlib

import pytest

TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import MockTransport  # noqa: E402

from plaid_client.client import Credentials, Environment, PlaidClient  # noqa: E402


@pytest.fixture
def credentials():
    """Deterministic credentials for header assertions."""
    return Credentials(client_id="fake-client-id", secret="client-secret")


@pytest.fixture
def transport():
    """Scripted transport with an empty queue."""
    return MockTransport()


@pytest.fixture
def client(transport, credentials):
    """Sandbox client wired to the scripted transport."""
    return PlaidClient(transport, credentials, Environment.SANDBOX)
