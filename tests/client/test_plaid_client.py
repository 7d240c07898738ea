"""
Unit tests for PlaidClient operations and the Builder.
"""

import pytest

from helpers import MockTransport, mk_account, mk_error_payload, mk_item

from plaid_client.client import Builder, ClientConfig, Credentials, Environment, PlaidClient
from plaid_client.models import (
    AccountType,
    CreatePublicTokenRequest,
    ErrorType,
    FireWebhookRequest,
    GetTransactionsRequest,
    InstitutionsGetRequest,
    SetVerificationStatusRequest,
    VerificationStatus,
)
from plaid_client.runtime.errors import AppError, RESET_LOGIN_FAILED
from plaid_client.transport.http import RequestsTransport


INSTITUTION = {
    "institution_id": "ins_129571",
    "name": "First Platypus Bank",
    "products": ["assets", "auth", "balance", "transactions"],
    "country_codes": ["US"],
    "url": None,
    "primary_color": None,
    "logo": None,
    "routing_numbers": [],
    "oauth": False,
}


class TestResetLogin:
    """reset_login checks the flag inside the success body."""

    def test_false_flag_is_app_error(self, client, transport):
        transport.queue_json(200, {"reset_login": False})

        with pytest.raises(AppError) as exc_info:
            client.reset_login("access-sandbox-1")

        response = exc_info.value.response
        assert response.error_message == RESET_LOGIN_FAILED == "failed to reset login"
        assert response.error_code is None
        assert response.error_type is None

    def test_true_flag_succeeds(self, client, transport):
        transport.queue_json(200, {"reset_login": True, "request_id": "req-r"})
        assert client.reset_login("access-sandbox-1") is None
        assert transport.requests[0].url == "https://sandbox.plaid.com/sandbox/item/reset_login"
        assert transport.body() == {"access_token": "access-sandbox-1"}

    def test_server_error_passes_through(self, client, transport):
        transport.queue_json(400, mk_error_payload(error_type="ITEM_ERROR", error_code="ITEM_NOT_FOUND"))
        with pytest.raises(AppError) as exc_info:
            client.reset_login("access-sandbox-1")
        assert exc_info.value.error_type is ErrorType.ITEM_ERROR
        assert exc_info.value.error_code == "ITEM_NOT_FOUND"


class TestOperations:
    """Each operation posts to its path and unwraps the response."""

    def test_get_institutions(self, client, transport):
        transport.queue_json(200, {"institutions": [INSTITUTION], "total": 1, "request_id": "r"})

        institutions = client.get_institutions(
            InstitutionsGetRequest(count=10, offset=0, country_codes=["US"])
        )

        assert [i.institution_id for i in institutions] == ["ins_129571"]
        assert transport.requests[0].url.endswith("/institutions/get")
        assert transport.body() == {"count": 10, "offset": 0, "country_codes": ["US"]}

    def test_create_and_exchange_public_token(self, client, transport):
        transport.queue_json(200, {"public_token": "public-sandbox-1", "request_id": "r1"})
        transport.queue_json(200, {"access_token": "access-sandbox-1", "item_id": "item-1", "request_id": "r2"})

        public_token = client.create_public_token(CreatePublicTokenRequest(
            institution_id="ins_129571",
            initial_products=["assets", "auth", "balance"],
        ))
        exchanged = client.exchange_public_token(public_token)

        assert public_token == "public-sandbox-1"
        assert exchanged.access_token == "access-sandbox-1"
        assert transport.body(0) == {
            "institution_id": "ins_129571",
            "initial_products": ["assets", "auth", "balance"],
        }
        assert transport.body(1) == {"public_token": "public-sandbox-1"}

    def test_accounts_without_filter(self, client, transport):
        transport.queue_json(200, {"accounts": [mk_account()], "item": mk_item(), "request_id": "r"})

        accounts = client.accounts("access-sandbox-1")

        assert accounts[0].type is AccountType.DEPOSITORY
        assert accounts[0].balances.available == 100.0
        assert transport.body() == {"access_token": "access-sandbox-1"}

    def test_balances_with_filter(self, client, transport):
        transport.queue_json(200, {"accounts": [mk_account()], "item": mk_item(), "request_id": "r"})

        client.balances("access-sandbox-1", account_ids=["acc-1"])

        assert transport.requests[0].url.endswith("/accounts/balance/get")
        assert transport.body()["options"] == {"account_ids": ["acc-1"]}

    def test_item_and_removal(self, client, transport):
        transport.queue_json(200, {"item": mk_item("item-9"), "request_id": "r"})
        transport.queue_json(200, {"request_id": "r"})

        assert client.item("access-sandbox-1").item_id == "item-9"
        assert client.remove_item("access-sandbox-1") is None
        assert transport.requests[1].url.endswith("/item/remove")

    def test_item_webhook_update(self, client, transport):
        transport.queue_json(200, {"item": mk_item(), "request_id": "r"})
        client.item_webhook_update("access-sandbox-1", "https://example.com/hook")
        assert transport.body() == {
            "access_token": "access-sandbox-1",
            "webhook": "https://example.com/hook",
        }

    def test_fire_webhook(self, client, transport):
        transport.queue_json(200, {"webhook_fired": True, "request_id": "r"})
        res = client.fire_webhook(FireWebhookRequest(access_token="access-sandbox-1"))
        assert res.webhook_fired is True
        assert transport.body()["webhook_code"] == "DEFAULT_UPDATE"

    def test_set_verification_status(self, client, transport):
        transport.queue_json(200, {"request_id": "r"})
        client.set_verification_status(SetVerificationStatusRequest(
            access_token="access-sandbox-1",
            account_id="acc-1",
            verification_status=VerificationStatus.AUTOMATICALLY_VERIFIED,
        ))
        assert transport.body()["verification_status"] == "automatically_verified"

    def test_token_endpoints(self, client, transport):
        transport.queue_json(200, {"link_token": "link-1", "request_id": "r"})
        transport.queue_json(200, {"new_access_token": "access-2", "request_id": "r"})

        assert client.link_token("link-1").link_token == "link-1"
        assert client.invalidate_access_token("access-1").new_access_token == "access-2"
        assert transport.requests[0].url.endswith("/link/token/get")
        assert transport.requests[1].url.endswith("/item/access_token/invalidate")

    def test_categories_and_refresh(self, client, transport):
        transport.queue_json(200, {
            "categories": [{"category_id": "10000000", "group": "special", "hierarchy": ["Bank Fees"]}],
            "request_id": "r",
        })
        transport.queue_json(200, {"request_id": "r"})

        assert client.categories().categories[0].hierarchy == ["Bank Fees"]
        assert client.refresh_transactions("access-sandbox-1") is None

    def test_webhook_verification_key(self, client, transport):
        transport.queue_json(200, {
            "key": {"alg": "ES256", "kid": "key-1", "expired_at": None},
            "request_id": "r",
        })
        res = client.webhook_verification_key("key-1")
        assert res.key["kid"] == "key-1"
        assert transport.body() == {"key_id": "key-1"}

    def test_transactions_iter_returns_fresh_pagers(self, client):
        req = GetTransactionsRequest(access_token="a", start_date="2021-01-01", end_date="2021-02-01")
        assert client.transactions_iter(req) is not client.transactions_iter(req)


class TestBuilder:
    """Tests for Builder defaults and overrides."""

    def test_defaults(self):
        client = Builder().build()
        assert client.environment is Environment.SANDBOX
        assert isinstance(client._dispatcher.transport, RequestsTransport)
        client.close()

    def test_builder_entry_point(self):
        assert isinstance(PlaidClient.builder(), Builder)

    def test_overrides(self):
        transport = MockTransport()
        transport.queue_json(200, {"request_id": "r"})
        client = (
            PlaidClient.builder()
            .with_http_client(transport)
            .with_credentials(Credentials(client_id="id", secret="secret"))
            .with_env(Environment.custom("http://localhost:3000"))
            .with_config(ClientConfig(timeout=5.0))
            .build()
        )

        client.refresh_transactions("access-1")

        assert transport.requests[0].url == "http://localhost:3000/transactions/refresh"
        assert transport.requests[0].headers["PLAID-CLIENT-ID"] == "id"
        assert client.config.timeout == 5.0

    def test_default_transport_uses_config(self):
        client = Builder().with_config(ClientConfig(timeout=7.5)).build()
        assert client._dispatcher.transport.timeout == 7.5
        client.close()

    def test_injected_transport_not_closed(self):
        transport = MockTransport()
        with Builder().with_transport(transport).build():
            pass
        assert transport.closed is False

    def test_owned_transport_closed(self):
        transport = MockTransport()
        with PlaidClient(transport, Credentials(), owns_transport=True):
            pass
        assert transport.closed is True
