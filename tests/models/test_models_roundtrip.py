"""
Tests for request and response models.

Covers the endpoint table, defaults on request bodies, and decoding of
representative API payloads.
"""

import json

import pytest

from helpers import mk_account, mk_item, mk_transaction, mk_transactions_payload

import plaid_client.models as models
from plaid_client.models import (
    AccountType,
    CreateLinkTokenRequest,
    Endpoint,
    ErrorResponse,
    FireWebhookRequest,
    GetAuthResponse,
    GetItemResponse,
    GetTransactionsResponse,
    LinkUser,
    SearchEmployerRequest,
    SearchEmployerResponse,
    WebhookCode,
)


ENDPOINTS = [
    ("AccountBalancesGetRequest", "/accounts/balance/get", "AccountBalancesGetResponse"),
    ("CreateLinkTokenRequest", "/link/token/create", "CreateLinkTokenResponse"),
    ("CreatePublicTokenRequest", "/sandbox/public_token/create", "CreatePublicTokenResponse"),
    ("ExchangePublicTokenRequest", "/item/public_token/exchange", "ExchangePublicTokenResponse"),
    ("FireWebhookRequest", "/sandbox/item/fire_webhook", "FireWebhookResponse"),
    ("GetAccountsRequest", "/accounts/get", "GetAccountsResponse"),
    ("GetAuthRequest", "/auth/get", "GetAuthResponse"),
    ("GetCategoriesRequest", "/categories/get", "GetCategoriesResponse"),
    ("GetIdentityRequest", "/identity/get", "GetIdentityResponse"),
    ("GetItemRequest", "/item/get", "GetItemResponse"),
    ("GetLinkTokenRequest", "/link/token/get", "GetLinkTokenResponse"),
    ("GetTransactionsRequest", "/transactions/get", "GetTransactionsResponse"),
    ("GetWebhookVerificationKeyRequest", "/webhook_verification_key/get", "GetWebhookVerificationKeyResponse"),
    ("InstitutionGetRequest", "/institutions/get_by_id", "InstitutionGetResponse"),
    ("InstitutionsGetRequest", "/institutions/get", "InstitutionsGetResponse"),
    ("InstitutionsSearchRequest", "/institutions/search", "InstitutionSearchResponse"),
    ("InvalidateAccessTokenRequest", "/item/access_token/invalidate", "InvalidateAccessTokenResponse"),
    ("RefreshTransactionsRequest", "/transactions/refresh", "RefreshTransactionsResponse"),
    ("RemoveItemRequest", "/item/remove", "RemoveItemResponse"),
    ("ResetLoginRequest", "/sandbox/item/reset_login", "ResetLoginResponse"),
    ("SearchEmployerRequest", "/employers/search", "SearchEmployerResponse"),
    ("SetVerificationStatusRequest", "/sandbox/item/set_verification_status", "SetVerificationStatusResponse"),
    ("UpdateItemWebhookRequest", "/item/webhook/update", "UpdateItemWebhookResponse"),
]


class TestEndpointTable:
    """Every request type is bound to one path and one response model"""

    @pytest.mark.parametrize("request_name, path, response_name", ENDPOINTS)
    def test_binding(self, request_name, path, response_name):
        request_cls = getattr(models, request_name)
        assert issubclass(request_cls, Endpoint)
        assert request_cls.path == path
        assert request_cls.response_model is getattr(models, response_name)

    def test_paths_are_unique(self):
        paths = [path for _, path, _ in ENDPOINTS]
        assert len(paths) == len(set(paths))

    def test_path_is_not_a_field(self):
        assert "path" not in models.GetItemRequest.model_fields
        assert "response_model" not in models.GetItemRequest.model_fields


class TestRequestDefaults:

    def test_link_token_language_defaults_to_english(self):
        req = CreateLinkTokenRequest(
            client_name="app",
            country_codes=["US"],
            user=LinkUser(client_user_id="u-1"),
            products=["auth"],
        )
        assert json.loads(req.model_dump_json(exclude_none=True)) == {
            "client_name": "app",
            "language": "en",
            "country_codes": ["US"],
            "user": {"client_user_id": "u-1"},
            "products": ["auth"],
        }

    def test_fire_webhook_default_code(self):
        assert FireWebhookRequest(access_token="tok").webhook_code is WebhookCode.DEFAULT_UPDATE

    def test_employer_search_products(self):
        assert SearchEmployerRequest(query="Plaid").products == ["deposit_switch"]


class TestResponseDecoding:

    def test_transactions_page(self):
        payload = mk_transactions_payload([mk_transaction(0), mk_transaction(1)], total=2)
        res = GetTransactionsResponse.model_validate_json(json.dumps(payload))

        assert res.total_transactions == 2
        assert [t.transaction_id for t in res.transactions] == ["txn-0", "txn-1"]
        assert res.transactions[0].amount == 10.5
        assert res.transactions[0].location is None
        assert res.accounts[0].type is AccountType.DEPOSITORY

    def test_transaction_type_may_be_absent(self):
        txn = mk_transaction(3)
        del txn["transaction_type"]
        payload = mk_transactions_payload([txn], total=1)
        res = GetTransactionsResponse.model_validate_json(json.dumps(payload))
        assert res.transactions[0].transaction_type is None

    def test_item_with_status_and_error(self):
        item = mk_item()
        item["error"] = {"error_type": "ITEM_ERROR", "error_code": "ITEM_LOGIN_REQUIRED"}
        payload = {
            "item": item,
            "status": {
                "transactions": {"last_successful_update": "2021-09-01T10:00:00Z"},
                "last_webhook": {"sent_at": "2021-09-01T10:00:01Z", "code_sent": "DEFAULT_UPDATE"},
            },
            "request_id": "r",
        }
        res = GetItemResponse.model_validate(payload)

        assert isinstance(res.item.error, ErrorResponse)
        assert res.item.error.error_code == "ITEM_LOGIN_REQUIRED"
        assert res.status.last_webhook.code_sent == "DEFAULT_UPDATE"
        assert res.status.investments is None

    def test_auth_numbers(self):
        res = GetAuthResponse.model_validate({
            "accounts": [mk_account()],
            "numbers": {
                "ach": [{"account_id": "acc-1", "account": "1111222233330000",
                         "routing": "011401533", "wire_routing": "021000021"}],
                "bacs": [{"account_id": "acc-1", "account": "31926819", "sort_code": "601613"}],
            },
            "item": mk_item(),
            "request_id": "r",
        })
        assert res.numbers.ach[0].routing == "011401533"
        assert res.numbers.bacs[0].sort_code == "601613"
        assert res.numbers.eft == []
        assert res.numbers.international == []

    def test_employers(self):
        res = SearchEmployerResponse.model_validate({
            "employers": [{
                "employer_id": "emp_1",
                "name": "Plaid Inc.",
                "address": {"city": "San Francisco", "street": "1098 Harrison St", "region": "CA"},
                "confidence_score": 1,
            }],
            "request_id": "r",
        })
        assert res.employers[0].address.city == "San Francisco"
        assert res.employers[0].confidence_score == 1.0

    def test_account_type_unknown_is_rejected(self):
        with pytest.raises(ValueError):
            models.Account.model_validate(mk_account(account_type="spaceship"))
