"""
Plaid API client.

One client holds a transport, a credential pair and a target environment.
Every operation is a single POST through the shared Dispatcher, except
``transactions_iter`` which returns a lazy pager.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel

from ..models import (
    Account, AccountBalanceFilter, AccountsFilter, Institution, Item,
    AccountBalancesGetRequest, AccountBalancesGetResponse,
    CreateLinkTokenRequest, CreateLinkTokenResponse,
    CreatePublicTokenRequest, CreatePublicTokenResponse,
    Endpoint,
    ExchangePublicTokenRequest, ExchangePublicTokenResponse,
    FireWebhookRequest, FireWebhookResponse,
    GetAccountsRequest, GetAccountsResponse,
    GetAuthRequest, GetAuthResponse,
    GetCategoriesRequest, GetCategoriesResponse,
    GetIdentityRequest, GetIdentityResponse,
    GetItemRequest, GetItemResponse,
    GetLinkTokenRequest, GetLinkTokenResponse,
    GetTransactionsRequest, GetTransactionsResponse,
    GetWebhookVerificationKeyRequest, GetWebhookVerificationKeyResponse,
    InstitutionGetRequest, InstitutionGetResponse,
    InstitutionsGetRequest, InstitutionsGetResponse,
    InstitutionsSearchRequest, InstitutionSearchResponse,
    InvalidateAccessTokenRequest, InvalidateAccessTokenResponse,
    RefreshTransactionsRequest,
    RemoveItemRequest,
    ResetLoginRequest, ResetLoginResponse,
    SearchEmployerRequest, SearchEmployerResponse,
    SetVerificationStatusRequest, SetVerificationStatusResponse,
    UpdateItemWebhookRequest, UpdateItemWebhookResponse,
)
from ..runtime.codec import JsonCodec, default_codec
from ..runtime.errors import AppError, RESET_LOGIN_FAILED
from ..transport.base import Transport
from ..transport.http import RequestsTransport
from .config import ClientConfig, Credentials, Environment
from .dispatcher import Dispatcher
from .pagination import TransactionsPager


class PlaidClient:
    """
    Typed client for the Plaid API.

    Build one with ``PlaidClient.builder()`` or construct it directly with a
    transport. The client keeps no per-request state.

    Example:
        ```python
        client = (
            PlaidClient.builder()
            .with_credentials(Credentials.from_env())
            .with_env(Environment.SANDBOX)
            .build()
        )
        institutions = client.get_institutions(
            InstitutionsGetRequest(count=10, offset=0, country_codes=["US"])
        )
        ```
    """

    def __init__(
        self,
        transport: Transport,
        credentials: Credentials,
        environment: Environment = Environment.SANDBOX,
        config: Optional[ClientConfig] = None,
        codec: JsonCodec = default_codec,
        owns_transport: bool = False,
    ):
        """
        Initialize the client.

        Args:
            transport: Transport used for every request
            credentials: Client id and secret sent as headers
            environment: Target environment (default: sandbox)
            config: Client configuration
            codec: JSON codec for bodies
            owns_transport: Close the transport when the client is closed
        """
        self._config = config or ClientConfig()
        self._config.apply_logging()
        self._credentials = credentials
        self._dispatcher = Dispatcher(transport, credentials, environment, codec)
        self._owns_transport = owns_transport

    @staticmethod
    def builder() -> Builder:
        return Builder()

    @property
    def environment(self) -> Environment:
        return self._dispatcher.environment

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Close the transport if it was created for this client."""
        if self._owns_transport:
            self._dispatcher.transport.close()

    def __enter__(self) -> PlaidClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def request(self, endpoint: Endpoint) -> BaseModel:
        """
        Send any endpoint and return its typed response.

        Exposed for endpoints without a dedicated method.
        """
        return self._dispatcher.dispatch(endpoint)

    # =========================================================================
    # Institutions
    # =========================================================================

    def search_institutions(self, req: InstitutionsSearchRequest) -> List[Institution]:
        """
        Institutions matching a query, at most ten per call.

        https://plaid.com/docs/api/institutions/#institutionssearch
        """
        res: InstitutionSearchResponse = self.request(req)
        return res.institutions

    def get_institution_by_id(self, req: InstitutionGetRequest) -> Institution:
        """
        https://plaid.com/docs/api/institutions/#institutionsget_by_id
        """
        res: InstitutionGetResponse = self.request(req)
        return res.institution

    def get_institutions(self, req: InstitutionsGetRequest) -> List[Institution]:
        """
        One page of supported institutions.

        Institutions with no overlap with the client's enabled products are
        filtered out.

        https://plaid.com/docs/api/institutions/#institutionsget
        """
        res: InstitutionsGetResponse = self.request(req)
        return res.institutions

    # =========================================================================
    # Sandbox
    # =========================================================================

    def create_public_token(self, req: CreatePublicTokenRequest) -> str:
        """
        Create a sandbox public token mapping to a new test Item.

        https://plaid.com/docs/api/sandbox/#sandboxpublic_tokencreate
        """
        res: CreatePublicTokenResponse = self.request(req)
        return res.public_token

    def reset_login(self, access_token: str) -> None:
        """
        Force an Item into ``ITEM_LOGIN_REQUIRED``.

        The API reports the outcome in the ``reset_login`` flag of a
        successful response; a false flag is raised as AppError.

        https://plaid.com/docs/api/sandbox/#sandboxitemreset_login
        """
        res: ResetLoginResponse = self.request(ResetLoginRequest(access_token=access_token))
        if not res.reset_login:
            raise AppError.synthesize(RESET_LOGIN_FAILED)

    def fire_webhook(self, req: FireWebhookRequest) -> FireWebhookResponse:
        """
        Trigger a transactions ``DEFAULT_UPDATE`` webhook for a sandbox Item.

        https://plaid.com/docs/api/sandbox/#sandboxitemfire_webhook
        """
        return self.request(req)

    def set_verification_status(self, req: SetVerificationStatusRequest) -> SetVerificationStatusResponse:
        """
        https://plaid.com/docs/api/sandbox/#sandboxitemset_verification_status
        """
        return self.request(req)

    # =========================================================================
    # Tokens
    # =========================================================================

    def exchange_public_token(self, public_token: str) -> ExchangePublicTokenResponse:
        """
        Exchange a Link public token for an access token.

        Public tokens expire after 30 minutes.

        https://plaid.com/docs/api/tokens/#itempublic_tokenexchange
        """
        return self.request(ExchangePublicTokenRequest(public_token=public_token))

    def create_link_token(self, req: CreateLinkTokenRequest) -> CreateLinkTokenResponse:
        """
        https://plaid.com/docs/api/tokens/#linktokencreate
        """
        return self.request(req)

    def link_token(self, link_token: str) -> GetLinkTokenResponse:
        """
        Details of a link token; mostly useful for debugging.

        https://plaid.com/docs/api/tokens/#linktokenget
        """
        return self.request(GetLinkTokenRequest(link_token=link_token))

    def invalidate_access_token(self, access_token: str) -> InvalidateAccessTokenResponse:
        """
        Rotate an access token. The previous token stops working immediately.

        https://plaid.com/docs/api/tokens/#itemaccess_tokeninvalidate
        """
        return self.request(InvalidateAccessTokenRequest(access_token=access_token))

    # =========================================================================
    # Items and accounts
    # =========================================================================

    def accounts(self, access_token: str, account_ids: Optional[List[str]] = None) -> List[Account]:
        """
        Active accounts for an Item. Results may be cached by the API; use
        ``balances`` for real-time data.

        https://plaid.com/docs/api/accounts/#accountsget
        """
        options = AccountsFilter(account_ids=account_ids) if account_ids else None
        res: GetAccountsResponse = self.request(
            GetAccountsRequest(access_token=access_token, options=options)
        )
        return res.accounts

    def balances(self, access_token: str, account_ids: Optional[List[str]] = None) -> List[Account]:
        """
        https://plaid.com/docs/api/products/#balance
        """
        options = AccountBalanceFilter(account_ids=account_ids) if account_ids else None
        res: AccountBalancesGetResponse = self.request(
            AccountBalancesGetRequest(access_token=access_token, options=options)
        )
        return res.accounts

    def item(self, access_token: str) -> Item:
        """
        https://plaid.com/docs/api/items/#itemget
        """
        res: GetItemResponse = self.request(GetItemRequest(access_token=access_token))
        return res.item

    def remove_item(self, access_token: str) -> None:
        """
        Remove an Item; its access token becomes invalid.

        https://plaid.com/docs/api/items/#itemremove
        """
        self.request(RemoveItemRequest(access_token=access_token))

    def item_webhook_update(self, access_token: str, webhook: str) -> Item:
        """
        Point an Item at a new webhook URL. The new URL receives a
        ``WEBHOOK_UPDATE_ACKNOWLEDGED`` event.

        https://plaid.com/docs/api/items/#itemwebhookupdate
        """
        res: UpdateItemWebhookResponse = self.request(
            UpdateItemWebhookRequest(access_token=access_token, webhook=webhook)
        )
        return res.item

    # =========================================================================
    # Products
    # =========================================================================

    def auth(self, req: GetAuthRequest) -> GetAuthResponse:
        """
        https://plaid.com/docs/api/products/#auth
        """
        return self.request(req)

    def identity(self, req: GetIdentityRequest) -> GetIdentityResponse:
        """
        https://plaid.com/docs/api/products/#identity
        """
        return self.request(req)

    def search_employers(self, req: SearchEmployerRequest) -> SearchEmployerResponse:
        """
        https://plaid.com/docs/api/employers/
        """
        return self.request(req)

    def webhook_verification_key(self, key_id: str) -> GetWebhookVerificationKeyResponse:
        """
        JSON Web Key for verifying webhook JWTs.

        https://plaid.com/docs/api/webhooks/webhook-verification/#webhook_verification_keyget
        """
        return self.request(GetWebhookVerificationKeyRequest(key_id=key_id))

    # =========================================================================
    # Transactions
    # =========================================================================

    def categories(self) -> GetCategoriesResponse:
        """
        https://plaid.com/docs/api/products/#categoriesget
        """
        return self.request(GetCategoriesRequest())

    def refresh_transactions(self, access_token: str) -> None:
        """
        Start an on-demand extraction of the newest transactions.

        https://plaid.com/docs/api/products/#transactionsrefresh
        """
        self.request(RefreshTransactionsRequest(access_token=access_token))

    def transactions(self, req: GetTransactionsRequest) -> GetTransactionsResponse:
        """
        One page of transactions (100 per page unless ``options.count`` is set).

        https://plaid.com/docs/api/products/#transactionsget
        """
        return self.request(req)

    def transactions_iter(self, req: GetTransactionsRequest) -> TransactionsPager:
        """
        Lazily page through every transaction matching ``req``.

        Each call returns a fresh pager starting at ``req``'s offset.
        """
        return TransactionsPager(self.transactions, req)


class Builder:
    """Constructs PlaidClient instances with sensible defaults."""

    def __init__(self):
        self._transport: Optional[Transport] = None
        self._credentials: Optional[Credentials] = None
        self._environment: Optional[Environment] = None
        self._config: Optional[ClientConfig] = None

    def with_transport(self, transport: Transport) -> Builder:
        """Override the default requests transport."""
        self._transport = transport
        return self

    with_http_client = with_transport

    def with_credentials(self, credentials: Credentials) -> Builder:
        self._credentials = credentials
        return self

    def with_env(self, environment: Environment) -> Builder:
        self._environment = environment
        return self

    def with_config(self, config: ClientConfig) -> Builder:
        self._config = config
        return self

    def build(self) -> PlaidClient:
        """Create the client. Unset values fall back to sandbox, empty credentials and a requests transport."""
        config = self._config or ClientConfig()
        transport = self._transport
        owns_transport = transport is None
        if transport is None:
            transport = RequestsTransport(
                timeout=config.timeout,
                verify_ssl=config.verify_ssl,
                user_agent=config.user_agent,
            )
        return PlaidClient(
            transport=transport,
            credentials=self._credentials or Credentials(),
            environment=self._environment or Environment.SANDBOX,
            config=config,
            owns_transport=owns_transport,
        )


__all__ = ["PlaidClient", "Builder"]
