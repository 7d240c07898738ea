"""
Request and response payloads for every supported API endpoint.

Each request type subclasses Endpoint and names its path and response model.
"""

from .common import Endpoint, ErrorResponse, ErrorType, PlaidModel
from .item import (
    Item, Status, StatusMessage, WebhookStatus,
    GetItemRequest, GetItemResponse,
    RemoveItemRequest, RemoveItemResponse,
    UpdateItemWebhookRequest, UpdateItemWebhookResponse,
)
from .account import (
    Account, AccountType, Balance, AccountsFilter, AccountBalanceFilter,
    GetAccountsRequest, GetAccountsResponse,
    AccountBalancesGetRequest, AccountBalancesGetResponse,
)
from .auth import (
    AccountNumbers, ACHAccountNumber, EFTAccountNumber,
    InternationalAccountNumber, BACSAccountNumber,
    GetAuthRequest, GetAuthResponse,
)
from .identity import GetIdentityRequest, GetIdentityResponse
from .institutions import (
    Institution, PaymentInitiationFilter, SearchInstitutionFilter,
    GetInstitutionFilter, GetInstitutionsFilter,
    InstitutionsSearchRequest, InstitutionSearchResponse,
    InstitutionGetRequest, InstitutionGetResponse,
    InstitutionsGetRequest, InstitutionsGetResponse,
)
from .sandbox import (
    CreatePublicTokenOptions, CreatePublicTokenOptionsTransactions,
    CreatePublicTokenRequest, CreatePublicTokenResponse,
    ResetLoginRequest, ResetLoginResponse,
    VerificationStatus, SetVerificationStatusRequest, SetVerificationStatusResponse,
    WebhookCode, FireWebhookRequest, FireWebhookResponse,
)
from .token import (
    LinkUser, AccountFilter, AccountFilters, EUConfig, PaymentInitiation,
    DepositSwitchOptions, IncomeVerification, LinkAuth,
    ExchangePublicTokenRequest, ExchangePublicTokenResponse,
    CreateLinkTokenRequest, CreateLinkTokenResponse,
    GetLinkTokenRequest, GetLinkTokenResponse,
    InvalidateAccessTokenRequest, InvalidateAccessTokenResponse,
)
from .transactions import (
    DEFAULT_PAGE_SIZE,
    Transaction, TransactionLocation, PaymentMetadata, Category,
    GetTransactionsOptions, GetTransactionsRequest, GetTransactionsResponse,
    RefreshTransactionsRequest, RefreshTransactionsResponse,
    GetCategoriesRequest, GetCategoriesResponse,
)
from .employers import Address, Employer, SearchEmployerRequest, SearchEmployerResponse
from .webhooks import GetWebhookVerificationKeyRequest, GetWebhookVerificationKeyResponse

__all__ = [
    "Endpoint", "ErrorResponse", "ErrorType", "PlaidModel",
    "Item", "Status", "StatusMessage", "WebhookStatus",
    "GetItemRequest", "GetItemResponse",
    "RemoveItemRequest", "RemoveItemResponse",
    "UpdateItemWebhookRequest", "UpdateItemWebhookResponse",
    "Account", "AccountType", "Balance", "AccountsFilter", "AccountBalanceFilter",
    "GetAccountsRequest", "GetAccountsResponse",
    "AccountBalancesGetRequest", "AccountBalancesGetResponse",
    "AccountNumbers", "ACHAccountNumber", "EFTAccountNumber",
    "InternationalAccountNumber", "BACSAccountNumber",
    "GetAuthRequest", "GetAuthResponse",
    "GetIdentityRequest", "GetIdentityResponse",
    "Institution", "PaymentInitiationFilter", "SearchInstitutionFilter",
    "GetInstitutionFilter", "GetInstitutionsFilter",
    "InstitutionsSearchRequest", "InstitutionSearchResponse",
    "InstitutionGetRequest", "InstitutionGetResponse",
    "InstitutionsGetRequest", "InstitutionsGetResponse",
    "CreatePublicTokenOptions", "CreatePublicTokenOptionsTransactions",
    "CreatePublicTokenRequest", "CreatePublicTokenResponse",
    "ResetLoginRequest", "ResetLoginResponse",
    "VerificationStatus", "SetVerificationStatusRequest", "SetVerificationStatusResponse",
    "WebhookCode", "FireWebhookRequest", "FireWebhookResponse",
    "LinkUser", "AccountFilter", "AccountFilters", "EUConfig", "PaymentInitiation",
    "DepositSwitchOptions", "IncomeVerification", "LinkAuth",
    "ExchangePublicTokenRequest", "ExchangePublicTokenResponse",
    "CreateLinkTokenRequest", "CreateLinkTokenResponse",
    "GetLinkTokenRequest", "GetLinkTokenResponse",
    "InvalidateAccessTokenRequest", "InvalidateAccessTokenResponse",
    "DEFAULT_PAGE_SIZE",
    "Transaction", "TransactionLocation", "PaymentMetadata", "Category",
    "GetTransactionsOptions", "GetTransactionsRequest", "GetTransactionsResponse",
    "RefreshTransactionsRequest", "RefreshTransactionsResponse",
    "GetCategoriesRequest", "GetCategoriesResponse",
    "Address", "Employer", "SearchEmployerRequest", "SearchEmployerResponse",
    "GetWebhookVerificationKeyRequest", "GetWebhookVerificationKeyResponse",
]
