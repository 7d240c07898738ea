"""
Institution lookup endpoints.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel


class Institution(PlaidModel):
    institution_id: str
    name: str
    products: List[str] = []
    country_codes: List[str] = []
    url: Optional[str] = None
    primary_color: Optional[str] = None
    logo: Optional[str] = None
    routing_numbers: Optional[List[str]] = None
    oauth: bool = False


class PaymentInitiationFilter(PlaidModel):
    payment_id: Optional[str] = None


class SearchInstitutionFilter(PlaidModel):
    oauth: Optional[bool] = None
    include_optional_metadata: Optional[bool] = None
    include_auth_metadata: Optional[bool] = None
    include_payment_initiation_metadata: Optional[bool] = None
    payment_initiation: Optional[PaymentInitiationFilter] = None


class InstitutionSearchResponse(PlaidModel):
    institutions: List[Institution]
    request_id: Optional[str] = None


class InstitutionsSearchRequest(Endpoint):
    path: ClassVar[str] = "/institutions/search"
    response_model: ClassVar[Type[BaseModel]] = InstitutionSearchResponse

    query: str
    products: Optional[List[str]] = None
    country_codes: List[str] = []
    options: Optional[SearchInstitutionFilter] = None


class GetInstitutionFilter(PlaidModel):
    include_optional_metadata: Optional[bool] = None
    include_status: Optional[bool] = None
    include_auth_metadata: Optional[bool] = None
    include_payment_initiation_metadata: Optional[bool] = None


class InstitutionGetResponse(PlaidModel):
    institution: Institution
    request_id: Optional[str] = None


class InstitutionGetRequest(Endpoint):
    path: ClassVar[str] = "/institutions/get_by_id"
    response_model: ClassVar[Type[BaseModel]] = InstitutionGetResponse

    institution_id: str
    country_codes: List[str] = []
    options: Optional[GetInstitutionFilter] = None


class GetInstitutionsFilter(PlaidModel):
    """
    Filters for /institutions/get.

    routing_numbers only matches institutions that carry every listed number.
    """

    products: List[str] = []
    routing_numbers: List[str] = []
    oauth: bool = False
    include_optional_metadata: bool = False
    include_auth_metadata: bool = False
    include_payment_initiation_metadata: bool = False


class InstitutionsGetResponse(PlaidModel):
    institutions: List[Institution]
    total: Optional[int] = None
    request_id: Optional[str] = None


class InstitutionsGetRequest(Endpoint):
    path: ClassVar[str] = "/institutions/get"
    response_model: ClassVar[Type[BaseModel]] = InstitutionsGetResponse

    count: int
    offset: int = 0
    country_codes: List[str] = []
    options: Optional[GetInstitutionsFilter] = None
