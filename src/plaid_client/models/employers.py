"""
Employer search, used with Deposit Switch.
"""

from typing import ClassVar, List, Optional, Type

from pydantic import BaseModel

from .common import Endpoint, PlaidModel


class Address(PlaidModel):
    city: str
    region: Optional[str] = None
    street: str
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Employer(PlaidModel):
    employer_id: str
    name: str
    address: Optional[Address] = None
    confidence_score: float


class SearchEmployerResponse(PlaidModel):
    employers: List[Employer]
    request_id: str


class SearchEmployerRequest(Endpoint):
    path: ClassVar[str] = "/employers/search"
    response_model: ClassVar[Type[BaseModel]] = SearchEmployerResponse

    query: str
    # Must be ["deposit_switch"].
    products: List[str] = ["deposit_switch"]
