"""
User Directory DTOs (Data Transfer Objects)

Response classes for the directory use cases. Field names are snake_case in
Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Response DTOs
# ============================================================================


class MemberResponse(CamelModel):
    """A user flattened for the directory table"""

    id: str
    name: Optional[str]
    email: str
    last_login_at: Optional[datetime]
    role: Optional[str]
    is_guest: bool
    teams: List[str]


class PaginationInfo(CamelModel):
    total: int
    page: int
    limit: int
    pages: int


class PaginatedResponse(CamelModel, Generic[T]):
    data: List[T]
    pagination: PaginationInfo


class TeamResponse(CamelModel):
    id: str
    name: str


class MembershipInfo(CamelModel):
    id: str
    role: str
    is_guest: bool


class UserDetailResponse(CamelModel):
    """Single user with raw memberships and team links"""

    id: str
    name: Optional[str]
    email: str
    last_login_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    memberships: List[MembershipInfo]
    teams: List[TeamResponse]
