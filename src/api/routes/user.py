"""
User Directory API Routes

Handles team listing and user filter / listing endpoints.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    FilterUsersUseCase,
    GetUserUseCase,
    ListMembersUseCase,
    ListTeamsUseCase,
)
from src.app.use_cases.users.dtos import (
    MemberResponse,
    PaginatedResponse,
    TeamResponse,
    UserDetailResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import SortOrder
from src.domain.user_filter import UserFilter

router = APIRouter(prefix="/users", tags=["Users"])


def parse_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated list, dropping empty tokens"""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Only the literal strings "true" and "false" are recognised"""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_positive_int(value: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    """Parse a page/limit value; absent, non-numeric or < 1 gives the default"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if maximum is not None:
        return min(number, maximum)
    return number


def parse_order(value: Optional[str]) -> SortOrder:
    return SortOrder.desc if value == SortOrder.desc.value else SortOrder.asc


@router.get("/teams", status_code=status.HTTP_200_OK, response_model=List[TeamResponse])
async def get_teams(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Teams

    Returns all teams ordered by name, for the team filter.

    Raises:
        - 500 Internal Server Error: Data access failure
    """
    result = await ListTeamsUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/filter",
    status_code=status.HTTP_200_OK,
    response_model=PaginatedResponse[MemberResponse],
)
async def filter_users(
    uow: UnitOfWork = Depends(get_unit_of_work),
    roles: Optional[str] = Query(None, description="Comma-separated roles"),
    is_guest: Optional[str] = Query(None, alias="isGuest"),
    teams: Optional[str] = Query(None, description="Comma-separated team names, _NO_TEAM_ for none"),
    search: Optional[str] = Query(None, description="Matches name or email"),
    last_login_period: Optional[str] = Query(None, alias="lastLoginPeriod"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort_by: str = Query("name", alias="sortBy"),
    order: Optional[str] = Query("asc"),
):
    """
    Filter Users

    Query Parameters:
        - roles: OWNER, MEMBER, VIEWER (comma-separated)
        - isGuest: "true" restricts to guests; anything else does not filter
        - teams: team names (comma-separated); _NO_TEAM_ selects users without teams
        - search: substring of name or email
        - lastLoginPeriod: 24h, 7d, 30d or never
        - page, limit: pagination; invalid values fall back to defaults
        - sortBy: name, email, lastLoginAt, createdAt, updatedAt or role
        - order: asc or desc

    Returns:
        - data: members on the requested page
        - pagination: total, page, limit, pages

    Raises:
        - 500 Internal Server Error: Data access failure
    """
    user_filter = UserFilter(
        roles=parse_csv(roles),
        is_guest=parse_bool(is_guest),
        teams=parse_csv(teams),
        search=search or None,
        last_login_period=last_login_period,
        page=parse_positive_int(page, ApplicationConfig.DEFAULT_PAGE),
        limit=parse_positive_int(
            limit, ApplicationConfig.DEFAULT_LIMIT, ApplicationConfig.MAX_PAGE_LIMIT
        ),
        sort_by=sort_by,
        order=parse_order(order),
    )

    result = await FilterUsersUseCase(uow).execute(user_filter)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/members",
    status_code=status.HTTP_200_OK,
    response_model=PaginatedResponse[MemberResponse],
)
async def get_members(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
):
    """
    List Members

    Returns every user with a membership, unfiltered and unsorted.
    """
    result = await ListMembersUseCase(uow).execute(
        page=parse_positive_int(page, ApplicationConfig.DEFAULT_PAGE),
        limit=parse_positive_int(
            limit, ApplicationConfig.DEFAULT_LIMIT, ApplicationConfig.MAX_PAGE_LIMIT
        ),
    )

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=UserDetailResponse,
)
async def get_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get User

    Raises:
        - 404 Not Found: Unknown user id
        - 422 Unprocessable Entity: Malformed user id
        - 500 Internal Server Error: Data access failure
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
