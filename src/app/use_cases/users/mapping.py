"""
Result mapping for directory listings.

Flattens users loaded with their memberships and team links into
``MemberResponse`` rows and applies the in-memory role sort.
"""

import math
from typing import Iterable, List, Optional

from src.domain.entities import ROLE_PRIORITY, Membership, SortOrder, User

from .dtos import MemberResponse, PaginationInfo


def effective_role(memberships: Iterable[Membership]) -> Optional[str]:
    """Highest-priority role across memberships, None when there are none"""
    roles = [m.role for m in memberships if m.role]
    if not roles:
        return None
    return min(roles, key=lambda role: ROLE_PRIORITY[role]).value


def to_member(user: User) -> MemberResponse:
    return MemberResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        last_login_at=user.last_login_at,
        role=effective_role(user.memberships),
        is_guest=any(m.is_guest for m in user.memberships),
        teams=[link.team.name for link in user.team_links],
    )


def sort_by_role(members: List[MemberResponse], order: SortOrder) -> List[MemberResponse]:
    """
    Sort a page by role name.

    This is a string comparison (MEMBER < OWNER < VIEWER), not role priority.
    casefold() stands in for a locale-aware compare; they agree on role names.
    Members without a role sort as the empty string.
    """
    return sorted(
        members,
        key=lambda member: (member.role or "").casefold(),
        reverse=order == SortOrder.desc,
    )


def build_pagination(total: int, page: int, limit: int) -> PaginationInfo:
    return PaginationInfo(
        total=total,
        page=page,
        limit=limit,
        pages=math.ceil(total / limit),
    )
