"""
User repository - builds and runs the directory listing queries.

The filter is translated into a list of SQLAlchemy predicates that are
AND-ed together; only the "no team" / team-name combination uses OR.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import LastLoginPeriod, Membership, SortOrder, Team, TeamLink, User
from src.domain.user_filter import UserFilter


def _membership_condition(user_filter: UserFilter):
    """User holds at least one membership matching the role/guest criteria"""
    criteria = []
    if user_filter.has_role_filter:
        criteria.append(Membership.role.in_(user_filter.role_values))
    # isGuest=False is not a filter
    if user_filter.is_guest:
        criteria.append(Membership.is_guest.is_(True))

    if not criteria:
        return User.memberships.any()
    return User.memberships.any(and_(*criteria))


def _team_condition(user_filter: UserFilter):
    names = user_filter.team_names
    no_team = ~User.team_links.any()
    in_teams = User.team_links.any(TeamLink.team.has(Team.name.in_(names)))

    if user_filter.wants_no_team and names:
        return or_(no_team, in_teams)
    if user_filter.wants_no_team:
        return no_team
    if names:
        return in_teams
    return None


def _last_login_condition(period: LastLoginPeriod, now: datetime):
    if period is LastLoginPeriod.never:
        return User.last_login_at.is_(None)
    return User.last_login_at >= now - timedelta(days=period.days)


def build_user_conditions(user_filter: UserFilter, now: Optional[datetime] = None) -> list:
    """Translate a filter into predicates over ``User``, to be AND-ed"""
    conditions = [_membership_condition(user_filter)]

    team_condition = _team_condition(user_filter)
    if team_condition is not None:
        conditions.append(team_condition)

    if user_filter.search:
        conditions.append(
            or_(
                User.name.contains(user_filter.search, autoescape=True),
                User.email.contains(user_filter.search, autoescape=True),
            )
        )

    period = user_filter.login_period
    if period is not None:
        conditions.append(_last_login_condition(period, now or utcnow()))

    return conditions


def build_order_by(user_filter: UserFilter) -> list:
    """Store-level ordering; empty when the sort key is derived or unknown"""
    column_name = user_filter.store_sort_column
    if column_name is None:
        return []
    column = getattr(User, column_name)
    if user_filter.order == SortOrder.desc:
        return [column.desc()]
    return [column.asc()]


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _with_relations(self, stmt):
        return stmt.options(
            selectinload(User.memberships),
            selectinload(User.team_links).selectinload(TeamLink.team),
        )

    async def _count(self, conditions: list) -> int:
        stmt = select(func.count()).select_from(User).where(*conditions)
        result = await self.session.exec(stmt)
        return result.one()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID with memberships and team links loaded"""
        stmt = self._with_relations(select(User).where(User.id == user_id))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def filter_users(self, user_filter: UserFilter) -> Tuple[List[User], int]:
        """Get one page of users matching the filter, plus the total match count"""
        conditions = build_user_conditions(user_filter)

        stmt = (
            self._with_relations(select(User).where(*conditions))
            .order_by(*build_order_by(user_filter))
            .offset(user_filter.offset)
            .limit(user_filter.limit)
        )
        result = await self.session.exec(stmt)
        users = list(result.all())

        total = await self._count(conditions)
        return users, total

    async def get_members_paginated(
        self, offset: int, limit: int
    ) -> Tuple[List[User], int]:
        """Get one page of users holding at least one membership, plus total"""
        conditions = [User.memberships.any()]

        stmt = (
            self._with_relations(select(User).where(*conditions))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        users = list(result.all())

        total = await self._count(conditions)
        return users, total
