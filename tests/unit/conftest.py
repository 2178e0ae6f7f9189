import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import Membership, MembershipRole, Team, TeamLink, User


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.filter_users = AsyncMock()
    uow.users.get_members_paginated = AsyncMock()
    uow.users.get_by_id = AsyncMock()

    uow.teams = MagicMock()
    uow.teams.get_all_ordered_by_name = AsyncMock()
    return uow


@pytest.fixture
def make_user():
    """Build a transient User with memberships and team links"""

    def _make_user(name, roles=(), guest_roles=(), teams=(), email=None, last_login_at=None):
        user = User(
            name=name,
            email=email or f"{(name or 'anon').lower()}@example.com",
            last_login_at=last_login_at,
        )
        user.memberships = [Membership(role=MembershipRole(r), is_guest=False) for r in roles] + [
            Membership(role=MembershipRole(r), is_guest=True) for r in guest_roles
        ]
        user.team_links = [TeamLink(team=Team(name=team)) for team in teams]
        return user

    return _make_user
