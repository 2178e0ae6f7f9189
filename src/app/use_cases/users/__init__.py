"""
User Directory Use Cases

All directory-related business logic.
"""

from .filter_users_use_case import FilterUsersUseCase
from .get_user_use_case import GetUserUseCase
from .list_members_use_case import ListMembersUseCase
from .list_teams_use_case import ListTeamsUseCase

__all__ = [
    "FilterUsersUseCase",
    "GetUserUseCase",
    "ListMembersUseCase",
    "ListTeamsUseCase",
]
