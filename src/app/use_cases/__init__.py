"""
Use Cases

Use cases are organized into domain folders:
- users/: People directory listings and teams
"""

from .users import (
    FilterUsersUseCase,
    GetUserUseCase,
    ListMembersUseCase,
    ListTeamsUseCase,
)

__all__ = [
    "FilterUsersUseCase",
    "GetUserUseCase",
    "ListMembersUseCase",
    "ListTeamsUseCase",
]
