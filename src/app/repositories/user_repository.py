from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import User
from src.domain.user_filter import UserFilter


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID with memberships and team links loaded"""
        pass

    @abstractmethod
    async def filter_users(self, user_filter: UserFilter) -> Tuple[List[User], int]:
        """
        Get one page of users matching the filter.

        Returns:
            Tuple of (users, total)
            - users: page of users with memberships and team links loaded
            - total: count of all matching users, ignoring pagination
        """
        pass

    @abstractmethod
    async def get_members_paginated(
        self, offset: int, limit: int
    ) -> Tuple[List[User], int]:
        """Get one page of users holding at least one membership, plus total"""
        pass
