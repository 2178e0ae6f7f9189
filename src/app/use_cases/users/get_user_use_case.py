"""
Get User Use Case

Loads a single user with memberships and teams.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MembershipInfo, TeamResponse, UserDetailResponse

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """
    Use case for loading one user.

    Business Rules:
    - Unlike listings, users without memberships are returned too
    - Returns USER_NOT_FOUND when the id is unknown
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserDetailResponse]:
        async with self.uow:
            try:
                user = await self.uow.users.get_by_id(user_id)
            except SQLAlchemyError:
                logger.exception(f"Failed to load user {user_id}")
                return Return.err(
                    Error("DATA_ACCESS_FAILURE", "Could not load user")
                )

            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                UserDetailResponse(
                    id=str(user.id),
                    name=user.name,
                    email=user.email,
                    last_login_at=user.last_login_at,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                    memberships=[
                        MembershipInfo(
                            id=str(m.id), role=m.role.value, is_guest=m.is_guest
                        )
                        for m in user.memberships
                    ],
                    teams=[
                        TeamResponse(id=str(link.team.id), name=link.team.name)
                        for link in user.team_links
                    ],
                )
            )
