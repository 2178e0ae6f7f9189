"""
Filter Users Use Case

Lists directory members matching role, guest, team, search and last-login
filters, one page at a time.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.user_filter import UserFilter

from .dtos import MemberResponse, PaginatedResponse
from .mapping import build_pagination, sort_by_role, to_member

logger = logging.getLogger(__name__)


class FilterUsersUseCase:
    """
    Use case for filtering directory members.

    Business Rules:
    - Only users with at least one membership are listed
    - All active filters combine with AND
    - "No team" and named teams combine with OR
    - isGuest=False does not filter
    - Sorting by role happens after mapping, within the page
    - Unknown sort keys leave the store order unchanged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_filter: UserFilter
    ) -> Result[PaginatedResponse[MemberResponse]]:
        """
        Execute filter users use case.

        Args:
            user_filter: Normalised filter, sort and pagination criteria

        Returns:
            Result with the page of members and pagination metadata, or Error
        """
        async with self.uow:
            try:
                users, total = await self.uow.users.filter_users(user_filter)
            except SQLAlchemyError:
                logger.exception("Failed to filter users")
                return Return.err(
                    Error("DATA_ACCESS_FAILURE", "Could not load users")
                )

            members = [to_member(user) for user in users]
            if user_filter.sorts_by_role:
                members = sort_by_role(members, user_filter.order)

            logger.debug(
                f"Filtered users: {len(members)} of {total} "
                f"(page={user_filter.page}, limit={user_filter.limit})"
            )

            return Return.ok(
                PaginatedResponse[MemberResponse](
                    data=members,
                    pagination=build_pagination(
                        total, user_filter.page, user_filter.limit
                    ),
                )
            )
