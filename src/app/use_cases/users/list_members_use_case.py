"""
List Members Use Case

Lists every user holding a membership, without filtering or sorting.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MemberResponse, PaginatedResponse
from .mapping import build_pagination, to_member

logger = logging.getLogger(__name__)


class ListMembersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, page: int = 1, limit: int = 10
    ) -> Result[PaginatedResponse[MemberResponse]]:
        async with self.uow:
            try:
                users, total = await self.uow.users.get_members_paginated(
                    offset=(page - 1) * limit, limit=limit
                )
            except SQLAlchemyError:
                logger.exception("Failed to list members")
                return Return.err(
                    Error("DATA_ACCESS_FAILURE", "Could not load members")
                )

            return Return.ok(
                PaginatedResponse[MemberResponse](
                    data=[to_member(user) for user in users],
                    pagination=build_pagination(total, page, limit),
                )
            )
