"""
List Teams Use Case

Returns all teams for the team filter, ordered by name.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TeamResponse

logger = logging.getLogger(__name__)


class ListTeamsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TeamResponse]]:
        async with self.uow:
            try:
                teams = await self.uow.teams.get_all_ordered_by_name()
            except SQLAlchemyError:
                logger.exception("Failed to list teams")
                return Return.err(
                    Error("DATA_ACCESS_FAILURE", "Could not load teams")
                )

            return Return.ok(
                [TeamResponse(id=str(team.id), name=team.name) for team in teams]
            )
