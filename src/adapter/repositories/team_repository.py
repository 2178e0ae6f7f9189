from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.team_repository import ITeamRepository
from src.domain.entities import Team


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all_ordered_by_name(self) -> List[Team]:
        """Get all teams ordered by name ascending"""
        stmt = select(Team).order_by(Team.name.asc())
        result = await self.session.exec(stmt)
        return list(result.all())
