from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.team_repository import TeamRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.teams = TeamRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def rollback(self):
        await self.session.rollback()
