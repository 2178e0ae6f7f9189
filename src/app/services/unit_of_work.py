from abc import ABC, abstractmethod

from src.app.repositories.team_repository import ITeamRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access over one read-only session"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teams: ITeamRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def rollback(self):
        pass
