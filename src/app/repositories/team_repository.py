from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_all_ordered_by_name(self) -> List[Team]:
        """Get all teams ordered by name ascending"""
        pass
