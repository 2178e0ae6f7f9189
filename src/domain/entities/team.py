"""
Team Entity
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .team_link import TeamLink


class Team(SQLModel, table=True):
    """Team entity - team names are unique and used as filter tokens"""

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)

    # Relationships
    links: list["TeamLink"] = Relationship(back_populates="team")
