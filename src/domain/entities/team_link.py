"""
TeamLink Entity

Associates a User with a Team.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utcnow

if TYPE_CHECKING:
    from .team import Team
    from .user import User


class TeamLink(SQLModel, table=True):
    """
    TeamLink entity - join between users and teams.

    Business Rules:
    - (user_id, team_id) must be unique
    - A user without team links has "no team"
    - Links are listed in creation order
    """

    __tablename__ = "team_links"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    user: "User" = Relationship(back_populates="team_links")
    team: "Team" = Relationship(back_populates="links")

    __table_args__ = (
        Index("idx_team_link_user_team", "user_id", "team_id", unique=True),
    )
