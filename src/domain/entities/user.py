"""
User Entity

Represents a person listed in the directory.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utcnow

if TYPE_CHECKING:
    from .membership import Membership
    from .team_link import TeamLink


class User(SQLModel, table=True):
    """
    User entity - a person in the people directory.

    Business Rules:
    - Email must be unique across all users
    - Only users holding at least one membership are listed
    - last_login_at is None for users that never logged in
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: Optional[str] = Field(default=None, max_length=255, index=True)
    email: str = Field(unique=True, index=True, max_length=255)

    # Timestamps
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="user")
    team_links: list["TeamLink"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"order_by": "TeamLink.created_at"},
    )
