"""
Membership Entity

Grants a User a role and guest status.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utcnow

from .enums import MembershipRole

if TYPE_CHECKING:
    from .user import User


class Membership(SQLModel, table=True):
    """
    Membership entity - grants a role to a user, independent of teams.

    Business Rules:
    - One user can hold several memberships
    - Effective role is the highest-priority role across memberships
    - A user is a guest if any of their memberships is a guest membership
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    is_guest: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    user: "User" = Relationship(back_populates="memberships")

    __table_args__ = (Index("idx_membership_role_guest", "role", "is_guest"),)
