"""
People Directory Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ROLE_PRIORITY,
    LastLoginPeriod,
    MembershipRole,
    SortOrder,
)

# Export all entities
from .user import User
from .membership import Membership
from .team import Team
from .team_link import TeamLink

__all__ = [
    # Enums
    "ROLE_PRIORITY",
    "LastLoginPeriod",
    "MembershipRole",
    "SortOrder",
    # Entities
    "User",
    "Membership",
    "Team",
    "TeamLink",
]
