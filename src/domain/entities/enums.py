"""
People Directory Domain Enums

All enumeration types used across domain entities and filters.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """Role granted by a membership"""

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"


# Lower number wins when deriving a user's effective role
ROLE_PRIORITY = {
    MembershipRole.OWNER: 1,
    MembershipRole.MEMBER: 2,
    MembershipRole.VIEWER: 3,
}


class LastLoginPeriod(str, Enum):
    """Recognised values of the lastLoginPeriod filter"""

    last_24h = "24h"
    last_7d = "7d"
    last_30d = "30d"
    never = "never"

    @property
    def days(self):
        return {"24h": 1, "7d": 7, "30d": 30}.get(self.value)


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"
