"""
User Filter

Validated criteria for the user-listing query. Parsing of raw query-string
values happens in the API layer; this model only normalises them.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .entities.enums import LastLoginPeriod, MembershipRole, SortOrder

NO_TEAM = "_NO_TEAM_"
NO_TEAM_ALIASES = frozenset({NO_TEAM, "NO_TEAM"})

# Sort keys the store can order by, mapped to User column names
STORE_SORT_FIELDS = {
    "name": "name",
    "email": "email",
    "lastLoginAt": "last_login_at",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
ROLE_SORT_FIELD = "role"


class UserFilter(BaseModel):
    roles: List[str] = Field(default_factory=list)
    is_guest: Optional[bool] = None
    teams: List[str] = Field(default_factory=list)
    search: Optional[str] = None
    last_login_period: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    sort_by: str = "name"
    order: SortOrder = SortOrder.asc

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def has_role_filter(self) -> bool:
        return len(self.roles) > 0

    @property
    def role_values(self) -> List[MembershipRole]:
        """Requested roles that exist; tokens are case-sensitive and unknown ones match nothing"""
        known = {role.value for role in MembershipRole}
        return [MembershipRole(r) for r in self.roles if r in known]

    @property
    def wants_no_team(self) -> bool:
        return any(team in NO_TEAM_ALIASES for team in self.teams)

    @property
    def team_names(self) -> List[str]:
        return [team for team in self.teams if team not in NO_TEAM_ALIASES]

    @property
    def login_period(self) -> Optional[LastLoginPeriod]:
        try:
            return LastLoginPeriod(self.last_login_period)
        except ValueError:
            return None

    @property
    def store_sort_column(self) -> Optional[str]:
        """Column to ORDER BY, or None when the key cannot be pushed to the store"""
        return STORE_SORT_FIELDS.get(self.sort_by)

    @property
    def sorts_by_role(self) -> bool:
        return self.sort_by == ROLE_SORT_FIELD
