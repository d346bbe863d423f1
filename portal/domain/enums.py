"""Domain enumerations for the portal.

Role names and their privilege levels, plus the department wildcard.
"""

from enum import Enum

# Sentinel department meaning "every department".
ALL_DEPARTMENTS = "All"


class RoleName(str, Enum):
    """Built-in role names, most privileged first.

    Role rows carry their own numeric level; this map is used where only a
    name is stored (document access_level, channel required_role).
    """

    ADMINISTRATOR = "Administrator"
    SENIOR_VP = "Senior VP"
    VP = "VP"
    OFFICER = "Officer"
    EMPLOYEE = "Employee"

    @property
    def level(self) -> int:
        """Numeric level (1 is the most privileged)."""
        return _ROLE_LEVELS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Return all role names as strings."""
        return [role.value for role in cls]


_ROLE_LEVELS: dict[RoleName, int] = {
    RoleName.ADMINISTRATOR: 1,
    RoleName.SENIOR_VP: 2,
    RoleName.VP: 3,
    RoleName.OFFICER: 4,
    RoleName.EMPLOYEE: 5,
}

# Level assigned to unknown role names (less privileged than every built-in role).
UNKNOWN_ROLE_LEVEL = 6

