"""Scopes a role can be defined for."""

from enum import Enum


class RoleScope(str, Enum):
    """Scope of a role: where its permissions apply."""

    ORGANIZATION = "ORGANIZATION"
    ENVIRONMENT = "ENVIRONMENT"
    API = "API"
    APPLICATION = "APPLICATION"
    GROUP = "GROUP"

    def __str__(self) -> str:
        return self.value
