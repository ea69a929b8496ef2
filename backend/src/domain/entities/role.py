"""Role entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import RoleScope


@dataclass
class Role:
    """
    A named set of permissions within a scope.

    ``permissions`` maps a permission name (e.g. "APPLICATION_SUBSCRIPTION")
    to the CRUD action letters granted on it (e.g. ["C", "R"]).
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    scope: RoleScope = RoleScope.ENVIRONMENT
    name: str = ""
    description: Optional[str] = None
    default_role: bool = False
    system: bool = False
    permissions: dict[str, list[str]] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Role name cannot be empty")
        self.name = self.name.strip().upper()

    def touch(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()
