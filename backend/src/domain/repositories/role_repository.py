"""Role repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Role
from domain.enums import RoleScope


class IRoleRepository(ABC):
    """Abstract repository interface for Role entity."""

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a new role."""
        pass

    @abstractmethod
    async def get_by_id(self, role_id: str) -> Optional[Role]:
        """Retrieve a role by ID, None if not found."""
        pass

    @abstractmethod
    async def get_by_scope_and_name(self, scope: RoleScope, name: str) -> Optional[Role]:
        """
        Retrieve a role by its natural key.

        Args:
            scope: Role scope
            name: Role name (upper case)

        Returns:
            Role if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_scope(self, scope: RoleScope) -> list[Role]:
        """Retrieve the roles of a scope."""
        pass

    @abstractmethod
    async def update(self, role: Role) -> Role:
        """Update an existing role."""
        pass

    @abstractmethod
    async def delete(self, role_id: str) -> bool:
        """
        Delete a role.

        Returns:
            True if deleted, False if not found
        """
        pass
