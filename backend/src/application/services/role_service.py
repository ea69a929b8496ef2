"""Role service."""

from typing import Optional

from domain.entities import Role
from domain.enums import RoleScope
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IRoleRepository
from infrastructure.config import get_logger


class RoleService:
    """Manage the roles of each scope."""

    def __init__(self, role_repository: IRoleRepository):
        self.role_repo = role_repository
        self.logger = get_logger(self.__class__.__name__)

    async def create(
        self,
        scope: RoleScope,
        name: str,
        description: Optional[str] = None,
        default_role: bool = False,
        permissions: Optional[dict[str, list[str]]] = None,
    ) -> Role:
        """
        Create a role in a scope.

        Raises:
            ManagementError: ROLE_ALREADY_EXISTS when the scope already has a
                role of that name
        """
        role = Role(
            scope=scope,
            name=name,
            description=description,
            default_role=default_role,
            permissions=dict(permissions or {}),
        )
        if await self.role_repo.get_by_scope_and_name(scope, role.name) is not None:
            raise ManagementError.of(ErrorKind.ROLE_ALREADY_EXISTS, scope=scope.value, name=role.name)

        if role.default_role:
            await self._clear_default(scope)

        created = await self.role_repo.create(role)
        self.logger.info(f"Role [{scope.value},{created.name}] created")
        return created

    async def find_by_scope(self, scope: RoleScope) -> list[Role]:
        roles = await self.role_repo.find_by_scope(scope)
        return sorted(roles, key=lambda r: r.name)

    async def get(self, scope: RoleScope, name: str) -> Role:
        """
        Get a role by scope and name.

        Raises:
            ManagementError: ROLE_NOT_FOUND
        """
        role = await self.role_repo.get_by_scope_and_name(scope, name.upper())
        if role is None:
            raise ManagementError.of(ErrorKind.ROLE_NOT_FOUND, role=f"{scope.value},{name.upper()}")
        return role

    async def update(
        self,
        scope: RoleScope,
        name: str,
        description: Optional[str] = None,
        default_role: bool = False,
        permissions: Optional[dict[str, list[str]]] = None,
    ) -> Role:
        role = await self.get(scope, name)
        if default_role and not role.default_role:
            await self._clear_default(scope)
        role.description = description
        role.default_role = default_role
        if permissions is not None:
            role.permissions = dict(permissions)
        role.touch()
        return await self.role_repo.update(role)

    async def delete(self, scope: RoleScope, name: str) -> None:
        """
        Delete a role.

        Raises:
            ManagementError: ROLE_NOT_FOUND, or ROLE_DELETION_FORBIDDEN for
                system roles
        """
        role = await self.get(scope, name)
        if role.system:
            raise ManagementError.of(ErrorKind.ROLE_DELETION_FORBIDDEN, scope=scope.value, name=role.name)
        await self.role_repo.delete(role.id)
        self.logger.info(f"Role [{scope.value},{role.name}] deleted")

    async def _clear_default(self, scope: RoleScope) -> None:
        """Only one default role per scope."""
        for role in await self.role_repo.find_by_scope(scope):
            if role.default_role:
                role.default_role = False
                role.touch()
                await self.role_repo.update(role)
