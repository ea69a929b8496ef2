"""SQLAlchemy implementations of role, view and API header repositories."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import ApiHeader, Role, View
from domain.enums import RoleScope
from domain.repositories import IApiHeaderRepository, IRoleRepository, IViewRepository
from infrastructure.database.models import ApiHeaderModel, RoleModel, ViewModel


class SQLAlchemyRoleRepository(IRoleRepository):
    """Concrete implementation of IRoleRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, role: Role) -> Role:
        model = RoleModel(
            id=role.id,
            scope=role.scope.value,
            name=role.name,
            description=role.description,
            default_role=role.default_role,
            system=role.system,
            permissions=dict(role.permissions),
            created_at=role.created_at,
            updated_at=role.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, role_id: str) -> Optional[Role]:
        model = await self.session.get(RoleModel, role_id)
        return None if model is None else self._model_to_entity(model)
    
    async def get_by_scope_and_name(self, scope: RoleScope, name: str) -> Optional[Role]:
        stmt = select(RoleModel).where(RoleModel.scope == scope.value, RoleModel.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._model_to_entity(model)
    
    async def find_by_scope(self, scope: RoleScope) -> list[Role]:
        stmt = select(RoleModel).where(RoleModel.scope == scope.value)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def update(self, role: Role) -> Role:
        model = await self.session.get(RoleModel, role.id)
        
        if model is None:
            raise ValueError(f"Role {role.id} not found")
        
        model.description = role.description
        model.default_role = role.default_role
        model.permissions = dict(role.permissions)
        model.updated_at = role.updated_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def delete(self, role_id: str) -> bool:
        model = await self.session.get(RoleModel, role_id)
        
        if model is None:
            return False
        
        await self.session.delete(model)
        await self.session.flush()
        return True
    
    def _model_to_entity(self, model: RoleModel) -> Role:
        """Convert ORM model to domain entity."""
        return Role(
            id=model.id,
            scope=RoleScope(model.scope),
            name=model.name,
            description=model.description,
            default_role=model.default_role,
            system=model.system,
            permissions={k: list(v) for k, v in (model.permissions or {}).items()},
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyViewRepository(IViewRepository):
    """Concrete implementation of IViewRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, view: View) -> View:
        model = ViewModel(
            id=view.id,
            key=view.key,
            name=view.name,
            description=view.description,
            order=view.order,
            hidden=view.hidden,
            default_view=view.default_view,
            picture=view.picture,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, view_id: str) -> Optional[View]:
        model = await self.session.get(ViewModel, view_id)
        return None if model is None else self._model_to_entity(model)
    
    async def get_by_key(self, key: str) -> Optional[View]:
        result = await self.session.execute(select(ViewModel).where(ViewModel.key == key))
        model = result.scalar_one_or_none()
        return None if model is None else self._model_to_entity(model)
    
    async def find_all(self) -> list[View]:
        result = await self.session.execute(select(ViewModel))
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def update(self, view: View) -> View:
        model = await self.session.get(ViewModel, view.id)
        
        if model is None:
            raise ValueError(f"View {view.id} not found")
        
        model.name = view.name
        model.description = view.description
        model.order = view.order
        model.hidden = view.hidden
        model.default_view = view.default_view
        model.picture = view.picture
        model.updated_at = view.updated_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def delete(self, view_id: str) -> bool:
        model = await self.session.get(ViewModel, view_id)
        
        if model is None:
            return False
        
        await self.session.delete(model)
        await self.session.flush()
        return True
    
    def _model_to_entity(self, model: ViewModel) -> View:
        """Convert ORM model to domain entity."""
        return View(
            id=model.id,
            key=model.key,
            name=model.name,
            description=model.description,
            order=model.order,
            hidden=model.hidden,
            default_view=model.default_view,
            picture=model.picture,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyApiHeaderRepository(IApiHeaderRepository):
    """Concrete implementation of IApiHeaderRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, header: ApiHeader) -> ApiHeader:
        model = ApiHeaderModel(
            id=header.id,
            name=header.name,
            value=header.value,
            order=header.order,
            created_at=header.created_at,
            updated_at=header.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, header_id: str) -> Optional[ApiHeader]:
        model = await self.session.get(ApiHeaderModel, header_id)
        return None if model is None else self._model_to_entity(model)
    
    async def find_all(self) -> list[ApiHeader]:
        result = await self.session.execute(select(ApiHeaderModel).order_by(ApiHeaderModel.order))
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def update(self, header: ApiHeader) -> ApiHeader:
        model = await self.session.get(ApiHeaderModel, header.id)
        
        if model is None:
            raise ValueError(f"API header {header.id} not found")
        
        model.name = header.name
        model.value = header.value
        model.order = header.order
        model.updated_at = header.updated_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def delete(self, header_id: str) -> bool:
        model = await self.session.get(ApiHeaderModel, header_id)
        
        if model is None:
            return False
        
        await self.session.delete(model)
        await self.session.flush()
        return True
    
    def _model_to_entity(self, model: ApiHeaderModel) -> ApiHeader:
        """Convert ORM model to domain entity."""
        return ApiHeader(
            id=model.id,
            name=model.name,
            value=model.value,
            order=model.order,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
