"""SQLAlchemy implementation of application repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.repositories import IApplicationRepository
from domain.value_objects import ApplicationSettings
from infrastructure.database.models import ApplicationModel


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: Application) -> Application:
        """Create a new application in the database."""
        model = self._entity_to_model(application)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, application_id: str) -> Optional[Application]:
        """Retrieve an application by ID."""
        model = await self.session.get(ApplicationModel, application_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def find_by_owner(
        self,
        owner_id: str,
        status: ApplicationStatus = ApplicationStatus.ACTIVE,
    ) -> list[Application]:
        """Retrieve the applications owned by a user."""
        stmt = select(ApplicationModel).where(
            ApplicationModel.owner_id == owner_id,
            ApplicationModel.status == status.value,
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def find_all(
        self,
        status: Optional[ApplicationStatus] = None,
    ) -> list[Application]:
        """Retrieve every application."""
        stmt = select(ApplicationModel)
        if status is not None:
            stmt = stmt.where(ApplicationModel.status == status.value)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def update(self, application: Application) -> Application:
        """Update an existing application."""
        model = await self.session.get(ApplicationModel, application.id)
        
        if model is None:
            raise ValueError(f"Application {application.id} not found")
        
        self._update_model_from_entity(model, application)
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: Application) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        return ApplicationModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            owner_id=entity.owner_id,
            groups=list(entity.groups),
            picture=entity.picture,
            settings=entity.settings.to_dict(),
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _update_model_from_entity(self, model: ApplicationModel, entity: Application) -> None:
        """Update ORM model from domain entity."""
        model.name = entity.name
        model.description = entity.description
        model.groups = list(entity.groups)
        model.picture = entity.picture
        model.settings = entity.settings.to_dict()
        model.status = entity.status.value
        model.updated_at = entity.updated_at
    
    def _model_to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity."""
        return Application(
            id=model.id,
            name=model.name,
            description=model.description,
            owner_id=model.owner_id,
            groups=list(model.groups or []),
            picture=model.picture,
            settings=ApplicationSettings.from_dict(model.settings),
            status=ApplicationStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
