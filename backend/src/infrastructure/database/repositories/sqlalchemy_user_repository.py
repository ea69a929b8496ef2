"""SQLAlchemy implementation of user repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import User
from domain.repositories import IUserRepository
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(IUserRepository):
    """Concrete implementation of IUserRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, user: User) -> User:
        """Create a new user in the database."""
        model = self._entity_to_model(user)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a user by ID."""
        model = await self.session.get(UserModel, user_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_by_source(self, source: str, source_id: str) -> Optional[User]:
        """Retrieve a user by identity provider reference."""
        stmt = select(UserModel).where(
            UserModel.source == source,
            UserModel.source_id == source_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def find_all(self) -> list[User]:
        """Retrieve every user."""
        result = await self.session.execute(select(UserModel))
        return [self._model_to_entity(model) for model in result.scalars()]
    
    def _entity_to_model(self, entity: User) -> UserModel:
        """Convert domain entity to ORM model."""
        return UserModel(
            id=entity.id,
            source=entity.source,
            source_id=entity.source_id,
            username=entity.username,
            firstname=entity.firstname,
            lastname=entity.lastname,
            email=entity.email,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
    
    def _model_to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            source=model.source,
            source_id=model.source_id,
            username=model.username,
            firstname=model.firstname,
            lastname=model.lastname,
            email=model.email,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
