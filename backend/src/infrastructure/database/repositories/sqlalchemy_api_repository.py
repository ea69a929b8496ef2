"""SQLAlchemy implementations of API and plan repositories."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Api, Plan
from domain.enums import PlanValidation
from domain.repositories import IApiRepository, IPlanRepository
from infrastructure.database.models import ApiModel, PlanModel


class SQLAlchemyApiRepository(IApiRepository):
    """Concrete implementation of IApiRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, api: Api) -> Api:
        model = ApiModel(
            id=api.id,
            name=api.name,
            version=api.version,
            description=api.description,
            owner_id=api.owner_id,
            created_at=api.created_at,
            updated_at=api.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, api_id: str) -> Optional[Api]:
        model = await self.session.get(ApiModel, api_id)
        return None if model is None else self._model_to_entity(model)
    
    async def find_all(self) -> list[Api]:
        result = await self.session.execute(select(ApiModel))
        return [self._model_to_entity(model) for model in result.scalars()]
    
    def _model_to_entity(self, model: ApiModel) -> Api:
        """Convert ORM model to domain entity."""
        return Api(
            id=model.id,
            name=model.name,
            version=model.version,
            description=model.description,
            owner_id=model.owner_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyPlanRepository(IPlanRepository):
    """Concrete implementation of IPlanRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, plan: Plan) -> Plan:
        model = PlanModel(
            id=plan.id,
            api_id=plan.api_id,
            name=plan.name,
            description=plan.description,
            validation=plan.validation.value,
            created_at=plan.created_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, plan_id: str) -> Optional[Plan]:
        model = await self.session.get(PlanModel, plan_id)
        return None if model is None else self._model_to_entity(model)
    
    async def find_by_api(self, api_id: str) -> list[Plan]:
        stmt = (
            select(PlanModel)
            .where(PlanModel.api_id == api_id)
            .order_by(PlanModel.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    def _model_to_entity(self, model: PlanModel) -> Plan:
        """Convert ORM model to domain entity."""
        return Plan(
            id=model.id,
            api_id=model.api_id,
            name=model.name,
            description=model.description,
            validation=PlanValidation(model.validation),
            created_at=model.created_at,
        )
