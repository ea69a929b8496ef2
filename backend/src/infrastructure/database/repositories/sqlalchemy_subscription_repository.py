"""SQLAlchemy implementation of subscription repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Subscription
from domain.enums import SubscriptionStatus
from domain.repositories import ISubscriptionRepository
from domain.value_objects import SubscriptionQuery
from infrastructure.database.models import SubscriptionModel


class SQLAlchemySubscriptionRepository(ISubscriptionRepository):
    """Concrete implementation of ISubscriptionRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, subscription: Subscription) -> Subscription:
        """Create a new subscription in the database."""
        model = self._entity_to_model(subscription)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, subscription_id: str) -> Optional[Subscription]:
        """Retrieve a subscription by ID."""
        model = await self.session.get(SubscriptionModel, subscription_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def search(self, query: SubscriptionQuery) -> list[Subscription]:
        """Search subscriptions matching the query."""
        stmt = select(SubscriptionModel)
        
        if query.api is not None:
            stmt = stmt.where(SubscriptionModel.api_id == query.api)
        if query.application is not None:
            stmt = stmt.where(SubscriptionModel.application_id == query.application)
        if query.applications is not None:
            stmt = stmt.where(SubscriptionModel.application_id.in_(sorted(query.applications)))
        if query.plan is not None:
            stmt = stmt.where(SubscriptionModel.plan_id == query.plan)
        if query.statuses:
            stmt = stmt.where(
                SubscriptionModel.status.in_(sorted(status.value for status in query.statuses))
            )
        
        stmt = stmt.order_by(SubscriptionModel.created_at.desc(), SubscriptionModel.id)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars()]
    
    async def update(self, subscription: Subscription) -> Subscription:
        """Update an existing subscription."""
        model = await self.session.get(SubscriptionModel, subscription.id)
        
        if model is None:
            raise ValueError(f"Subscription {subscription.id} not found")
        
        model.status = subscription.status.value
        model.request = subscription.request
        model.updated_at = subscription.updated_at
        model.processed_at = subscription.processed_at
        model.closed_at = subscription.closed_at
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: Subscription) -> SubscriptionModel:
        """Convert domain entity to ORM model."""
        return SubscriptionModel(
            id=entity.id,
            application_id=entity.application_id,
            plan_id=entity.plan_id,
            api_id=entity.api_id,
            status=entity.status.value,
            subscribed_by=entity.subscribed_by,
            request=entity.request,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            processed_at=entity.processed_at,
            closed_at=entity.closed_at,
        )
    
    def _model_to_entity(self, model: SubscriptionModel) -> Subscription:
        """Convert ORM model to domain entity."""
        return Subscription(
            id=model.id,
            application_id=model.application_id,
            plan_id=model.plan_id,
            api_id=model.api_id,
            status=SubscriptionStatus(model.status),
            subscribed_by=model.subscribed_by,
            request=model.request,
            created_at=model.created_at,
            updated_at=model.updated_at,
            processed_at=model.processed_at,
            closed_at=model.closed_at,
        )
