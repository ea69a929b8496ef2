"""Repository implementations."""

from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_subscription_repository import SQLAlchemySubscriptionRepository
from .sqlalchemy_api_repository import SQLAlchemyApiRepository, SQLAlchemyPlanRepository
from .sqlalchemy_user_repository import SQLAlchemyUserRepository
from .sqlalchemy_configuration_repositories import (
    SQLAlchemyRoleRepository,
    SQLAlchemyViewRepository,
    SQLAlchemyApiHeaderRepository,
)

__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemySubscriptionRepository",
    "SQLAlchemyApiRepository",
    "SQLAlchemyPlanRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyRoleRepository",
    "SQLAlchemyViewRepository",
    "SQLAlchemyApiHeaderRepository",
]
