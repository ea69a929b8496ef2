"""SQLAlchemy ORM models."""

from .application_model import ApplicationModel
from .subscription_model import SubscriptionModel
from .api_model import ApiModel, PlanModel
from .user_model import UserModel
from .configuration_models import RoleModel, ViewModel, ApiHeaderModel

__all__ = [
    "ApplicationModel",
    "SubscriptionModel",
    "ApiModel",
    "PlanModel",
    "UserModel",
    "RoleModel",
    "ViewModel",
    "ApiHeaderModel",
]
