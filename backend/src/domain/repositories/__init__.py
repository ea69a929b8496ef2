"""Domain Repository Interfaces - Abstract definitions."""

from .application_repository import IApplicationRepository
from .subscription_repository import ISubscriptionRepository
from .api_repository import IApiRepository, IPlanRepository
from .user_repository import IUserRepository
from .role_repository import IRoleRepository
from .view_repository import IViewRepository
from .api_header_repository import IApiHeaderRepository

__all__ = [
    "IApplicationRepository",
    "ISubscriptionRepository",
    "IApiRepository",
    "IPlanRepository",
    "IUserRepository",
    "IRoleRepository",
    "IViewRepository",
    "IApiHeaderRepository",
]
