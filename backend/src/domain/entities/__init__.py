"""Domain Entities - Objects with identity."""

from .application import Application
from .subscription import Subscription
from .api import Api, Plan
from .user import User
from .role import Role
from .view import View, ALL_VIEW_KEY, to_view_key
from .api_header import ApiHeader

__all__ = [
    "Application",
    "Subscription",
    "Api",
    "Plan",
    "User",
    "Role",
    "View",
    "ALL_VIEW_KEY",
    "to_view_key",
    "ApiHeader",
]
