"""Domain Enums - Constant values used across the domain."""

from .subscription_status import SubscriptionStatus
from .application_status import ApplicationStatus
from .role_scope import RoleScope
from .plan_validation import PlanValidation
from .hooks import (
    HookScope,
    PortalHook,
    ApplicationHook,
    HookInfo,
    get_hook_info,
    list_hooks,
)

__all__ = [
    "SubscriptionStatus",
    "ApplicationStatus",
    "RoleScope",
    "PlanValidation",
    "HookScope",
    "PortalHook",
    "ApplicationHook",
    "HookInfo",
    "get_hook_info",
    "list_hooks",
]
