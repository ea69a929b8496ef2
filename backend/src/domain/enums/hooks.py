"""Notification hooks catalog.

Hooks are named trigger points a user can subscribe notifications to.
Each hook family is a closed enumeration; the descriptive metadata lives in
a single lookup table keyed by scope and hook id, since the same id may
exist in several families.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class HookScope(str, Enum):
    """Where a hook is raised from."""

    API = "API"
    APPLICATION = "APPLICATION"
    PORTAL = "PORTAL"

    def __str__(self) -> str:
        return self.value


class PortalHook(str, Enum):
    """Hooks raised by the portal itself."""

    USER_REGISTERED = "USER_REGISTERED"
    USER_FIRST_LOGIN = "USER_FIRST_LOGIN"
    PASSWORD_RESET = "PASSWORD_RESET"
    NEW_SUPPORT_TICKET = "NEW_SUPPORT_TICKET"
    GROUP_INVITATION = "GROUP_INVITATION"
    MESSAGE = "MESSAGE"


class ApplicationHook(str, Enum):
    """Hooks raised on behalf of an application."""

    SUBSCRIPTION_NEW = "SUBSCRIPTION_NEW"
    SUBSCRIPTION_ACCEPTED = "SUBSCRIPTION_ACCEPTED"
    SUBSCRIPTION_CLOSED = "SUBSCRIPTION_CLOSED"
    SUBSCRIPTION_PAUSED = "SUBSCRIPTION_PAUSED"
    SUBSCRIPTION_RESUMED = "SUBSCRIPTION_RESUMED"
    SUBSCRIPTION_REJECTED = "SUBSCRIPTION_REJECTED"
    NEW_SUPPORT_TICKET = "NEW_SUPPORT_TICKET"


AnyHook = Union[PortalHook, ApplicationHook]


@dataclass(frozen=True)
class HookInfo:
    """
    Descriptive metadata of a hook.

    Attributes:
        id: Hook identifier, unique within its scope
        scope: Family the hook belongs to
        label: Human readable name (None for technical hooks)
        description: What triggers the hook
        category: Grouping used by the notification settings UI
        hidden: Hidden hooks are never offered to users
    """

    id: str
    scope: HookScope
    label: Optional[str]
    description: Optional[str]
    category: Optional[str]
    hidden: bool = False


def _info(hook: AnyHook, scope: HookScope, label, description, category, hidden=False):
    return (scope, hook.value), HookInfo(hook.value, scope, label, description, category, hidden)


_HOOKS: dict[tuple[HookScope, str], HookInfo] = dict([
    _info(PortalHook.USER_REGISTERED, HookScope.PORTAL, "User Registered",
          "Triggered when a User is registered for the first time", "USER"),
    _info(PortalHook.USER_FIRST_LOGIN, HookScope.PORTAL, "First Login",
          "Triggered when a user log in for the first time", "USER"),
    _info(PortalHook.PASSWORD_RESET, HookScope.PORTAL, "Password Reset",
          "Triggered when a password is reset", "USER"),
    _info(PortalHook.NEW_SUPPORT_TICKET, HookScope.PORTAL, "New Support Ticket",
          "Triggered when a new support ticket is created", "SUPPORT"),
    _info(PortalHook.GROUP_INVITATION, HookScope.PORTAL, "Group invitation",
          "Triggered when a user is invited in a group", "GROUP"),
    _info(PortalHook.MESSAGE, HookScope.PORTAL, None, None, None, hidden=True),
    _info(ApplicationHook.SUBSCRIPTION_NEW, HookScope.APPLICATION, "New Subscription",
          "Triggered when a Subscription is created", "SUBSCRIPTION"),
    _info(ApplicationHook.SUBSCRIPTION_ACCEPTED, HookScope.APPLICATION, "Subscription Accepted",
          "Triggered when a Subscription is accepted", "SUBSCRIPTION"),
    _info(ApplicationHook.SUBSCRIPTION_CLOSED, HookScope.APPLICATION, "Subscription Closed",
          "Triggered when a Subscription is closed", "SUBSCRIPTION"),
    _info(ApplicationHook.SUBSCRIPTION_PAUSED, HookScope.APPLICATION, "Subscription Paused",
          "Triggered when a Subscription is paused", "SUBSCRIPTION"),
    _info(ApplicationHook.SUBSCRIPTION_RESUMED, HookScope.APPLICATION, "Subscription Resumed",
          "Triggered when a Subscription is resumed", "SUBSCRIPTION"),
    _info(ApplicationHook.SUBSCRIPTION_REJECTED, HookScope.APPLICATION, "Subscription Rejected",
          "Triggered when a Subscription is rejected", "SUBSCRIPTION"),
    _info(ApplicationHook.NEW_SUPPORT_TICKET, HookScope.APPLICATION, "New Support Ticket",
          "Triggered when a new support ticket is created", "SUPPORT"),
])

_FAMILIES: dict[HookScope, type] = {
    HookScope.PORTAL: PortalHook,
    HookScope.APPLICATION: ApplicationHook,
}


def get_hook_info(hook: AnyHook) -> HookInfo:
    """Return the metadata of a hook."""
    scope = next(scope for scope, family in _FAMILIES.items() if isinstance(hook, family))
    return _HOOKS[(scope, hook.value)]


def list_hooks(scope: HookScope, include_hidden: bool = False) -> list[HookInfo]:
    """
    List the hooks of a scope in declaration order.

    Args:
        scope: Hook family to list
        include_hidden: Whether technical hooks are included

    Returns:
        Hook metadata, hidden hooks filtered out unless requested
    """
    family = _FAMILIES.get(scope)
    if family is None:
        return []
    return [
        info
        for info in (_HOOKS[(scope, hook.value)] for hook in family)
        if include_hidden or not info.hidden
    ]
