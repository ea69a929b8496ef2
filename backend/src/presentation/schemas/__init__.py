"""Pydantic schemas for request/response validation."""

from .common_schemas import HealthResponse, ErrorResponse, ListResponse, HookResponse
from .application_schemas import (
    ApplicationInput,
    ApplicationSettingsInput,
    SimpleApplicationSettingsInput,
    OAuthClientSettingsInput,
    ApplicationResponse,
)
from .subscription_schemas import SubscriptionInput, SubscriptionResponse
from .management_schemas import (
    ApiHeaderInput,
    UpdateApiHeaderInput,
    ApiHeaderResponse,
    ViewInput,
    UpdateViewInput,
    ViewResponse,
    RoleInput,
    UpdateRoleInput,
    RoleResponse,
    NewExternalUserInput,
    UserResponse,
    ApiInput,
    ApiResponse,
    PlanInput,
    PlanResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ListResponse",
    "HookResponse",
    "ApplicationInput",
    "ApplicationSettingsInput",
    "SimpleApplicationSettingsInput",
    "OAuthClientSettingsInput",
    "ApplicationResponse",
    "SubscriptionInput",
    "SubscriptionResponse",
    "ApiHeaderInput",
    "UpdateApiHeaderInput",
    "ApiHeaderResponse",
    "ViewInput",
    "UpdateViewInput",
    "ViewResponse",
    "RoleInput",
    "UpdateRoleInput",
    "RoleResponse",
    "NewExternalUserInput",
    "UserResponse",
    "ApiInput",
    "ApiResponse",
    "PlanInput",
    "PlanResponse",
]
