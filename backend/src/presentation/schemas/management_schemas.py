"""Management console Pydantic schemas."""

from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, EmailStr, Field, StringConstraints

from domain.entities import Api, ApiHeader, Plan, Role, User, View
from domain.enums import PlanValidation

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


# API headers

class ApiHeaderInput(BaseModel):
    """Request schema for creating an API header."""
    
    name: Name
    value: str = Field(..., description="Header value, may contain expressions")


class UpdateApiHeaderInput(ApiHeaderInput):
    """Request schema for updating an API header."""
    
    order: int = Field(..., ge=1, description="Position of the header, starting at 1")


class ApiHeaderResponse(BaseModel):
    id: str
    name: str
    value: str
    order: int
    created_at: datetime
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, header: ApiHeader) -> "ApiHeaderResponse":
        return cls(
            id=header.id,
            name=header.name,
            value=header.value,
            order=header.order,
            created_at=header.created_at,
            updated_at=header.updated_at,
        )


# Views

class ViewInput(BaseModel):
    """Request schema for creating a view."""
    
    name: Name
    description: Optional[str] = None
    hidden: bool = False
    picture: Optional[str] = Field(None, description="Picture as a data URI")


class UpdateViewInput(ViewInput):
    """Request schema for updating a view; ``id`` is required in bulk updates."""
    
    id: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)


class ViewResponse(BaseModel):
    id: str
    key: str
    name: str
    description: Optional[str] = None
    order: int
    hidden: bool
    default_view: bool
    has_picture: bool
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, view: View) -> "ViewResponse":
        return cls(
            id=view.id,
            key=view.key,
            name=view.name,
            description=view.description,
            order=view.order,
            hidden=view.hidden,
            default_view=view.default_view,
            has_picture=bool(view.picture),
            updated_at=view.updated_at,
        )


# Roles

class RoleInput(BaseModel):
    """Request schema for creating a role."""
    
    name: Name
    description: Optional[str] = None
    default_role: bool = False
    permissions: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Permission name to granted CRUD action letters"
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "REVIEWER",
                    "description": "Can read APIs and documentation",
                    "permissions": {"API_DEFINITION": ["R"], "API_DOCUMENTATION": ["R"]}
                }
            ]
        }
    }


class UpdateRoleInput(BaseModel):
    description: Optional[str] = None
    default_role: bool = False
    permissions: Optional[dict[str, list[str]]] = None


class RoleResponse(BaseModel):
    id: str
    scope: str
    name: str
    description: Optional[str] = None
    default_role: bool
    system: bool
    permissions: dict[str, list[str]]
    
    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(
            id=role.id,
            scope=role.scope.value,
            name=role.name,
            description=role.description,
            default_role=role.default_role,
            system=role.system,
            permissions=role.permissions,
        )


# Users

class NewExternalUserInput(BaseModel):
    """Request schema for registering a user from an identity provider."""
    
    firstname: Optional[str] = Field(None, max_length=255)
    lastname: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    source: Name = Field(..., description="Identity provider name")
    source_id: Name = Field(..., description="Reference of the user in the provider")
    username: Optional[str] = Field(None, max_length=255)


class UserResponse(BaseModel):
    id: str
    source: str
    source_id: str
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    display_name: str
    created_at: datetime
    
    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            source=user.source,
            source_id=user.source_id,
            username=user.username,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            display_name=user.display_name,
            created_at=user.created_at,
        )


# APIs and plans

class ApiInput(BaseModel):
    name: Name
    version: Name = "1.0"
    description: Optional[str] = None


class ApiResponse(BaseModel):
    id: str
    name: str
    version: str
    description: Optional[str] = None
    owner: Optional[str] = None
    created_at: datetime
    
    @classmethod
    def from_entity(cls, api: Api) -> "ApiResponse":
        return cls(
            id=api.id,
            name=api.name,
            version=api.version,
            description=api.description,
            owner=api.owner_id,
            created_at=api.created_at,
        )


class PlanInput(BaseModel):
    name: Name
    description: Optional[str] = None
    validation: PlanValidation = PlanValidation.MANUAL


class PlanResponse(BaseModel):
    id: str
    api: str
    name: str
    description: Optional[str] = None
    validation: str
    
    @classmethod
    def from_entity(cls, plan: Plan) -> "PlanResponse":
        return cls(
            id=plan.id,
            api=plan.api_id,
            name=plan.name,
            description=plan.description,
            validation=plan.validation.value,
        )
