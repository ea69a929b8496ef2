"""Schemas shared by every resource."""

from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

from domain.enums import HookInfo

T = TypeVar("T")


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    database: str = Field(..., description="Database status: up or down")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "production",
                    "database": "up"
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error envelope returned for every domain error."""
    
    message: str = Field(..., description="Human readable message")
    http_status: int = Field(..., description="HTTP status code")
    technicalCode: str = Field(..., description="Machine readable error code")
    parameters: dict[str, str] = Field(default_factory=dict, description="Error parameters")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Role [API,OWNER] already exists.",
                    "http_status": 400,
                    "technicalCode": "role.exists",
                    "parameters": {"scope": "API", "name": "OWNER"}
                }
            ]
        }
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list envelope."""
    
    data: list[T] = Field(default_factory=list, description="Items of the current page")
    metadata: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Side-channel data: totals, pagination and resource specific maps"
    )
    links: dict[str, str] = Field(default_factory=dict, description="Navigation links")


class HookResponse(BaseModel):
    """A notification hook."""
    
    id: str
    scope: str
    label: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    hidden: bool = False
    
    @classmethod
    def from_info(cls, info: HookInfo) -> "HookResponse":
        return cls(
            id=info.id,
            scope=info.scope.value,
            label=info.label,
            description=info.description,
            category=info.category,
            hidden=info.hidden,
        )
