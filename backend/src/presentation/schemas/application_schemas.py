"""Application-related Pydantic schemas."""

from datetime import datetime
from typing import Annotated, Any, Optional
from pydantic import BaseModel, Field, StringConstraints

from domain.entities import Application
from domain.value_objects import (
    ApplicationSettings,
    OAuthClientSettings,
    SimpleApplicationSettings,
)

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class SimpleApplicationSettingsInput(BaseModel):
    """Settings of an application without OAuth client."""
    
    type: Optional[str] = Field(None, description="Free application type (web, mobile...)")
    client_id: Optional[str] = Field(None, description="Client id sent by the consumer")


class OAuthClientSettingsInput(BaseModel):
    """Settings of an application backed by an OAuth client."""
    
    application_type: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    client_uri: Optional[str] = None
    logo_uri: Optional[str] = None
    grant_types: list[str] = Field(default_factory=list)
    redirect_uris: list[str] = Field(default_factory=list)
    response_types: list[str] = Field(default_factory=list)
    renew_client_secret_supported: bool = False


class ApplicationSettingsInput(BaseModel):
    """Either or both settings kinds."""
    
    app: Optional[SimpleApplicationSettingsInput] = None
    oauth: Optional[OAuthClientSettingsInput] = None


class ApplicationInput(BaseModel):
    """Request schema for creating or updating an application."""
    
    name: Name = Field(..., description="Application name")
    description: Optional[str] = Field(None, description="Application description")
    groups: Optional[list[str]] = Field(None, description="Group ids")
    picture: Optional[str] = Field(None, description="Picture as a data URI")
    settings: Optional[ApplicationSettingsInput] = Field(None, description="Client settings")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "My mobile app",
                    "description": "Consumer of the payment APIs",
                    "settings": {"app": {"type": "mobile", "client_id": "my-client"}}
                }
            ]
        }
    }
    
    def to_settings(self) -> ApplicationSettings:
        """Convert the settings input, empty when nothing was provided."""
        if self.settings is None or (self.settings.app is None and self.settings.oauth is None):
            return ApplicationSettings()
        
        app = None
        if self.settings.app is not None:
            app = SimpleApplicationSettings(
                type=self.settings.app.type,
                client_id=self.settings.app.client_id,
            )
        
        oauth = None
        if self.settings.oauth is not None:
            oauth_input = self.settings.oauth
            oauth = OAuthClientSettings(
                application_type=oauth_input.application_type,
                client_id=oauth_input.client_id,
                client_secret=oauth_input.client_secret,
                client_uri=oauth_input.client_uri,
                logo_uri=oauth_input.logo_uri,
                grant_types=tuple(oauth_input.grant_types),
                redirect_uris=tuple(oauth_input.redirect_uris),
                response_types=tuple(oauth_input.response_types),
                renew_client_secret_supported=oauth_input.renew_client_secret_supported,
            )
        
        return ApplicationSettings(app=app, oauth=oauth)


class ApplicationResponse(BaseModel):
    """Response schema for an application."""
    
    id: str
    name: str
    description: Optional[str] = None
    type: str
    owner: Optional[str] = None
    groups: list[str] = Field(default_factory=list)
    settings: dict[str, Any] = Field(default_factory=dict)
    status: str
    created_at: datetime
    updated_at: datetime
    links: dict[str, str] = Field(default_factory=dict, alias="_links")
    
    model_config = {"populate_by_name": True}
    
    @classmethod
    def from_entity(cls, application: Application, base_path: Optional[str] = None) -> "ApplicationResponse":
        """
        Build the response, with links when the resource path is known.

        Args:
            application: Application entity
            base_path: Absolute URL of the application resource
        """
        links = {}
        if base_path:
            links = {
                "self": base_path,
                "picture": f"{base_path}/picture?{int(application.updated_at.timestamp() * 1000)}",
            }
        return cls(
            id=application.id,
            name=application.name,
            description=application.description,
            type=application.type,
            owner=application.owner_id,
            groups=list(application.groups),
            settings=application.settings.to_dict(),
            status=application.status.value,
            created_at=application.created_at,
            updated_at=application.updated_at,
            links=links,
        )
