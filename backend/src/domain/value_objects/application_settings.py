"""Client settings attached to an application."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SimpleApplicationSettings:
    """Settings of an application declared without an OAuth client."""

    type: Optional[str] = None
    client_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {"type": self.type, "client_id": self.client_id}


@dataclass(frozen=True)
class OAuthClientSettings:
    """
    Settings of an application backed by an OAuth client.

    Attributes:
        application_type: Kind of client (web, browser, native, backend_to_backend)
        client_id: OAuth client identifier
        client_secret: OAuth client secret
        client_uri: Home page of the client
        logo_uri: Logo of the client
        grant_types: Allowed grant types
        redirect_uris: Allowed redirect URIs
        response_types: Allowed response types
        renew_client_secret_supported: Whether the secret can be renewed
    """

    application_type: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    client_uri: Optional[str] = None
    logo_uri: Optional[str] = None
    grant_types: tuple[str, ...] = field(default_factory=tuple)
    redirect_uris: tuple[str, ...] = field(default_factory=tuple)
    response_types: tuple[str, ...] = field(default_factory=tuple)
    renew_client_secret_supported: bool = False

    def to_dict(self) -> dict:
        return {
            "application_type": self.application_type,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "client_uri": self.client_uri,
            "logo_uri": self.logo_uri,
            "grant_types": list(self.grant_types),
            "redirect_uris": list(self.redirect_uris),
            "response_types": list(self.response_types),
            "renew_client_secret_supported": self.renew_client_secret_supported,
        }


@dataclass(frozen=True)
class ApplicationSettings:
    """Either, both or none of the simple and OAuth settings."""

    app: Optional[SimpleApplicationSettings] = None
    oauth: Optional[OAuthClientSettings] = None

    @property
    def is_empty(self) -> bool:
        return self.app is None and self.oauth is None

    @property
    def client_id(self) -> Optional[str]:
        """Client id of the application, whichever settings define it."""
        if self.app is not None and self.app.client_id:
            return self.app.client_id
        if self.oauth is not None:
            return self.oauth.client_id
        return None

    def to_dict(self) -> dict:
        return {
            "app": self.app.to_dict() if self.app else None,
            "oauth": self.oauth.to_dict() if self.oauth else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ApplicationSettings":
        """Rebuild settings from their ``to_dict`` representation."""
        if not data:
            return cls()

        app = None
        if data.get("app"):
            app = SimpleApplicationSettings(**data["app"])

        oauth = None
        if data.get("oauth"):
            values = dict(data["oauth"])
            for key in ("grant_types", "redirect_uris", "response_types"):
                values[key] = tuple(values.get(key) or ())
            oauth = OAuthClientSettings(**values)

        return cls(app=app, oauth=oauth)
